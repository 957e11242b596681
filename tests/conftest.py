import pytest
from fastapi.testclient import TestClient

from siteserver.config import Settings, get_settings
from siteserver.main import app
from siteserver.storage import counter

USERNAME = "admin"
PASSWORD = "s3cret:with:colons"


@pytest.fixture
def settings() -> Settings:
    return Settings(auth_username=USERNAME, auth_password=PASSWORD, tls_enabled=False)


@pytest.fixture
def client(settings: Settings):
    app.dependency_overrides[get_settings] = lambda: settings
    counter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
