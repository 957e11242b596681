import logging
import time

import pytest
from fastapi.testclient import TestClient

from siteserver import pages


@pytest.mark.parametrize(
    ("path", "body"),
    [
        ("/", pages.INDEX_HTML),
        ("/other", pages.OTHER_HTML),
        ("/embed-youtube", pages.EMBED_YOUTUBE_HTML),
        ("/ping-main-html", pages.PING_MAIN_HTML),
        ("/ping-html", pages.PING_HTML),
        ("/textbox", pages.TEXTBOX_HTML),
        ("/dialogbox", pages.DIALOGBOX_HTML),
    ],
)
def test_html_pages(client: TestClient, path: str, body: str):
    resp = client.get(path)

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text == body


def test_index_links_and_websocket_widget(client: TestClient):
    html = client.get("/").text

    for anchor in ('id="csp"', 'id="other"', 'id="protected"', 'id="slow"', 'id="dialogbox"'):
        assert anchor in html
    assert "/ws/echo" in html
    assert 'id="prolongNetworkIdleLoad"' in html


def test_index_echoes_authenticated_user_header(client: TestClient):
    resp = client.get("/", headers={"x-authenticated-user": "alice"})

    assert resp.headers["x-authenticated-user"] == "alice"


def test_index_without_authenticated_user_header(client: TestClient):
    resp = client.get("/")

    assert "x-authenticated-user" not in resp.headers


def test_other_sets_test_cookie(client: TestClient):
    resp = client.get("/other")

    assert resp.headers["set-cookie"] == 'hello-world-go="this is a test cookie, yum!"; Max-Age=3600'
    assert "<title>Other page</title>" in resp.text


def test_csp_header(client: TestClient):
    resp = client.get("/csp")

    assert resp.status_code == 200
    assert resp.headers["content-security-policy"] == "default-src https:"
    assert resp.text == "Hello, CSP tester"


def test_robots_txt(client: TestClient):
    resp = client.get("/robots.txt")

    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "User-agent: *\nDisallow: /"


def test_ping_js_served_as_javascript(client: TestClient):
    resp = client.get("/ping.js")

    assert resp.headers["content-type"].startswith("application/javascript")
    assert "ping.js loaded from server" in resp.text


def test_dialogbox_handles_every_dialog_type(client: TestClient):
    html = client.get("/dialogbox", params={"dialogType": "confirm"}).text

    for case in ('case "confirm"', 'case "prompt"', 'case "beforeunload"', 'case "alert"'):
        assert case in html


def test_unknown_path_is_plain_text_404(client: TestClient):
    resp = client.get("/does-not-exist")

    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("text/plain")


def test_index_logs_authenticated_user(client: TestClient, caplog):
    with caplog.at_level(logging.INFO, logger="siteserver.main"):
        client.get("/", headers={"x-authenticated-user": "alice"})

    assert "x-authenticated-user header present in call to index" in caplog.text
    assert "alice" in caplog.text


def test_ping_js_waits_before_answering(client: TestClient):
    started = time.monotonic()
    resp = client.get("/ping.js")

    assert resp.status_code == 200
    assert time.monotonic() - started >= 0.2


@pytest.mark.parametrize("path", ["/", "/other", "/csp", "/robots.txt", "/dialogbox", "/ping"])
def test_head_is_answered(client: TestClient, path: str):
    resp = client.head(path)

    assert resp.status_code == 200
    assert "content-type" in resp.headers


def test_head_on_protected_still_requires_auth(client: TestClient):
    resp = client.head("/protected")

    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == 'Basic realm="restricted", charset="UTF-8"'


def test_post_is_rejected(client: TestClient):
    assert client.post("/").status_code == 405
