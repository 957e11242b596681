import threading
import time

from fastapi.testclient import TestClient

from siteserver.storage import PingCounter, counter


def test_ping_counts_up(client: TestClient):
    assert client.get("/ping").text == "pong 1"
    assert client.get("/ping").text == "pong 2"
    assert counter.value == 2


def test_counter_increment_is_thread_safe():
    shared = PingCounter()

    def bump():
        for _ in range(1000):
            shared.increment()

    threads = [threading.Thread(target=bump) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert shared.value == 4000
    shared.reset()
    assert shared.increment() == 1


def test_slow_waits_before_answering(client: TestClient):
    started = time.monotonic()
    resp = client.get("/slow")

    assert resp.status_code == 200
    assert resp.text == "Sorry, that was slow"
    assert time.monotonic() - started >= 0.2
