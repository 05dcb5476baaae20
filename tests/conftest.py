import threading

import pytest
import requests


#============================================
class FakeResponse:
    """
    Minimal stand-in for requests.Response.
    """

    def __init__(self, payload=None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


#============================================
class FakeHttp:
    """
    Records outbound calls and replays queued responses per method,
    optionally pinned to one URL when calls may race. When get_barrier
    is set, every GET waits on it before answering.
    """

    def __init__(self):
        self.calls = []
        self.lock = threading.Lock()
        self.responses = {"GET": [], "PATCH": []}
        self.get_barrier = None

    def queue(self, method: str, response, url: str = None) -> None:
        self.responses[method].append((url, response))

    def _next(self, method: str, url: str, **kwargs):
        with self.lock:
            self.calls.append((method, url, kwargs))
            queued = self.responses[method]
            matches = [index for index, (expected, _) in enumerate(queued) if expected in (None, url)]
            if not matches:
                raise AssertionError(f"unexpected {method} {url}")
            _, response = queued.pop(matches[0])
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        if self.get_barrier is not None:
            self.get_barrier.wait()
        return self._next("GET", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._next("PATCH", url, **kwargs)

    def methods(self) -> list:
        return [method for method, _, _ in self.calls]


#============================================
@pytest.fixture
def fake_http(monkeypatch):
    """
    Route requests.get and requests.patch through a FakeHttp recorder.
    """
    http = FakeHttp()
    monkeypatch.setattr(requests, "get", http.get)
    monkeypatch.setattr(requests, "patch", http.patch)
    return http
