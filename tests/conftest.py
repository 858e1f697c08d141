import json

import pytest
import requests

from registry_proxy import create_app
from registry_proxy.adapters import opencorporates_adapter


class ProxyTestConfig:
    TESTING = True
    ENV = "production"
    OPEN_CORPORATES_KEY = "test-token"
    OPEN_CORPORATES_URL = "https://api.example.test/"
    OPEN_CORPORATES_API_VERSION = "v0.4"
    EXTERNAL_REQUEST_TIMEOUT = None
    HTTP_PROXY = ""
    HTTPS_PROXY = ""
    LOG_LEVEL = "WARNING"
    PORT = 3000


def make_response(status_code=200, body=None, text=None):
    r = requests.Response()
    r.status_code = status_code
    if text is None:
        text = json.dumps(body)
    r._content = text.encode("utf-8")
    r.encoding = "utf-8"
    r.headers["Content-Type"] = "application/json"
    return r


class FakeSession:
    """Stands in for requests.Session; records calls and replays one response."""

    def __init__(self):
        self.calls = []
        self.response = make_response(200, {"results": {}})
        self.error = None
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.closed = True

    def reply(self, status_code=200, body=None, text=None):
        self.response = make_response(status_code, body, text)

    def fail(self, error):
        self.error = error

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def upstream(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(opencorporates_adapter, "requests_session", lambda: session)
    return session


@pytest.fixture
def app(upstream):
    app = create_app(ProxyTestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
