import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture(autouse=True)
def no_env_keys(monkeypatch):
    for name in ("GEMINI_API_KEY", "FOURSQUARE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
