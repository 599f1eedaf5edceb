import pytest
from unittest.mock import Mock, patch

import requests

from app import create_app

IPINFO_PREFIX = "https://ipinfo.io/"
OWM_URL = "https://api.openweathermap.org/data/2.5/weather"


def _response(status_code=200, payload=None, json_error=False):
    resp = Mock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "", 0)
    else:
        resp.json.return_value = payload
    return resp


class FakeUpstream:
    """Stands in for requests.get; answers per host and records calls."""

    def __init__(self, geo=None, weather=None):
        self.geo = geo if geo is not None else _response(payload={"city": "Paris"})
        self.weather = weather if weather is not None else _response(payload={"main": {"temp": 18.3}})
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        answer = self.geo if url.startswith(IPINFO_PREFIX) else self.weather
        if isinstance(answer, Exception):
            raise answer
        return answer

    def urls(self):
        return [c[0] for c in self.calls]

    def weather_calls(self):
        return [c for c in self.calls if c[0] == OWM_URL]


@pytest.fixture
def upstream():
    fake = FakeUpstream()
    with patch("requests.get", side_effect=fake):
        yield fake


@pytest.fixture
def make_client():
    def _make(**overrides):
        cfg = {
            "TESTING": True,
            "WEATHER_API_KEY": "test-key",
            "IPINFO_TOKEN": "",
            "FALLBACK_IP": "8.8.8.8",
            "TRUST_PROXY_HEADERS": False,
            "REQUEST_TIMEOUT": 5,
        }
        cfg.update(overrides)
        return create_app(cfg).test_client()
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def make_response():
    """Builds canned requests.Response stand-ins."""
    return _response
