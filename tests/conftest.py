import math
import os

import django
import pytest
import requests

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "directions_backend.settings")
django.setup()

from routing.geodesy import EARTH_RADIUS_KM  # noqa: E402
from routing.models import Coordinate  # noqa: E402

# meters per degree of latitude on the haversine sphere
METERS_PER_DEGREE = EARTH_RADIUS_KM * 1000 * math.pi / 180


class FakeResponse:
    """Just enough of requests.Response for the provider clients."""

    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeHTTP:
    """
    Replaces requests.get / requests.post.
    Queued items are returned (or raised, for exceptions) in order; an empty
    queue means the test did not expect any network activity.
    """

    def __init__(self):
        self.calls = []
        self.get_responses = []
        self.post_responses = []

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self._next(self.get_responses, "GET", url)

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self._next(self.post_responses, "POST", url)

    @staticmethod
    def _next(queue, method, url):
        if not queue:
            raise AssertionError(f"unexpected {method} {url}")
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_http(monkeypatch):
    http = FakeHTTP()
    monkeypatch.setattr(requests, "get", http.get)
    monkeypatch.setattr(requests, "post", http.post)
    return http


@pytest.fixture(autouse=True)
def routing_env(monkeypatch):
    # keep a developer's .env from turning tests into live provider calls
    monkeypatch.delenv("OPENROUTESERVICE_API_KEY", raising=False)
    monkeypatch.setenv("OSRM_BASE_URL", "http://osrm.test")
    monkeypatch.setenv("OPENROUTESERVICE_BASE_URL", "http://ors.test")
    monkeypatch.setenv("ROUTING_ENABLED", "true")
    monkeypatch.setenv("ROUTING_TIMEOUT_S", "5")


def coordinate_of(point):
    return Coordinate(point.latitude, point.longitude)


def meridian_polyline(*distances_m, longitude=0.0):
    """
    Coordinates on a meridian at the given cumulative distances (meters),
    so haversine segment lengths are the differences between them.
    """
    return [Coordinate(d / METERS_PER_DEGREE, longitude) for d in distances_m]


@pytest.fixture
def polyline_120m():
    # 3 vertices, two 60 m segments
    return meridian_polyline(0, 60, 120)


def osrm_payload(polyline, distance_m):
    return {
        "code": "Ok",
        "routes": [{
            "distance": distance_m,
            "duration": distance_m / 5,
            "geometry": {
                "type": "LineString",
                "coordinates": [[c.longitude, c.latitude] for c in polyline],
            },
        }],
    }


def ors_payload(polyline, distance_m):
    return {
        "routes": [{
            "summary": {"distance": distance_m, "duration": distance_m / 5},
            "geometry": {"coordinates": [[c.longitude, c.latitude] for c in polyline]},
        }],
    }
