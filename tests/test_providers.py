import polyline as polyline_codec
import pytest
import requests

from routing.config import RoutingServiceOptions
from routing.errors import InvalidRouteData, OpenRouteServiceError, OSRMError
from routing.models import Coordinate, RouteRequest, TravelMode
from routing.openrouteservice_client import OpenRouteServiceClient
from routing.osrm_client import OSRMClient
from routing.profiles import openrouteservice_profile, osrm_profile
from routing.route_sources import (
    FreeProviderSource,
    KeyedProviderSource,
    NoRouteSource,
    build_route_sources,
)

from conftest import FakeResponse, meridian_polyline, ors_payload, osrm_payload

START = Coordinate(52.517037, 13.388860)
END = Coordinate(52.529407, 13.397634)


@pytest.fixture
def osrm():
    return OSRMClient(base_url="http://osrm.test", timeout=5)


@pytest.fixture
def ors():
    return OpenRouteServiceClient(api_key="secret-key", base_url="http://ors.test", timeout=5)


# --- profiles ---

@pytest.mark.parametrize("mode, ors_name, osrm_name", [
    (TravelMode.CYCLING, "cycling-regular", "cycling"),
    (TravelMode.WALKING, "foot-walking", "walking"),
    (TravelMode.DRIVING, "driving-car", "driving"),
])
def test_profile_lookup(mode, ors_name, osrm_name):
    assert openrouteservice_profile(mode) == ors_name
    assert osrm_profile(mode) == osrm_name


def test_unknown_mode_defaults_to_cycling():
    assert openrouteservice_profile("Skating") == "cycling-regular"
    assert osrm_profile(None) == "cycling"


@pytest.mark.parametrize("raw, expected", [
    ("Cycling", TravelMode.CYCLING),
    ("walking", TravelMode.WALKING),
    ("DRIVING", TravelMode.DRIVING),
    ("1", TravelMode.WALKING),
    (2, TravelMode.DRIVING),
    (TravelMode.CYCLING, TravelMode.CYCLING),
])
def test_travel_mode_parse(raw, expected):
    assert TravelMode.parse(raw) is expected


@pytest.mark.parametrize("raw", ["Flying", "3", "", "-1"])
def test_travel_mode_parse_rejects_unknown(raw):
    with pytest.raises(ValueError):
        TravelMode.parse(raw)


# --- OSRM ---

def test_osrm_transposes_lon_lat_and_keeps_distance(osrm, fake_http):
    route = [START, Coordinate(52.52, 13.39), END]
    fake_http.get_responses.append(FakeResponse(payload=osrm_payload(route, 1830.4)))

    result = osrm.fetch_route(START, END, TravelMode.WALKING)

    assert result.provider == "osrm"
    assert result.polyline == route
    assert result.total_distance_m == 1830.4

    method, url, kwargs = fake_http.calls[0]
    assert method == "GET"
    assert url == "http://osrm.test/route/v1/walking/13.38886,52.517037;13.397634,52.529407"
    assert kwargs["params"] == {"overview": "full", "geometries": "geojson"}
    assert kwargs["timeout"] == 5


def test_osrm_error_code_is_provider_unavailable(osrm, fake_http):
    fake_http.get_responses.append(FakeResponse(payload={"code": "NoRoute", "message": "Impossible route"}))

    with pytest.raises(OSRMError, match="Impossible route"):
        osrm.fetch_route(START, END)


def test_osrm_http_error(osrm, fake_http):
    fake_http.get_responses.append(FakeResponse(status_code=502, text="Bad Gateway"))

    with pytest.raises(OSRMError, match="502"):
        osrm.fetch_route(START, END)


def test_osrm_transport_error(osrm, fake_http):
    fake_http.get_responses.append(requests.ConnectionError("connection refused"))

    with pytest.raises(OSRMError):
        osrm.fetch_route(START, END)


def test_osrm_non_json_body(osrm, fake_http):
    fake_http.get_responses.append(FakeResponse(payload=None, text="<html>"))

    with pytest.raises(OSRMError):
        osrm.fetch_route(START, END)


def test_osrm_single_coordinate_geometry_is_invalid_route_data(osrm, fake_http):
    fake_http.get_responses.append(FakeResponse(payload=osrm_payload([START], 0.0)))

    with pytest.raises(InvalidRouteData):
        osrm.fetch_route(START, END)


def test_osrm_missing_geometry_is_invalid_route_data(osrm, fake_http):
    fake_http.get_responses.append(FakeResponse(payload={"code": "Ok", "routes": [{"distance": 12.0}]}))

    with pytest.raises(InvalidRouteData):
        osrm.fetch_route(START, END)


@pytest.mark.parametrize("routes", [{"a": 1}, 7, "route"])
def test_osrm_routes_that_are_not_a_list_are_invalid_route_data(osrm, fake_http, routes):
    fake_http.get_responses.append(FakeResponse(payload={"code": "Ok", "routes": routes}))

    with pytest.raises(InvalidRouteData):
        osrm.fetch_route(START, END)


def test_osrm_requires_base_url():
    with pytest.raises(ValueError):
        OSRMClient(base_url="")


# --- OpenRouteService ---

def test_ors_posts_lon_lat_pairs_with_api_key(ors, fake_http):
    route = meridian_polyline(0, 60, 120, longitude=13.4)
    fake_http.post_responses.append(FakeResponse(payload=ors_payload(route, 120.0)))

    result = ors.fetch_route(START, END, TravelMode.WALKING)

    assert result.provider == "openrouteservice"
    assert result.polyline == route
    assert result.total_distance_m == 120.0

    method, url, kwargs = fake_http.calls[0]
    assert method == "POST"
    assert url == "http://ors.test/v2/directions/foot-walking"
    assert kwargs["headers"] == {"Authorization": "secret-key"}
    assert kwargs["json"]["coordinates"] == [[13.38886, 52.517037], [13.397634, 52.529407]]


def test_ors_encoded_polyline_geometry(ors, fake_http):
    encoded = polyline_codec.encode([(52.51704, 13.38886), (52.52, 13.39), (52.52941, 13.39763)])
    payload = {"routes": [{"summary": {"distance": 1500.0}, "geometry": encoded}]}
    fake_http.post_responses.append(FakeResponse(payload=payload))

    result = ors.fetch_route(START, END)

    assert [(c.latitude, c.longitude) for c in result.polyline] == [
        pytest.approx((52.51704, 13.38886)),
        pytest.approx((52.52, 13.39)),
        pytest.approx((52.52941, 13.39763)),
    ]


def test_ors_missing_summary_distance_means_zero(ors, fake_http):
    payload = {"routes": [{"summary": {}, "geometry": {"coordinates": [[13.4, 52.5], [13.4, 52.5]]}}]}
    fake_http.post_responses.append(FakeResponse(payload=payload))

    assert ors.fetch_route(START, START).total_distance_m == 0.0


def test_ors_http_error(ors, fake_http):
    fake_http.post_responses.append(FakeResponse(status_code=403, text='{"error": "Access denied"}'))

    with pytest.raises(OpenRouteServiceError, match="403"):
        ors.fetch_route(START, END)


def test_ors_negative_distance_is_invalid_route_data(ors, fake_http):
    fake_http.post_responses.append(FakeResponse(payload=ors_payload([START, END], -5)))

    with pytest.raises(InvalidRouteData):
        ors.fetch_route(START, END)


def test_ors_transport_error(ors, fake_http):
    fake_http.post_responses.append(requests.ConnectionError("connection refused"))

    with pytest.raises(OpenRouteServiceError):
        ors.fetch_route(START, END)


def test_ors_non_json_body(ors, fake_http):
    fake_http.post_responses.append(FakeResponse(payload=None, text="<html>"))

    with pytest.raises(OpenRouteServiceError):
        ors.fetch_route(START, END)


@pytest.mark.parametrize("routes", [{"error": "x"}, 7])
def test_ors_routes_that_are_not_a_list_are_invalid_route_data(ors, fake_http, routes):
    fake_http.post_responses.append(FakeResponse(payload={"routes": routes}))

    with pytest.raises(InvalidRouteData):
        ors.fetch_route(START, END)


def test_ors_summary_that_is_not_an_object_is_invalid_route_data(ors, fake_http):
    payload = ors_payload([START, END], 100.0)
    payload["routes"][0]["summary"] = [1]
    fake_http.post_responses.append(FakeResponse(payload=payload))

    with pytest.raises(InvalidRouteData):
        ors.fetch_route(START, END)


def test_ors_requires_api_key():
    with pytest.raises(ValueError):
        OpenRouteServiceClient(api_key="")


# --- route sources ---

def test_sources_without_api_key():
    sources = build_route_sources(RoutingServiceOptions())

    assert [type(s) for s in sources] == [FreeProviderSource]


def test_sources_with_api_key_try_keyed_provider_first():
    sources = build_route_sources(RoutingServiceOptions(openrouteservice_api_key="k"))

    assert [type(s) for s in sources] == [KeyedProviderSource, FreeProviderSource]


def test_sources_when_routing_disabled():
    options = RoutingServiceOptions(openrouteservice_api_key="k", routing_enabled=False)

    assert [type(s) for s in build_route_sources(options)] == [NoRouteSource]


def test_source_absorbs_provider_failure(osrm, fake_http):
    fake_http.get_responses.append(requests.Timeout("read timed out"))
    source = FreeProviderSource(osrm)

    assert source.fetch(RouteRequest(START, END)) is None


def test_options_from_env(monkeypatch):
    monkeypatch.setenv("OPENROUTESERVICE_API_KEY", " abc ")
    monkeypatch.setenv("OSRM_BASE_URL", "http://localhost:5000/")
    monkeypatch.setenv("ROUTING_TIMEOUT_S", "2.5")
    monkeypatch.setenv("ROUTING_ENABLED", "no")

    options = RoutingServiceOptions.from_env()

    assert options.openrouteservice_api_key == "abc"
    assert options.osrm_base_url == "http://localhost:5000"
    assert options.timeout_s == 2.5
    assert options.routing_enabled is False


def test_options_reject_non_positive_timeout():
    with pytest.raises(ValueError):
        RoutingServiceOptions(timeout_s=0).validate()
