"""Tests for the pricing and maps clients against a mocked transport."""

import json

import httpx
import pytest

from Clients import MapsClient, PriceClient, close_clients, get_maps_client, get_price_client
from exceptions import CollaboratorError
from Models.schemas import LocationSchema


def price_client_for(handler):
    return PriceClient(base_url="http://pricing", timeout=1.0, transport=httpx.MockTransport(handler))


def maps_client_for(handler):
    return MapsClient(base_url="http://maps", timeout=1.0, transport=httpx.MockTransport(handler))


class TestPriceClient:

    def test_get_price(self):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == "/services/price/1"
            return httpx.Response(200, json={"vehicleId": 1, "currency": "USD", "price": 1000.2})

        assert price_client_for(handler).get_price(1) == "1000.20 USD"

    def test_create_price(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={"vehicleId": 5, "currency": "USD", "price": 12345.67})

        result = price_client_for(handler).create_price(5)

        assert result["vehicleId"] == 5
        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert requests[0].url.path == "/services/price"
        assert json.loads(requests[0].content) == {"vehicleId": 5}

    def test_create_price_already_registered(self):
        requests = []

        def handler(request):
            requests.append((request.method, request.url.path))
            if request.method == "POST":
                return httpx.Response(409)
            return httpx.Response(200, json={"vehicleId": 5, "currency": "USD", "price": 12345.67})

        result = price_client_for(handler).create_price(5)

        assert result == {"vehicleId": 5, "currency": "USD", "price": 12345.67}
        assert requests == [("POST", "/services/price"), ("GET", "/services/price/5")]

    def test_create_price_retry_after_timeout(self):
        stored = {}

        def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json=stored[7])
            if 7 in stored:
                return httpx.Response(409)
            stored[7] = {"vehicleId": 7, "currency": "USD", "price": 9000.0}
            raise httpx.ReadTimeout("timed out", request=request)

        client = price_client_for(handler)
        with pytest.raises(CollaboratorError):
            client.create_price(7)

        assert client.create_price(7)["vehicleId"] == 7

    def test_delete_price(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(204)

        price_client_for(handler).delete_price(3)

        assert [(r.method, r.url.path) for r in requests] == [("DELETE", "/services/price/3")]

    def test_delete_missing_price_is_ignored(self):
        price_client_for(lambda request: httpx.Response(404)).delete_price(3)

    def test_server_error_raises(self):
        client = price_client_for(lambda request: httpx.Response(500))

        with pytest.raises(CollaboratorError) as exc_info:
            client.get_price(1)
        assert exc_info.value.service == "pricing"

    def test_missing_price_raises(self):
        with pytest.raises(CollaboratorError):
            price_client_for(lambda request: httpx.Response(404)).get_price(1)

    def test_connection_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CollaboratorError):
            price_client_for(handler).create_price(1)


class TestMapsClient:

    def test_get_address(self):
        def handler(request):
            assert request.url.path == "/maps"
            assert float(request.url.params["lat"]) == pytest.approx(40.730610)
            assert float(request.url.params["lon"]) == pytest.approx(-73.935242)
            return httpx.Response(200, json={
                "address": "2575 Us Hwy 43",
                "city": "Winfield",
                "state": "AL",
                "zip": "35594",
            })

        location = LocationSchema(lat=40.730610, lon=-73.935242)
        result = maps_client_for(handler).get_address(location)

        assert result is not location
        assert (result.lat, result.lon) == (40.730610, -73.935242)
        assert result.address == "2575 Us Hwy 43"
        assert result.city == "Winfield"
        assert result.state == "AL"
        assert result.zip == "35594"
        assert location.address is None

    def test_timeout_raises(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(CollaboratorError) as exc_info:
            maps_client_for(handler).get_address(LocationSchema(lat=0, lon=0))
        assert exc_info.value.service == "maps"

    def test_server_error_raises(self):
        with pytest.raises(CollaboratorError):
            maps_client_for(lambda request: httpx.Response(503)).get_address(LocationSchema(lat=0, lon=0))


def test_close_clients():
    price_client = get_price_client()
    maps_client = get_maps_client()

    close_clients()

    assert price_client._client.is_closed
    assert maps_client._client.is_closed
    assert get_price_client.cache_info().currsize == 0
    assert get_maps_client.cache_info().currsize == 0


def test_close_clients_without_cached_clients():
    close_clients()
    assert get_price_client.cache_info().currsize == 0
