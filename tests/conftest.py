"""Pytest configuration and fixtures for Tax Locator tests."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import requests

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tax_locator.lookup import GeocoderClient, LocationResolver, SalesTaxClient  # noqa: E402

GEOCODER_URL = "https://geo.test/geocode/v1/json"
TAX_URL = "https://tax.test/v1/salestax"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, raise_on_json=False):
        self.status_code = status_code
        self._payload = payload
        self._raise_on_json = raise_on_json

    def json(self):
        if self._raise_on_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stand-in for requests.Session that records every GET.

    ``responder`` receives (url, params, headers) and returns a FakeResponse
    or raises a requests exception.
    """

    def __init__(self, responder):
        self.responder = responder
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return self.responder(url, params or {}, headers or {})

    def calls_to(self, url):
        return [c for c in self.calls if c["url"] == url]


def geocode_result(lat=45.0, lng=-122.0, **components):
    return {"components": components, "geometry": {"lat": lat, "lng": lng}}


def make_session(geocode_results=None, tax_by_zip=None, tax_by_city_state=None, geocode_status=200, tax_status=200):
    """Build a FakeSession serving canned geocoder and sales-tax payloads.

    ``tax_by_zip`` maps ZIP -> list of records and ``tax_by_city_state`` maps
    (city, state) -> list of records; anything not listed yields ``[]``.
    """
    tax_by_zip = tax_by_zip or {}
    tax_by_city_state = tax_by_city_state or {}

    def responder(url, params, headers):
        if url == GEOCODER_URL:
            return FakeResponse(geocode_status, {"results": list(geocode_results or [])})
        if url == TAX_URL:
            if "zip_code" in params:
                return FakeResponse(tax_status, tax_by_zip.get(params["zip_code"], []))
            return FakeResponse(tax_status, tax_by_city_state.get((params.get("city"), params.get("state")), []))
        raise AssertionError(f"Unexpected URL {url}")

    return FakeSession(responder)


def make_resolver(session, geocoder_key="geo-key", tax_key="tax-key"):
    return LocationResolver(
        GeocoderClient(geocoder_key, base_url=GEOCODER_URL, session=session),
        SalesTaxClient(tax_key, base_url=TAX_URL, session=session),
    )


@pytest.fixture
def mock_env():
    """Mock environment variables for testing."""
    with patch.dict(os.environ, {
        'OPENCAGE_API_KEY': 'geo-key',
        'API_NINJAS_KEY': 'tax-key',
        'GEOCODER_BASE_URL': GEOCODER_URL,
        'SALES_TAX_BASE_URL': TAX_URL,
        'HTTP_TIMEOUT_SECONDS': '5',
        'LOG_LEVEL': 'DEBUG',
    }, clear=True):
        yield


@pytest.fixture
def empty_env():
    """Environment with no Tax Locator settings at all."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def portland_session():
    """Geocoder answers with Portland, the ZIP lookup returns a state-only record."""
    return make_session(
        geocode_results=[
            geocode_result(city="Portland", state="Oregon", country="United States", postcode="97201"),
        ],
        tax_by_zip={"97201": [{"state_rate": 0.0}]},
    )


@pytest.fixture
def timeout_error():
    return requests.Timeout("read timed out")
