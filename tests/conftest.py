"""
Pytest configuration and fixtures for gmapsgeocoder tests.
"""

import json

import pytest

from gmapsgeocoder import GeocodeClient

# Clave de ejemplo de la documentación de Google (URL-safe base64)
CRYPTO_KEY = "vNIXE0xscrmjlyV-12Nj_BvUPaw="

OK_BODY = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Av. Diagonal, 100, 08005 Barcelona, Spain",
            "address_components": [
                {"long_name": "100", "short_name": "100", "types": ["street_number"]},
                {"long_name": "Barcelona", "short_name": "Barcelona", "types": ["locality", "political"]},
                {"long_name": "Spain", "short_name": "ES", "types": ["country", "political"]},
            ],
            "geometry": {
                "location": {"lat": 41.4036, "lng": 2.2026},
                "location_type": "ROOFTOP",
                "viewport": {
                    "northeast": {"lat": 41.4049, "lng": 2.2039},
                    "southwest": {"lat": 41.4022, "lng": 2.2012},
                },
            },
            "place_id": "ChIJtest",
            "types": ["street_address"],
        }
    ],
}


class FakeTransport:
    """Transporte en memoria que registra las URLs pedidas.

    Las respuestas se encolan con add_response(); sin respuestas encoladas
    devuelve OK_BODY.
    """

    def __init__(self):
        self.calls = []
        self._queue = []
        self.closed = False

    def add_response(self, body=None, exception=None):
        if body is None and exception is None:
            body = OK_BODY
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode()
        self._queue.append((body, exception))
        return self

    @property
    def call_count(self):
        return len(self.calls)

    async def send_get(self, url):
        self.calls.append(url)
        body, exception = self._queue.pop(0) if self._queue else (json.dumps(OK_BODY).encode(), None)
        if exception is not None:
            raise exception
        return body

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def client(fake_transport):
    """Cliente anónimo sobre el transporte en memoria."""
    return GeocodeClient(transport=fake_transport)


@pytest.fixture
def signed_client(fake_transport):
    """Cliente premium (client id + firma) sobre el transporte en memoria."""
    return GeocodeClient(client_id="gme-test", crypto_key=CRYPTO_KEY, transport=fake_transport)


def pytest_addoption(parser):
    """Add --integration command line option."""
    parser.addoption(
        "--integration", action="store_true", default=False, help="run integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked with 'integration' unless --integration is provided."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip_integration)
