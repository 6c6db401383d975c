#!/usr/bin/env python
"""
Tests contra la API real de Google. Requieren --integration y credenciales
en GMAPS_API_KEY o GMAPS_CLIENT_ID / GMAPS_CRYPTO_KEY.
"""

import os

import pytest

from gmapsgeocoder import GeocodeClient

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_geocode_real_address():
    if not (os.getenv("GMAPS_API_KEY") or os.getenv("GMAPS_CRYPTO_KEY")):
        pytest.skip("Sin credenciales GMAPS_* en el entorno")

    async with GeocodeClient.from_env() as client:
        response = await client.geocode("Parc Güell, Barcelona", region="es")

    assert response.is_ok, response.error_message
    location = response.first().location
    assert 41.0 < location.lat < 42.0
    assert 2.0 < location.lng < 2.5
