"""
gmapsgeocoder - Cliente de geocodificación de Google Maps
=========================================================

Construye peticiones al endpoint JSON de geocodificación de Google, con API
key o con client id y firma HMAC-SHA1 (plan premium), y deserializa la
respuesta en modelos Pydantic.

API Dual (Async/Sync):
    # API Async
    import asyncio
    from gmapsgeocoder import GeocodeClient

    async def main():
        async with GeocodeClient(api_key="AIza...") as client:
            response = await client.geocode("Avinguda Diagonal 100, Barcelona", region="es")

    asyncio.run(main())

    # API Sync
    from gmapsgeocoder import GeocodeClient

    client = GeocodeClient(client_id="gme-...", crypto_key="vNIX...")
    response = client.geocode_sync("1600 Amphitheatre Parkway, Mountain View")

Firma de URLs sin cliente:
    from gmapsgeocoder import sign
    signature = sign(crypto_key, url)
"""

from .client import GeocodeClient, GeocodeRequest
from .credentials import (
    AnonymousCredentials,
    ApiKeyCredentials,
    ClientCredentials,
    Credentials,
    credentials_from_options,
)
from .models import GeocodeResponse, GeocodeResult, parse_geocode_response
from .signer import RequestSigner, sign
from .transport import HttpTransport
from .url_builder import GEOCODE_JSON_ENDPOINT, QueryParams, build_url
from .exceptions import (
    GeocodeError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidCredentialsError,
    TransportError,
    TransportConnectionError,
    TransportTimeoutError,
    TransportHTTPError,
    ParseError,
)

__version__ = "1.0.0"
__all__ = [
    "GeocodeClient",
    "GeocodeRequest",
    "GeocodeResponse",
    "GeocodeResult",
    "parse_geocode_response",
    "HttpTransport",
    # Credenciales
    "AnonymousCredentials",
    "ApiKeyCredentials",
    "ClientCredentials",
    "Credentials",
    "credentials_from_options",
    # URL y firma
    "GEOCODE_JSON_ENDPOINT",
    "QueryParams",
    "build_url",
    "RequestSigner",
    "sign",
    # Excepciones
    "GeocodeError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidCredentialsError",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "TransportHTTPError",
    "ParseError",
]
