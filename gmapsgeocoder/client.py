"""
GeocodeClient - Cliente de la API de geocodificación de Google Maps
===================================================================

Compone la construcción de la URL, la firma (si hay clave de firma) y el
transporte HTTP, y deserializa la respuesta.
"""

import asyncio
import logging
import os

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .credentials import Credentials, credentials_from_options
from .exceptions import ConfigurationError, InvalidArgumentError
from .models import GeocodeResponse, parse_geocode_response
from .signer import RequestSigner
from .transport import HttpTransport
from .url_builder import GEOCODE_JSON_ENDPOINT, build_url
from .utils.logging import redact_url


class GeocodeRequest(BaseModel):
    """Descriptor inmutable de una petición de geocodificación."""
    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Dirección postal")
    region: str | None = Field(None, description="Código de región (ccTLD) para sesgar resultados")


class GeocodeClient:
    """Cliente de geocodificación de Google Maps.

    Modos de autenticación (excluyentes):
        - Anónimo: GeocodeClient()
        - API key: GeocodeClient(api_key="AIza...")
        - Premium: GeocodeClient(client_id="gme-...", crypto_key="vNIX...")

    Example:
        async with GeocodeClient(api_key="AIza...") as client:
            response = await client.geocode("Avinguda Diagonal 100, Barcelona", region="es")
            print(response.first().location)

    Attributes:
        credentials: Variante de credenciales inmutable
        base_url: Endpoint JSON de geocodificación
    """

    def __init__(
        self,
        api_key=None,
        client_id=None,
        crypto_key=None,
        *,
        credentials: Credentials | None = None,
        base_url=GEOCODE_JSON_ENDPOINT,
        timeout=10,
        verify_ssl=True,
        http_client: httpx.AsyncClient | None = None,
        transport=None,
        logger=None,
    ):
        """Inicializa el cliente.

        Args:
            api_key: API key de Google Maps
            client_id: Client id del plan premium
            crypto_key: Clave de firma URL-safe base64 del plan premium
            credentials: Variante de credenciales ya construida (alternativa
                a api_key/client_id/crypto_key)
            base_url: Endpoint de geocodificación
            timeout: Timeout en segundos de la petición HTTP
            verify_ssl: Verificar certificados SSL
            http_client: Cliente httpx.AsyncClient externo opcional. No se
                cierra al cerrar el cliente.
            transport: Objeto con ``async send_get(url) -> bytes`` que
                sustituye al transporte httpx
            logger: Logger opcional

        Raises:
            ConfigurationError: Si las credenciales son incompatibles o
                algún parámetro es inválido
        """
        if credentials is not None:
            if api_key is not None or client_id is not None or crypto_key is not None:
                raise ConfigurationError(
                    "Especifique credentials o bien api_key/client_id/crypto_key, no ambos"
                )
            try:
                self.credentials = TypeAdapter(Credentials).validate_python(credentials)
            except ValidationError as e:
                raise ConfigurationError(
                    "Credenciales inválidas",
                    details={"received_type": type(credentials).__name__, "errors": e.error_count()},
                ) from e
        else:
            self.credentials = credentials_from_options(api_key, client_id, crypto_key)

        if not base_url or not base_url.startswith(("http://", "https://")):
            raise ConfigurationError("URL base inválida", details={"base_url": base_url})
        # La query entera la construye build_url
        if "?" in base_url or "#" in base_url:
            raise ConfigurationError("La URL base no puede llevar query ni fragmento", details={"base_url": base_url})
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("El timeout debe ser positivo", details={"timeout": timeout})

        self.base_url = base_url
        self.timeout = timeout

        secret = self.credentials.signing_secret
        self._signer = RequestSigner(secret) if secret is not None else None

        self.verify_ssl = verify_ssl
        self._http_client = http_client
        self._transport = transport
        self._owns_transport = False

        if logger:
            self.log = logger
        else:
            self.log = logging.getLogger("gmapsgeocoder")
            self.log.addHandler(logging.NullHandler())

    @classmethod
    def from_env(cls, **kwargs) -> "GeocodeClient":
        """Crea el cliente a partir de variables de entorno.

        Variables: GMAPS_API_KEY, GMAPS_CLIENT_ID, GMAPS_CRYPTO_KEY y
        GMAPS_TIMEOUT. Si los kwargs incluyen alguna credencial, las del
        entorno se ignoran.
        """
        credential_names = ("api_key", "client_id", "crypto_key", "credentials")
        if not any(kwargs.get(name) is not None for name in credential_names):
            kwargs["api_key"] = os.getenv("GMAPS_API_KEY") or None
            kwargs["client_id"] = os.getenv("GMAPS_CLIENT_ID") or None
            kwargs["crypto_key"] = os.getenv("GMAPS_CRYPTO_KEY") or None
        if "timeout" not in kwargs and os.getenv("GMAPS_TIMEOUT"):
            try:
                kwargs["timeout"] = float(os.getenv("GMAPS_TIMEOUT"))
            except ValueError as e:
                raise ConfigurationError(
                    "GMAPS_TIMEOUT debe ser numérico",
                    details={"GMAPS_TIMEOUT": os.getenv("GMAPS_TIMEOUT")},
                ) from e
        return cls(**kwargs)

    @property
    def signs_requests(self) -> bool:
        return self._signer is not None

    def build_url(self, address, region=None) -> str:
        """Construye la URL final, firmada si hay clave de firma.

        Raises:
            InvalidArgumentError: Si la dirección es inválida
            InvalidCredentialsError: Si la clave de firma es inválida
        """
        url = build_url(self.base_url, self.credentials, address, region)
        if self._signer is not None:
            url = self._signer.sign_url(url)
        return url

    async def geocode(self, address, region=None) -> GeocodeResponse:
        """Geocodifica una dirección.

        Args:
            address: Dirección postal
            region: Código de región opcional (ej: "es")

        Returns:
            GeocodeResponse: Respuesta deserializada (incluye status de Google)

        Raises:
            InvalidArgumentError: Dirección nula o vacía (sin petición de red)
            InvalidCredentialsError: Clave de firma inválida (sin petición de red)
            TransportError: Error de red, timeout o HTTP
            ParseError: Respuesta no deserializable
        """
        url = self.build_url(address, region)
        safe_url = redact_url(url)
        self.log.debug("Geocodificando: %s", safe_url, extra={"url": safe_url})

        try:
            body = await self._get_transport().send_get(url)
        except Exception as e:
            self.log.warning("Error en petición de geocodificación: %s", e)
            raise

        response = parse_geocode_response(body)
        self.log.debug(
            "Respuesta de geocodificación: status=%s, resultados=%d",
            response.status,
            len(response.results),
        )
        return response

    async def geocode_request(self, request: GeocodeRequest) -> GeocodeResponse:
        """Geocodifica a partir de un GeocodeRequest."""
        if not isinstance(request, GeocodeRequest):
            raise InvalidArgumentError(
                "Se esperaba un GeocodeRequest",
                details={"received_type": type(request).__name__},
            )
        return await self.geocode(request.address, request.region)

    def _get_transport(self):
        """Devuelve el transporte, creando el HttpTransport propio en el primer uso."""
        if self._transport is None:
            self._transport = HttpTransport(self.timeout, self.verify_ssl, self._http_client)
            self._owns_transport = True
        return self._transport

    async def close(self):
        """Cierra el transporte subyacente.

        El HttpTransport propio se descarta y se recrea en la siguiente
        petición; un transporte inyectado se conserva.
        """
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()
        if self._owns_transport:
            self._transport = None
            self._owns_transport = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _sync(self, coro):
        """Ejecuta una corrutina de forma síncrona.

        No se puede usar dentro de un loop en ejecución. El cliente httpx
        propio queda ligado al loop de ``asyncio.run``, así que se cierra
        dentro de ese mismo loop al terminar.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            coro.close()
            raise RuntimeError(
                "No se pueden usar métodos '_sync' dentro de un entorno asíncrono. "
                "Usa 'await' con el método asíncrono correspondiente."
            )

        async def run_and_release():
            try:
                return await coro
            finally:
                if self._owns_transport:
                    await self.close()

        return asyncio.run(run_and_release())

    def geocode_sync(self, address, region=None) -> GeocodeResponse:
        """Geocodifica una dirección (versión síncrona)."""
        return self._sync(self.geocode(address, region))
