"""
Transporte HTTP para la API de geocodificación.

Un único GET por llamada, sin reintentos: los errores de red se traducen a
la jerarquía TransportError y se propagan tal cual.
"""

import logging

import httpx

from .exceptions import (
    TransportConnectionError,
    TransportError,
    TransportHTTPError,
    TransportTimeoutError,
)
from .utils.logging import redact_url

logger = logging.getLogger("gmapsgeocoder.transport")


class HttpTransport:
    """Transporte basado en httpx.AsyncClient.

    Attributes:
        timeout: Timeout en segundos para las peticiones
        client: Cliente httpx en uso (propio o inyectado)

    Example:
        async with HttpTransport(timeout=5) as transport:
            body = await transport.send_get(url)
    """

    def __init__(self, timeout=10, verify_ssl=True, http_client: httpx.AsyncClient | None = None):
        """Configura el transporte.

        Args:
            timeout: Timeout en segundos (default: 10)
            verify_ssl: Verificar certificados SSL (default: True)
            http_client: Cliente httpx.AsyncClient externo opcional. El
                transporte NO lo cerrará; el usuario es responsable.
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._closed = False

        if http_client is not None:
            self.client = http_client
            self._owns_client = False
            if not verify_ssl:
                logger.warning(
                    "verify_ssl=False ignorado: se usa la configuración SSL del cliente httpx externo"
                )
        else:
            self.client = httpx.AsyncClient(timeout=timeout, verify=verify_ssl)
            self._owns_client = True

    async def send_get(self, url: str) -> bytes:
        """Ejecuta un GET y devuelve el cuerpo completo de la respuesta.

        Raises:
            TransportTimeoutError: Si la petición excede el timeout
            TransportConnectionError: Si hay error de conexión
            TransportHTTPError: Si el servidor responde con 4xx/5xx
            TransportError: Cualquier otro error de httpx
        """
        safe_url = redact_url(url)
        try:
            response = await self.client.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"Timeout después de {self.timeout}s",
                url=safe_url,
                details={"timeout": self.timeout},
            ) from e
        except httpx.HTTPStatusError as e:
            raise TransportHTTPError(
                f"Error HTTP {e.response.status_code}",
                url=safe_url,
                status_code=e.response.status_code,
                response_text=e.response.text,
            ) from e
        except httpx.TransportError as e:
            raise TransportConnectionError(
                "Error de conexión con el servidor",
                url=safe_url,
                details={"error": type(e).__name__},
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Error en la petición: {e}", url=safe_url) from e

    async def close(self):
        """Cierra el cliente httpx si es propio. Idempotente."""
        if self._owns_client and not self._closed:
            await self.client.aclose()
        self._closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
