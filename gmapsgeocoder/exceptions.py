"""
Jerarquía de excepciones para gmapsgeocoder.

Todas las excepciones heredan de GeocodeError, permitiendo capturar todos
los errores de la librería con un solo except.
"""

from typing import Optional, Dict, Any

__all__ = [
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


class GeocodeError(Exception):
    """Clase base para todas las excepciones de gmapsgeocoder.

    Attributes:
        message: Mensaje de error principal
        details: Diccionario opcional con contexto adicional del error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Formatea el mensaje de error con detalles si están disponibles."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        if self.details:
            return f"{class_name}(message={self.message!r}, details={self.details!r})"
        return f"{class_name}(message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la excepción a diccionario para serialización JSON.

        Returns:
            dict: Diccionario con type, message y details de la excepción
        """
        result = {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details.copy(),
        }

        if getattr(self, "url", None):
            result["url"] = self.url
        if getattr(self, "status_code", None) is not None:
            result["status_code"] = self.status_code
        if getattr(self, "response_text", None):
            result["response_text"] = self.response_text[:200]

        return result


class ConfigurationError(GeocodeError):
    """Error de configuración del cliente.

    Se lanza al construir el cliente cuando:
    - Se combinan API key y client id / crypto key
    - Algún parámetro (timeout, URL base) tiene un valor inválido

    Example:
        raise ConfigurationError(
            "Especifique api_key o bien client_id y crypto_key, no ambos",
            details={"api_key": True, "client_id": True}
        )
    """
    pass


class InvalidArgumentError(GeocodeError):
    """Argumento inválido en una petición.

    Se lanza antes de cualquier actividad de red:
    - Dirección nula, de tipo incorrecto o vacía
    - URL con caracteres no ASCII al firmar
    """
    pass


class InvalidCredentialsError(GeocodeError):
    """La clave de firma (crypto key) no es base64 URL-safe válido."""
    pass


class TransportError(GeocodeError):
    """Clase base para errores de red al consultar el servicio.

    Attributes:
        message: Mensaje de error
        details: Contexto adicional
        url: URL (redactada) que causó el error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, url: Optional[str] = None):
        super().__init__(message, details)
        self.url = url
        if url:
            self.details["url"] = url


class TransportConnectionError(TransportError):
    """No se pudo establecer conexión con el servidor (red, DNS, TLS)."""
    pass


class TransportTimeoutError(TransportError):
    """La petición excedió el tiempo máximo de espera.

    Example:
        raise TransportTimeoutError(
            "Timeout después de 10s",
            url="https://maps.googleapis.com/maps/api/geocode/json?...",
            details={"timeout": 10}
        )
    """
    pass


class TransportHTTPError(TransportError):
    """El servidor respondió con un código de error HTTP.

    Attributes:
        status_code: Código de estado HTTP
        response_text: Texto de la respuesta del servidor
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message, details, url)
        self.status_code = status_code
        self.response_text = response_text

        if status_code is not None:
            self.details["status_code"] = status_code
        if response_text:
            self.details["response_text"] = response_text[:200]


class ParseError(GeocodeError):
    """La respuesta no es JSON válido o no sigue el esquema de geocodificación.

    Example:
        raise ParseError(
            "Respuesta no es JSON válido",
            details={"body": body[:100]}
        )
    """
    pass
