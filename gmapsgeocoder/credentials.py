"""
Modos de autenticación frente a la API de geocodificación de Google.

Solo hay tres combinaciones válidas, modeladas como una unión etiquetada:

    - AnonymousCredentials: sin clave (puede aplicarse throttling)
    - ApiKeyCredentials: parámetro ``key``
    - ClientCredentials: parámetro ``client`` y firma HMAC con ``crypto_key``
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator, model_validator

from .exceptions import ConfigurationError

__all__ = [
    "AnonymousCredentials",
    "ApiKeyCredentials",
    "ClientCredentials",
    "Credentials",
    "credentials_from_options",
]


def _require_secret(v: SecretStr) -> SecretStr:
    if not v.get_secret_value():
        raise ValueError("el valor no puede estar vacío")
    return v


class _BaseCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    def auth_param(self) -> Optional[tuple[str, str]]:
        """Primer parámetro de la query (``key`` o ``client``), si lo hay."""
        return None

    @property
    def signing_secret(self) -> Optional[str]:
        """Clave de firma URL-safe base64, o None si las peticiones no se firman."""
        return None


class AnonymousCredentials(_BaseCredentials):
    """Acceso anónimo."""

    kind: Literal["anonymous"] = "anonymous"


class ApiKeyCredentials(_BaseCredentials):
    """Acceso con API key."""

    kind: Literal["api_key"] = "api_key"
    api_key: SecretStr = Field(..., description="Google Maps API key")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        return _require_secret(v)

    def auth_param(self) -> Optional[tuple[str, str]]:
        return ("key", self.api_key.get_secret_value())


class ClientCredentials(_BaseCredentials):
    """Acceso premium con client id y clave de firma.

    Cualquiera de los dos puede omitirse, pero no ambos. La firma depende
    solo de la presencia de ``crypto_key``.
    """

    kind: Literal["client"] = "client"
    client_id: Optional[str] = Field(None, min_length=1, description="Client id (gme-...)")
    crypto_key: Optional[SecretStr] = Field(None, description="Clave de firma URL-safe base64")

    @field_validator("crypto_key")
    @classmethod
    def validate_crypto_key(cls, v: Optional[SecretStr]) -> Optional[SecretStr]:
        return v if v is None else _require_secret(v)

    @model_validator(mode="after")
    def validate_not_empty(self) -> "ClientCredentials":
        if self.client_id is None and self.crypto_key is None:
            raise ConfigurationError("ClientCredentials requiere client_id o crypto_key")
        return self

    def auth_param(self) -> Optional[tuple[str, str]]:
        if self.client_id is None:
            return None
        return ("client", self.client_id)

    @property
    def signing_secret(self) -> Optional[str]:
        if self.crypto_key is None:
            return None
        return self.crypto_key.get_secret_value()


Credentials = Annotated[
    Union[AnonymousCredentials, ApiKeyCredentials, ClientCredentials],
    Field(discriminator="kind"),
]


def credentials_from_options(
    api_key: Optional[str] = None,
    client_id: Optional[str] = None,
    crypto_key: Optional[str] = None,
) -> Union[AnonymousCredentials, ApiKeyCredentials, ClientCredentials]:
    """Construye la variante de credenciales a partir de opciones sueltas.

    Args:
        api_key: API key de Google Maps
        client_id: Client id del plan premium
        crypto_key: Clave de firma URL-safe base64

    Returns:
        La variante de credenciales correspondiente

    Raises:
        ConfigurationError: Si se combinan api_key y client_id/crypto_key,
            o si algún valor está vacío
    """
    if api_key is not None and (client_id is not None or crypto_key is not None):
        raise ConfigurationError(
            "Especifique api_key o bien client_id y crypto_key, no ambos",
            details={"client_id": client_id is not None, "crypto_key": crypto_key is not None},
        )

    try:
        if api_key is not None:
            return ApiKeyCredentials(api_key=api_key)
        if client_id is not None or crypto_key is not None:
            return ClientCredentials(client_id=client_id, crypto_key=crypto_key)
    except ValidationError as e:
        raise ConfigurationError(
            "Credenciales inválidas",
            details={"errors": [err["loc"] for err in e.errors()]},
        ) from e

    return AnonymousCredentials()
