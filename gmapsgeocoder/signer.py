"""
Firma de URLs para el plan premium de Google Maps.

La firma es HMAC-SHA1 sobre ``path?query`` con la clave decodificada desde
base64 URL-safe, y se codifica de nuevo en base64 URL-safe (con padding).

Example:
    signer = RequestSigner("vNIXE0xscrmjlyV-12Nj_BvUPaw=")
    signer.sign("https://maps.googleapis.com/maps/api/geocode/json?address=New+York&client=clientID")
    # 'chaRF2hTJKOScPr-RQCEhZbSzIE='
"""

import base64
import binascii
import hashlib
import hmac
from functools import cached_property
from urllib.parse import urlsplit

from .exceptions import InvalidArgumentError, InvalidCredentialsError

__all__ = ["RequestSigner", "decode_secret", "sign"]

_TO_STANDARD = str.maketrans("-_", "+/")
_TO_URLSAFE = str.maketrans("+/", "-_")


def decode_secret(secret: str) -> bytes:
    """Decodifica la clave de firma URL-safe base64 a bytes.

    Raises:
        InvalidCredentialsError: Si la clave está vacía o no es base64 válido
    """
    if not isinstance(secret, str) or not secret:
        raise InvalidCredentialsError("La clave de firma no puede estar vacía")
    try:
        return base64.b64decode(secret.translate(_TO_STANDARD), validate=True)
    except (binascii.Error, ValueError) as e:
        # No incluir la clave en el mensaje
        raise InvalidCredentialsError(
            "La clave de firma no es base64 URL-safe válido",
            details={"length": len(secret)},
        ) from e


def _path_and_query(url: str) -> bytes:
    parts = urlsplit(url)
    path_and_query = parts.path or "/"
    if parts.query:
        path_and_query += "?" + parts.query
    try:
        return path_and_query.encode("ascii")
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(
            "La URL a firmar contiene caracteres no ASCII",
            details={"position": e.start},
        ) from e


def _sign_with_key(key: bytes, url: str) -> str:
    digest = hmac.new(key, _path_and_query(url), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii").translate(_TO_URLSAFE)


def sign(secret: str, url: str) -> str:
    """Calcula la firma URL-safe de una URL.

    Args:
        secret: Clave de firma en base64 URL-safe
        url: URL completa; solo se firma el path y la query

    Returns:
        str: Firma en base64 URL-safe

    Raises:
        InvalidCredentialsError: Si la clave no es válida
        InvalidArgumentError: Si la URL contiene caracteres no ASCII
    """
    return _sign_with_key(decode_secret(secret), url)


class RequestSigner:
    """Firmador con la clave decodificada una sola vez.

    La clave se decodifica en la primera firma, de modo que una clave
    malformada se detecta al firmar, antes de cualquier petición de red.
    """

    def __init__(self, secret: str):
        self._secret = secret

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(secret=***)"

    @cached_property
    def key(self) -> bytes:
        return decode_secret(self._secret)

    def sign(self, url: str) -> str:
        return _sign_with_key(self.key, url)

    def sign_url(self, url: str) -> str:
        """Devuelve la URL con ``&signature=<firma>`` añadido."""
        return f"{url}&signature={self.sign(url)}"
