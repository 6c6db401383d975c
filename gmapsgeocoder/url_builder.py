"""
Construcción de la URL de geocodificación.

El orden de los parámetros es significativo: la firma cubre el path y la
query literales, y Google la valida sobre la misma cadena.
"""

from urllib.parse import quote

from .exceptions import InvalidArgumentError

__all__ = ["GEOCODE_JSON_ENDPOINT", "QueryParams", "build_url", "escape_data_string"]

GEOCODE_JSON_ENDPOINT = "https://maps.googleapis.com/maps/api/geocode/json"


def escape_data_string(value: str) -> str:
    """Escapa un valor según RFC 3986: solo se conservan A-Z a-z 0-9 - . _ ~"""
    return quote(value, safe="")


class QueryParams:
    """Lista ordenada de parámetros de query.

    Se serializa siempre en orden de inserción. Los valores se añaden ya
    escapados (o con ``escape=True``) y no se vuelven a tocar al codificar.

    Example:
        params = QueryParams()
        params.add("client", "gme-test")
        params.add("address", "Diagonal 100", escape=True)
        params.encode()  # 'client=gme-test&address=Diagonal%20100'
    """

    def __init__(self):
        self._items: list[tuple[str, str]] = []

    def add(self, name: str, value: str, escape: bool = False) -> "QueryParams":
        self._items.append((name, escape_data_string(value) if escape else value))
        return self

    def names(self) -> list[str]:
        return [name for name, _ in self._items]

    def encode(self) -> str:
        return "&".join(f"{name}={value}" for name, value in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


def build_url(base_endpoint, credentials, address, region=None) -> str:
    """Construye la URL de la petición de geocodificación (sin firma).

    Orden: ``key`` o ``client`` (si aplica), ``address`` y ``region`` (si no
    está vacía).

    Args:
        base_endpoint: URL del endpoint JSON de geocodificación
        credentials: Variante de credenciales (ver credentials.py)
        address: Dirección postal a geocodificar
        region: Código de región (ccTLD) para sesgar resultados

    Returns:
        str: URL completa

    Raises:
        InvalidArgumentError: Si la dirección es nula, no es string o está
            vacía, o si la región no es string
    """
    if not isinstance(address, str):
        raise InvalidArgumentError(
            "La dirección debe ser string",
            details={"received_type": type(address).__name__},
        )
    if not address.strip():
        raise InvalidArgumentError("La dirección no puede estar vacía")
    if region is not None and not isinstance(region, str):
        raise InvalidArgumentError(
            "La región debe ser string",
            details={"received_type": type(region).__name__},
        )

    params = QueryParams()
    auth_param = credentials.auth_param()
    if auth_param is not None:
        params.add(*auth_param)
    params.add("address", address, escape=True)
    if region is not None and region.strip():
        params.add("region", region, escape=True)

    return f"{base_endpoint}?{params.encode()}"
