import json
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ParseError
from .result import GeocodeResult

STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"


class GeocodeResponse(BaseModel):
    """Modelo para una respuesta completa del endpoint de geocodificación."""
    model_config = ConfigDict(extra="ignore")

    status: str = Field(..., description="OK, ZERO_RESULTS, REQUEST_DENIED, ...")
    results: list[GeocodeResult] = Field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    def first(self) -> Optional[GeocodeResult]:
        return self.results[0] if self.results else None

    def __iter__(self):
        """Permite iterar sobre los resultados directamente: for r in response: ..."""
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


def parse_geocode_response(body: Union[bytes, str]) -> GeocodeResponse:
    """Deserializa el cuerpo de la respuesta.

    Raises:
        ParseError: Si el cuerpo no es JSON válido o no sigue el esquema
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        # UnicodeDecodeError es subclase de ValueError
        raise ParseError(
            "Respuesta no es JSON válido",
            details={"error": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise ParseError(
            "Respuesta JSON inesperada",
            details={"received_type": type(data).__name__},
        )

    try:
        return GeocodeResponse.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            "Respuesta no sigue el esquema de geocodificación",
            details={"errors": e.error_count()},
        ) from e
