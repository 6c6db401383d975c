from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LatLng(BaseModel):
    """Punto WGS84."""
    model_config = ConfigDict(extra="ignore")

    lat: float = Field(..., ge=-90, le=90, description="Latitud")
    lng: float = Field(..., ge=-180, le=180, description="Longitud")


class Viewport(BaseModel):
    """Rectángulo recomendado para mostrar el resultado."""
    model_config = ConfigDict(extra="ignore")

    northeast: LatLng
    southwest: LatLng


class Geometry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    location: LatLng
    location_type: str = Field("", description="ROOFTOP, RANGE_INTERPOLATED, GEOMETRIC_CENTER o APPROXIMATE")
    viewport: Optional[Viewport] = None
    bounds: Optional[Viewport] = None


class AddressComponent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    long_name: str
    short_name: str
    types: list[str] = Field(default_factory=list)


class GeocodeResult(BaseModel):
    """Modelo para un resultado de geocodificación individual."""
    model_config = ConfigDict(extra="ignore")

    formatted_address: str = Field("", description="Dirección legible completa")
    address_components: list[AddressComponent] = Field(default_factory=list)
    geometry: Geometry
    place_id: Optional[str] = Field(None, description="Identificador único del lugar")
    types: list[str] = Field(default_factory=list, description="Tipos del resultado (street_address, locality...)")
    partial_match: bool = Field(False, description="True si la coincidencia no es exacta")

    @field_validator("formatted_address", mode="before")
    @classmethod
    def validate_formatted_address(cls, v):
        if v is None:
            return ""
        return str(v)

    @property
    def location(self) -> LatLng:
        return self.geometry.location

    def component(self, component_type: str) -> Optional[AddressComponent]:
        """Devuelve el primer componente de dirección de un tipo dado (ej: 'locality')."""
        for component in self.address_components:
            if component_type in component.types:
                return component
        return None
