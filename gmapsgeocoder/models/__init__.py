"""
Modelos de datos para gmapsgeocoder.
"""

from .result import AddressComponent, GeocodeResult, Geometry, LatLng, Viewport
from .response import GeocodeResponse, parse_geocode_response

__all__ = [
    "AddressComponent",
    "GeocodeResult",
    "GeocodeResponse",
    "Geometry",
    "LatLng",
    "Viewport",
    "parse_geocode_response",
]
