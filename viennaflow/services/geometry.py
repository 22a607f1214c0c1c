"""Decode PostGIS WKB geometries into GeoJSON geometry mappings."""
from typing import Any

from geoalchemy2.elements import WKBElement
from geoalchemy2.shape import to_shape
from shapely import wkb
from shapely.errors import ShapelyError
from shapely.geometry import mapping

from viennaflow.errors import GeometryDecodeError


def _as_lists(value: Any) -> Any:
    """shapely's mapping() uses tuples; GeoJSON consumers expect nested lists."""
    if isinstance(value, (tuple, list)):
        return [_as_lists(v) for v in value]
    if isinstance(value, dict):
        return {k: _as_lists(v) for k, v in value.items()}
    return value


def decode_geometry(value: str | bytes | WKBElement | None) -> dict[str, Any]:
    """
    Turn a hex WKB string (as stored), raw WKB bytes or a WKBElement (as returned by
    geoalchemy2) into {"type": ..., "coordinates": ...}. Whatever geometry the WKB
    header names is kept; points come out as [lon, lat].
    Raises GeometryDecodeError on malformed input or an unsupported geometry tag.
    """
    if value is None or (isinstance(value, (str, bytes)) and not value.strip()):
        raise GeometryDecodeError("geometry is missing")
    try:
        if isinstance(value, WKBElement):
            shape = to_shape(value)
        elif isinstance(value, str):
            shape = wkb.loads(value.strip(), hex=True)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            shape = wkb.loads(bytes(value))
        else:
            raise GeometryDecodeError(f"unsupported geometry value of type {type(value).__name__}")
    except (ShapelyError, ValueError, TypeError) as exc:
        raise GeometryDecodeError(str(exc) or exc.__class__.__name__) from exc
    return _as_lists(mapping(shape))
