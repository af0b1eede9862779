"""Conversions between GeoJSON, coordinate lists and encoded polylines."""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Sequence

import polyline

from ..config import POLYLINE_PRECISION
from ..errors import InvalidGeometryError
from .models import LatLon, LonLat


def coerce_coordinates(geometry: Any) -> List[LonLat]:
    """Return a fresh list of (lon, lat) tuples from GeoJSON or a coordinate sequence.

    Accepts a GeoJSON ``LineString`` mapping or any sequence of two-element
    pairs. The input object is never mutated or retained.
    """

    if isinstance(geometry, Mapping):
        geometry_type = geometry.get("type")
        if geometry_type != "LineString":
            raise InvalidGeometryError(
                f"Expected a GeoJSON LineString, got type={geometry_type!r}"
            )
        raw = geometry.get("coordinates")
    else:
        raw = geometry
    if raw is None or isinstance(raw, (str, bytes)):
        raise InvalidGeometryError("Line geometry has no coordinate data")
    coordinates: List[LonLat] = []
    for index, pair in enumerate(raw):
        try:
            lon, lat = pair[0], pair[1]
            coordinates.append((float(lon), float(lat)))
        except (TypeError, ValueError, IndexError) as exc:
            raise InvalidGeometryError(
                f"Coordinate {index} is not a (lon, lat) pair: {pair!r}"
            ) from exc
    return coordinates


def all_finite(coordinates: Sequence[LonLat]) -> bool:
    return all(math.isfinite(lon) and math.isfinite(lat) for lon, lat in coordinates)


def encode_polyline(
    points: Sequence[LatLon], precision: int = POLYLINE_PRECISION
) -> str:
    """Encode (lat, lon) points into a polyline string."""

    return polyline.encode(list(points), precision)


def decode_polyline(encoded: str, precision: int = POLYLINE_PRECISION) -> List[LatLon]:
    """Decode an encoded polyline string into a list of (lat, lon) tuples."""

    if not encoded:
        return []
    try:
        decoded = polyline.decode(encoded, precision)
    except (ValueError, TypeError, IndexError) as exc:
        raise InvalidGeometryError("Unable to decode polyline") from exc
    return [(float(lat), float(lon)) for lat, lon in decoded]


__all__ = [
    "coerce_coordinates",
    "all_finite",
    "encode_polyline",
    "decode_polyline",
]
