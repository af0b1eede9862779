"""Great-circle distances between WGS84 coordinates."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..config import EARTH_RADIUS_KM
from .models import LonLat

KilometerArray = NDArray[np.float64]


def distance_km(first: LonLat, second: LonLat) -> float:
    """Return the haversine distance between two (lon, lat) points in kilometers."""

    lon1, lat1 = first
    lon2, lat2 = second
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    sin_half_lat = math.sin((lat2_rad - lat1_rad) / 2.0)
    sin_half_lon = math.sin(math.radians(lon2 - lon1) / 2.0)
    a = sin_half_lat**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * sin_half_lon**2
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def segment_lengths_km(coordinates: Sequence[LonLat]) -> KilometerArray:
    """Return the great-circle length of every consecutive vertex pair."""

    array = np.asarray(coordinates, dtype=float)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError("Expected a sequence of (lon, lat) coordinates")
    if len(array) < 2:
        return np.zeros(0, dtype=float)
    radians = np.radians(array)
    lon, lat = radians[:, 0], radians[:, 1]
    sin_half_lat = np.sin(np.diff(lat) / 2.0)
    sin_half_lon = np.sin(np.diff(lon) / 2.0)
    a = sin_half_lat**2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * sin_half_lon**2
    # Rounding can push ``a`` a hair outside [0, 1] for near-antipodal points.
    a = np.clip(a, 0.0, 1.0)
    return EARTH_RADIUS_KM * 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))


def line_length_km(coordinates: Sequence[LonLat]) -> float:
    """Return the total great-circle length of a line in kilometers."""

    return float(np.sum(segment_lengths_km(coordinates)))


__all__ = ["distance_km", "segment_lengths_km", "line_length_km"]
