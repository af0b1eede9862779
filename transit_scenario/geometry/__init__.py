"""Line geometry helpers: distances, polyline encoding and stop placement."""

from .models import LatLon, LonLat, StopPattern
from .distance import distance_km, line_length_km, segment_lengths_km
from .encoding import (
    all_finite,
    coerce_coordinates,
    decode_polyline,
    encode_polyline,
)
from .discretize import discretize

__all__ = [
    "LatLon",
    "LonLat",
    "StopPattern",
    "distance_km",
    "line_length_km",
    "segment_lengths_km",
    "all_finite",
    "coerce_coordinates",
    "decode_polyline",
    "encode_polyline",
    "discretize",
]
