"""Dataclasses describing line geometry and its stop discretization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


LonLat = Tuple[float, float]
LatLon = Tuple[float, float]


@dataclass(slots=True)
class StopPattern:
    """A line geometry with interpolated stop vertices and inter-stop hops.

    ``is_stop`` is aligned with ``coordinates``; ``hop_distances_m`` holds one
    entry per gap between consecutive stops.
    """

    coordinates: List[LonLat]
    is_stop: List[bool]
    hop_distances_m: List[float]

    @property
    def stop_count(self) -> int:
        return sum(1 for flag in self.is_stop if flag)

    @property
    def length_m(self) -> float:
        return float(sum(self.hop_distances_m))

    def latlon_points(self) -> List[LatLon]:
        """Return the discretized coordinates flipped to (lat, lon) order."""

        return [(lat, lon) for lon, lat in self.coordinates]
