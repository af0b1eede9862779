"""Builder for the ``add-trip-pattern`` modification."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Tuple

from .config import DEFAULT_TRIP_PATTERN_NAME
from .errors import InvalidTripPatternError
from .geometry import (
    LonLat,
    StopPattern,
    all_finite,
    coerce_coordinates,
    discretize,
    encode_polyline,
)
from .models import AddTripPatternDocument, Timetable
from .service_period import ServicePeriod
from .timetable import build_timetable

_LOG = logging.getLogger(__name__)


class TripPattern:
    """A brand-new transit line with stops placed at a fixed spacing.

    The geometry is copied when set and never modified, so one pattern can be
    finalized repeatedly, for example once per direction with a ``reverse()``
    call in between. Service periods are kept by reference and read only when
    :meth:`finalize` runs.
    """

    def __init__(self) -> None:
        self._geometry: Optional[List[LonLat]] = None
        self._spacing_m: Optional[float] = None
        self._periods: List[ServicePeriod] = []
        self._name = DEFAULT_TRIP_PATTERN_NAME
        self._reversed = False

    @property
    def name(self) -> str:
        return self._name

    def with_name(self, name: str) -> "TripPattern":
        self._name = name
        return self

    @property
    def geometry(self) -> Optional[List[LonLat]]:
        return None if self._geometry is None else list(self._geometry)

    def with_geometry(self, geometry: Any) -> "TripPattern":
        """Set the line shape from a GeoJSON LineString or (lon, lat) pairs."""

        self._geometry = coerce_coordinates(geometry)
        return self

    @property
    def spacing_m(self) -> Optional[float]:
        return self._spacing_m

    def with_spacing(self, spacing_m: float) -> "TripPattern":
        self._spacing_m = spacing_m
        return self

    @property
    def periods(self) -> Tuple[ServicePeriod, ...]:
        return tuple(self._periods)

    def add_period(self, period: ServicePeriod) -> "TripPattern":
        self._periods.append(period)
        return self

    @property
    def reversed(self) -> bool:
        return self._reversed

    def reverse(self) -> "TripPattern":
        """Flip the direction of travel, keeping stops in the same places."""

        self._reversed = not self._reversed
        return self

    def finalize(self) -> AddTripPatternDocument:
        """Return the ``add-trip-pattern`` document for the current state.

        Raises:
            InvalidTripPatternError: When geometry, spacing or any period
                would produce a meaningless or non-finite document.
        """

        coordinates, spacing_m = self._validated_inputs()
        stop_pattern = discretize(coordinates, spacing_m, reverse=self._reversed)
        timetables = self._build_timetables(stop_pattern)
        encoded = encode_polyline(stop_pattern.latlon_points())
        _LOG.debug(
            "Finalized trip pattern %r: %d stops, %d timetables",
            self._name,
            stop_pattern.stop_count,
            len(timetables),
        )
        return AddTripPatternDocument(
            name=self._name,
            stops=tuple(stop_pattern.is_stop),
            timetables=timetables,
            geometry=encoded,
        )

    def _validated_inputs(self) -> Tuple[List[LonLat], float]:
        if self._geometry is None:
            raise InvalidTripPatternError(
                f"trip pattern {self._name!r} has no geometry"
            )
        if len(self._geometry) < 2:
            raise InvalidTripPatternError(
                f"trip pattern {self._name!r} geometry needs at least two "
                f"coordinates, got {len(self._geometry)}"
            )
        if not all_finite(self._geometry):
            raise InvalidTripPatternError(
                f"trip pattern {self._name!r} geometry has non-finite coordinates"
            )
        spacing = self._spacing_m
        if spacing is None or not math.isfinite(spacing) or spacing <= 0:
            raise InvalidTripPatternError(
                f"trip pattern {self._name!r} stop spacing must be a positive "
                f"number of meters, got {spacing!r}"
            )
        for index, period in enumerate(self._periods):
            _check_period(self._name, index, period)
        return self._geometry, float(spacing)

    def _build_timetables(self, stop_pattern: StopPattern) -> Tuple[Timetable, ...]:
        stop_count = stop_pattern.stop_count
        return tuple(
            build_timetable(stop_count, stop_pattern.hop_distances_m, period)
            for period in self._periods
        )


def _check_period(name: str, index: int, period: ServicePeriod) -> None:
    speed = period.speed_kmh
    if not math.isfinite(speed) or speed <= 0:
        raise InvalidTripPatternError(
            f"trip pattern {name!r} period {index}: speed must be positive, got {speed!r}"
        )
    headway = period.headway_seconds
    if not math.isfinite(headway) or headway <= 0:
        raise InvalidTripPatternError(
            f"trip pattern {name!r} period {index}: headway must be positive, "
            f"got {headway!r}"
        )
    dwell = period.dwell_seconds
    if not math.isfinite(dwell) or dwell < 0:
        raise InvalidTripPatternError(
            f"trip pattern {name!r} period {index}: dwell must be a finite "
            f"non-negative number, got {dwell!r}"
        )


__all__ = ["TripPattern"]
