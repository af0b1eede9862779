"""Builders for modifications that act on existing GTFS trips.

Trip filters distinguish between "not set" and "empty": a filter list stays
``None`` (match on any value) until the first value is added.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, TypeVar, Union

from .config import DEFAULT_HEADWAY_SECONDS, DEFAULT_WINDOW_END, DEFAULT_WINDOW_START
from .models import (
    AdjustHeadwayDocument,
    ConvertToFrequencyDocument,
    GroupBy,
    RemoveTripDocument,
)

T = TypeVar("T")
_FilterT = TypeVar("_FilterT", bound="_TripFilter")


def _append(values: Optional[List[T]], value: T) -> List[T]:
    if values is None:
        return [value]
    values.append(value)
    return values


def _snapshot(values: Optional[List[T]]) -> Optional[Tuple[T, ...]]:
    return None if values is None else tuple(values)


class _TripFilter:
    """Agency, route, trip and route-type criteria shared by trip modifications."""

    def __init__(self) -> None:
        self._agency_id: Optional[str] = None
        self._route_ids: Optional[List[str]] = None
        self._trip_ids: Optional[List[str]] = None
        self._route_types: Optional[List[int]] = None

    @property
    def agency_id(self) -> Optional[str]:
        return self._agency_id

    def with_agency(self: _FilterT, agency_id: Optional[str]) -> _FilterT:
        self._agency_id = agency_id
        return self

    @property
    def route_ids(self) -> Optional[Tuple[str, ...]]:
        return _snapshot(self._route_ids)

    def add_route(self: _FilterT, route_id: str) -> _FilterT:
        self._route_ids = _append(self._route_ids, route_id)
        return self

    @property
    def trip_ids(self) -> Optional[Tuple[str, ...]]:
        return _snapshot(self._trip_ids)

    def add_trip(self: _FilterT, trip_id: str) -> _FilterT:
        self._trip_ids = _append(self._trip_ids, trip_id)
        return self

    @property
    def route_types(self) -> Optional[Tuple[int, ...]]:
        return _snapshot(self._route_types)

    def add_type(self: _FilterT, route_type: int) -> _FilterT:
        """Add a GTFS route type (0 = tram, 3 = bus, ...) to match."""

        self._route_types = _append(self._route_types, route_type)
        return self


class RemoveTrip(_TripFilter):
    """Remove every trip matching the configured filters."""

    def finalize(self) -> RemoveTripDocument:
        return RemoveTripDocument(
            agency_id=self._agency_id,
            route_id=self.route_ids,
            trip_id=self.trip_ids,
            route_type=self.route_types,
        )


class AdjustHeadway(_TripFilter):
    """Set a new headway (seconds) on every trip matching the filters."""

    def __init__(self) -> None:
        super().__init__()
        self._headway = DEFAULT_HEADWAY_SECONDS

    @property
    def headway_seconds(self) -> int:
        return self._headway

    def with_headway(self, headway_seconds: int) -> "AdjustHeadway":
        self._headway = headway_seconds
        return self

    def finalize(self) -> AdjustHeadwayDocument:
        return AdjustHeadwayDocument(
            headway=self._headway,
            agency_id=self._agency_id,
            route_id=self.route_ids,
            trip_id=self.trip_ids,
            route_type=self.route_types,
        )


class ConvertToFrequency:
    """Replace scheduled trips on the listed routes with frequency entries.

    Unlike the trip filters above, the route list starts empty: a conversion
    with no routes converts nothing.
    """

    def __init__(self) -> None:
        self._route_ids: List[str] = []
        self._window_start = DEFAULT_WINDOW_START
        self._window_end = DEFAULT_WINDOW_END
        self._group_by = GroupBy.ROUTE_DIRECTION

    @property
    def route_ids(self) -> Tuple[str, ...]:
        return tuple(self._route_ids)

    def add_route(self, route_id: str) -> "ConvertToFrequency":
        self._route_ids.append(route_id)
        return self

    @property
    def window_start(self) -> int:
        return self._window_start

    def with_window_start(self, seconds: int) -> "ConvertToFrequency":
        self._window_start = seconds
        return self

    @property
    def window_end(self) -> int:
        return self._window_end

    def with_window_end(self, seconds: int) -> "ConvertToFrequency":
        self._window_end = seconds
        return self

    @property
    def group_by(self) -> GroupBy:
        return self._group_by

    def with_group_by(self, group_by: Union[GroupBy, str]) -> "ConvertToFrequency":
        """Accepts a :class:`GroupBy` member or its name, e.g. ``"ROUTE"``."""

        self._group_by = GroupBy(group_by)
        return self

    def finalize(self) -> ConvertToFrequencyDocument:
        return ConvertToFrequencyDocument(
            window_start=self._window_start,
            window_end=self._window_end,
            group_by=self._group_by,
            route_id=self.route_ids,
        )


__all__ = ["RemoveTrip", "AdjustHeadway", "ConvertToFrequency"]
