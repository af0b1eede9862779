"""Immutable documents emitted by the scenario modification builders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Tuple

from .utils import json_dumps_sorted


class Weekday(IntEnum):
    """Days of service, in the order the analysis engine expects them."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


WEEKDAYS = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
)
WEEKEND = (Weekday.SATURDAY, Weekday.SUNDAY)


class GroupBy(str, Enum):
    """How trips are grouped when converting a schedule to frequencies."""

    ROUTE = "ROUTE"
    ROUTE_DIRECTION = "ROUTE_DIRECTION"
    PATTERN = "PATTERN"


def _optional_list(values: Optional[Tuple[Any, ...]]) -> Optional[List[Any]]:
    return None if values is None else list(values)


class _Document:
    """Wire rendering shared by every emitted document."""

    __slots__ = ()

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_json(self) -> str:
        """Return canonical JSON with sorted keys, as sent to the analysis engine."""

        return json_dumps_sorted(self.to_dict())


@dataclass(frozen=True, slots=True)
class Timetable(_Document):
    """Frequency-based schedule for one service period of a new trip pattern."""

    start_time: int
    end_time: int
    headway_secs: int
    dwell_times: Tuple[int, ...]
    hop_times: Tuple[float, ...]
    days: Tuple[bool, ...]
    frequency: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "headwaySecs": self.headway_secs,
            "frequency": self.frequency,
            "dwellTimes": list(self.dwell_times),
            "hopTimes": list(self.hop_times),
            "days": list(self.days),
        }


@dataclass(frozen=True, slots=True)
class AddTripPatternDocument(_Document):
    """A brand-new trip pattern with its stops, timetables and encoded shape."""

    name: str
    stops: Tuple[bool, ...]
    timetables: Tuple[Timetable, ...]
    geometry: str
    type: str = "add-trip-pattern"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "stops": list(self.stops),
            "timetables": [timetable.to_dict() for timetable in self.timetables],
            "geometry": self.geometry,
        }


@dataclass(frozen=True, slots=True)
class RemoveTripDocument(_Document):
    """Removes every trip matching the filters. ``None`` means no filter."""

    agency_id: Optional[str] = None
    route_id: Optional[Tuple[str, ...]] = None
    trip_id: Optional[Tuple[str, ...]] = None
    route_type: Optional[Tuple[int, ...]] = None
    type: str = "remove-trip"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "agencyId": self.agency_id,
            "routeId": _optional_list(self.route_id),
            "tripId": _optional_list(self.trip_id),
            "routeType": _optional_list(self.route_type),
        }


@dataclass(frozen=True, slots=True)
class AdjustHeadwayDocument(_Document):
    """Sets a new headway on every trip matching the filters."""

    headway: int
    agency_id: Optional[str] = None
    route_id: Optional[Tuple[str, ...]] = None
    trip_id: Optional[Tuple[str, ...]] = None
    route_type: Optional[Tuple[int, ...]] = None
    type: str = "adjust-headway"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "agencyId": self.agency_id,
            "routeId": _optional_list(self.route_id),
            "tripId": _optional_list(self.trip_id),
            "routeType": _optional_list(self.route_type),
            "headway": self.headway,
        }


@dataclass(frozen=True, slots=True)
class ConvertToFrequencyDocument(_Document):
    """Replaces the scheduled trips of the listed routes with frequency entries."""

    window_start: int
    window_end: int
    group_by: GroupBy
    route_id: Tuple[str, ...] = ()
    type: str = "convert-to-frequency"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "windowStart": self.window_start,
            "windowEnd": self.window_end,
            "groupBy": self.group_by.value,
            "routeId": list(self.route_id),
        }
