"""Builders for transit scenario modification documents."""

from .errors import (
    InvalidGeometryError,
    InvalidTripPatternError,
    ScenarioError,
    TimeRangeError,
)
from .models import (
    AddTripPatternDocument,
    AdjustHeadwayDocument,
    ConvertToFrequencyDocument,
    GroupBy,
    RemoveTripDocument,
    Timetable,
    Weekday,
)
from .modifications import AdjustHeadway, ConvertToFrequency, RemoveTrip
from .service_period import ServicePeriod
from .trip_pattern import TripPattern
from .utils import json_dumps_sorted, setup_logging

__all__ = [
    "TripPattern",
    "ServicePeriod",
    "RemoveTrip",
    "AdjustHeadway",
    "ConvertToFrequency",
    "AddTripPatternDocument",
    "AdjustHeadwayDocument",
    "ConvertToFrequencyDocument",
    "RemoveTripDocument",
    "Timetable",
    "GroupBy",
    "Weekday",
    "ScenarioError",
    "TimeRangeError",
    "InvalidGeometryError",
    "InvalidTripPatternError",
    "json_dumps_sorted",
    "setup_logging",
]
