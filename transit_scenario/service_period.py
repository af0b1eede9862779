"""Operating parameters of a new line during one window of the service day."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .config import (
    DEFAULT_DWELL_SECONDS,
    DEFAULT_END_SECONDS,
    DEFAULT_HEADWAY_SECONDS,
    DEFAULT_SPEED_KMH,
    DEFAULT_START_SECONDS,
    MAX_END_SECONDS,
    MAX_START_SECONDS,
    MIN_HEADWAY_WARNING_SECONDS,
    WARN_ON_SHORT_HEADWAY,
)
from .errors import TimeRangeError
from .models import WEEKDAYS, WEEKEND, Weekday

_LOG = logging.getLogger(__name__)


class ServicePeriod:
    """Headway, dwell, speed, time window and active days for one period.

    Every field has a read property and a fluent ``with_*`` setter returning
    ``self`` so periods can be built in a single expression::

        peak = ServicePeriod().with_start_seconds(7 * 3600).with_headway(300)

    Times are seconds since GTFS midnight. Start times must fall within one
    service day; end times may extend into the following day to describe
    overnight service. ``start <= end`` is left to the caller.
    """

    def __init__(self) -> None:
        self._start = DEFAULT_START_SECONDS
        self._end = DEFAULT_END_SECONDS
        self._headway = DEFAULT_HEADWAY_SECONDS
        self._dwell = DEFAULT_DWELL_SECONDS
        self._speed = DEFAULT_SPEED_KMH
        self._days: List[bool] = [True] * len(Weekday)

    def __repr__(self) -> str:
        return (
            f"ServicePeriod(start={self._start}, end={self._end}, "
            f"headway={self._headway}, dwell={self._dwell}, speed={self._speed}, "
            f"days={self._days})"
        )

    # -- time window -------------------------------------------------------
    @property
    def start_seconds(self) -> int:
        return self._start

    @start_seconds.setter
    def start_seconds(self, value: int) -> None:
        if not (0 <= value <= MAX_START_SECONDS):
            raise TimeRangeError(
                f"start time must be within one GTFS day (0-{MAX_START_SECONDS}s), "
                f"got {value}"
            )
        self._start = value

    def with_start_seconds(self, value: int) -> "ServicePeriod":
        self.start_seconds = value
        return self

    @property
    def end_seconds(self) -> int:
        return self._end

    @end_seconds.setter
    def end_seconds(self, value: int) -> None:
        if not (0 <= value <= MAX_END_SECONDS):
            raise TimeRangeError(
                f"end time must be within two GTFS days (0-{MAX_END_SECONDS}s), "
                f"got {value}"
            )
        self._end = value

    def with_end_seconds(self, value: int) -> "ServicePeriod":
        self.end_seconds = value
        return self

    # -- operations --------------------------------------------------------
    @property
    def headway_seconds(self) -> int:
        return self._headway

    @headway_seconds.setter
    def headway_seconds(self, value: int) -> None:
        if WARN_ON_SHORT_HEADWAY and value < MIN_HEADWAY_WARNING_SECONDS:
            _LOG.warning(
                "headway of %s seconds is less than %s seconds; "
                "are you sure you didn't specify minutes by mistake?",
                value,
                MIN_HEADWAY_WARNING_SECONDS,
            )
        self._headway = value

    def with_headway(self, value: int) -> "ServicePeriod":
        self.headway_seconds = value
        return self

    @property
    def dwell_seconds(self) -> int:
        return self._dwell

    @dwell_seconds.setter
    def dwell_seconds(self, value: int) -> None:
        self._dwell = value

    def with_dwell(self, value: int) -> "ServicePeriod":
        self.dwell_seconds = value
        return self

    @property
    def speed_kmh(self) -> float:
        return self._speed

    @speed_kmh.setter
    def speed_kmh(self, value: float) -> None:
        self._speed = value

    def with_speed(self, value: float) -> "ServicePeriod":
        self.speed_kmh = value
        return self

    # -- days of service ---------------------------------------------------
    @property
    def days_active(self) -> Tuple[bool, ...]:
        """Seven flags in Monday..Sunday order."""

        return tuple(self._days)

    def is_active_on(self, day: Weekday) -> bool:
        return self._days[Weekday(day)]

    def with_day(self, day: Weekday, active: bool) -> "ServicePeriod":
        self._days[Weekday(day)] = bool(active)
        return self

    def _with_days(self, days: Iterable[Weekday], active: bool) -> "ServicePeriod":
        for day in days:
            self.with_day(day, active)
        return self

    @property
    def weekday(self) -> bool:
        """True only when Monday through Friday are all active."""

        return all(self._days[day] for day in WEEKDAYS)

    def with_weekday(self, active: bool) -> "ServicePeriod":
        return self._with_days(WEEKDAYS, active)

    @property
    def weekend(self) -> bool:
        return all(self._days[day] for day in WEEKEND)

    def with_weekend(self, active: bool) -> "ServicePeriod":
        return self._with_days(WEEKEND, active)


__all__ = ["ServicePeriod"]
