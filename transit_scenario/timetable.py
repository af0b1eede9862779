"""Derive frequency-based timetables from a discretized stop pattern."""

from __future__ import annotations

from typing import Sequence

from .models import Timetable
from .service_period import ServicePeriod

_SECONDS_PER_HOUR = 3600.0


def hop_time_seconds(distance_m: float, speed_kmh: float) -> float:
    """Return the time needed to cover ``distance_m`` at a constant ``speed_kmh``."""

    return (distance_m / 1000.0) / speed_kmh * _SECONDS_PER_HOUR


def build_timetable(
    stop_count: int,
    hop_distances_m: Sequence[float],
    period: ServicePeriod,
) -> Timetable:
    """Return the timetable a ``period`` produces for a line with these stops.

    Every stop gets the period's dwell time and every hop is travelled at the
    period's speed. Values are read from ``period`` at call time.
    """

    return Timetable(
        start_time=period.start_seconds,
        end_time=period.end_seconds,
        headway_secs=period.headway_seconds,
        dwell_times=(period.dwell_seconds,) * stop_count,
        hop_times=tuple(
            hop_time_seconds(distance, period.speed_kmh) for distance in hop_distances_m
        ),
        days=period.days_active,
    )


__all__ = ["build_timetable", "hop_time_seconds"]
