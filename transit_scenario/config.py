"""Central configuration for the transit scenario builders.

All values are constants imported by the rest of the package. Tunable values
are read from environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
# Mean earth radius (km) used for great-circle distances.
EARTH_RADIUS_KM = _env_float("SCENARIO_EARTH_RADIUS_KM", 6371.0088)

# Decimal digits kept by the polyline encoder. The analysis engine decodes
# with precision 5.
POLYLINE_PRECISION = _env_int("SCENARIO_POLYLINE_PRECISION", 5)


# ---------------------------------------------------------------------------
# Service periods
# ---------------------------------------------------------------------------
# Seconds since GTFS midnight.
SECONDS_PER_DAY = 24 * 3600

# Start times must fall on the service day; end times may run past midnight.
MAX_START_SECONDS = SECONDS_PER_DAY
MAX_END_SECONDS = 2 * SECONDS_PER_DAY

DEFAULT_START_SECONDS = 0
DEFAULT_END_SECONDS = SECONDS_PER_DAY - 1
DEFAULT_HEADWAY_SECONDS = 10 * 60
DEFAULT_DWELL_SECONDS = 0
DEFAULT_SPEED_KMH = 15.0

# Headways below this usually mean minutes were entered as seconds.
MIN_HEADWAY_WARNING_SECONDS = _env_int("SCENARIO_MIN_HEADWAY_WARNING_SECONDS", 120)

# Set to False to silence the short-headway warning entirely.
WARN_ON_SHORT_HEADWAY = _env_bool("SCENARIO_WARN_ON_SHORT_HEADWAY", True)


# ---------------------------------------------------------------------------
# Modification defaults
# ---------------------------------------------------------------------------
DEFAULT_TRIP_PATTERN_NAME = "New trip pattern"

# Frequency conversion window covers the whole service day by default.
DEFAULT_WINDOW_START = 0
DEFAULT_WINDOW_END = SECONDS_PER_DAY
