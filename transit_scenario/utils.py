"""General utility helpers shared across modules."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any


def setup_logging(level: int = logging.INFO) -> None:
    """Install a basic root handler unless the host application already has one."""

    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _normalise_value(value: Any) -> Any:
    """Convert objects to JSON-friendly representations."""

    if hasattr(value, "to_dict"):
        return _normalise_value(value.to_dict())
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_normalise_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _normalise_value(val) for key, val in value.items()}
    return value


def json_dumps_sorted(value: Any) -> str:
    """Return canonical JSON for hashing / comparisons."""

    normalised = _normalise_value(value)
    return json.dumps(
        normalised, sort_keys=True, separators=(",", ":"), allow_nan=False
    )
