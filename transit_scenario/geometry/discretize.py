"""Place evenly spaced stops along a line geometry."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..errors import InvalidGeometryError
from .distance import segment_lengths_km
from .models import LonLat, StopPattern

_LOG = logging.getLogger(__name__)

# A stop mark must lie more than this many km before the accumulated
# distance to be placed.
_DISTANCE_TOLERANCE_KM = 1e-9


def discretize(
    coordinates: Sequence[LonLat],
    spacing_m: float,
    *,
    reverse: bool = False,
) -> StopPattern:
    """Walk ``coordinates`` and insert a stop every ``spacing_m`` meters.

    The first and last vertices are always stops. Stops falling between two
    vertices are linearly interpolated on both axes and inserted into the
    returned geometry; original intermediate vertices are kept but are not
    stops. The trailing hop holds whatever distance remains after the last
    interpolated stop, so the hops always sum to the line length.

    With ``reverse`` the geometry, stop flags and hops are all returned in
    the opposite direction. The input sequence is never modified.

    Parameters:
        coordinates: Two or more (lon, lat) vertices.
        spacing_m: Distance between interpolated stops in meters.
        reverse: Emit the pattern for the opposite direction of travel.

    Returns:
        A :class:`StopPattern` whose ``is_stop`` is aligned with its
        coordinates and whose hops number one fewer than its stops.

    Raises:
        InvalidGeometryError: When fewer than two coordinates are given.
    """

    if len(coordinates) < 2:
        raise InvalidGeometryError(
            f"Need at least two coordinates to place stops, got {len(coordinates)}"
        )
    spacing_km = spacing_m / 1000.0
    segment_lengths = segment_lengths_km(coordinates)

    points: List[LonLat] = [tuple(coordinates[0])]
    is_stop: List[bool] = [True]
    hops: List[float] = []

    accumulator = 0.0
    next_stop = spacing_km
    last_index = len(coordinates) - 1

    for index in range(1, len(coordinates)):
        x1, y1 = coordinates[index - 1]
        x2, y2 = coordinates[index]
        segment_km = float(segment_lengths[index - 1])
        accumulator += segment_km

        # Duplicate vertices add no distance and cannot host a stop.
        if segment_km > 0:
            while accumulator - next_stop > _DISTANCE_TOLERANCE_KM:
                fraction = (segment_km - (accumulator - next_stop)) / segment_km
                points.append((x1 + (x2 - x1) * fraction, y1 + (y2 - y1) * fraction))
                is_stop.append(True)
                hops.append(spacing_m)
                next_stop += spacing_km

        points.append((x2, y2))
        is_stop.append(index == last_index)

    # Back to meters: distance travelled since the last interpolated stop.
    hops.append((accumulator - (next_stop - spacing_km)) * 1000.0)

    if reverse:
        hops.reverse()
        points.reverse()
        is_stop.reverse()

    _LOG.debug(
        "Discretized %d vertices into %d stops over %.3f km (spacing=%sm, reverse=%s)",
        len(coordinates),
        len(hops) + 1,
        accumulator,
        spacing_m,
        reverse,
    )
    return StopPattern(coordinates=points, is_stop=is_stop, hop_distances_m=hops)


__all__ = ["discretize"]
