"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable line geometries and service
periods shared across the test modules.
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from transit_scenario.service_period import ServicePeriod


# --- Factory helpers -------------------------------------------------
def make_straight_line():
    """Due-north line along the prime meridian, about 1.112 km long."""
    return [(0.0, 0.0), (0.0, 0.01)]


def make_l_shaped_line():
    """East then north along two ~1.112 km legs at the equator."""
    return [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01)]


def make_winding_line():
    return [
        (-122.4194, 37.7749),
        (-122.4148, 37.7790),
        (-122.4090, 37.7812),
        (-122.4021, 37.7880),
        (-122.3990, 37.7935),
        (-122.3941, 37.7955),
    ]


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def straight_line():
    return make_straight_line()


@pytest.fixture
def l_shaped_line():
    return make_l_shaped_line()


@pytest.fixture
def winding_line():
    return make_winding_line()


@pytest.fixture(params=["straight", "l_shaped", "winding"])
def any_line(request):
    factories = {
        "straight": make_straight_line,
        "l_shaped": make_l_shaped_line,
        "winding": make_winding_line,
    }
    return factories[request.param]()


@pytest.fixture
def peak_period():
    return (
        ServicePeriod()
        .with_start_seconds(7 * 3600)
        .with_end_seconds(9 * 3600)
        .with_headway(300)
        .with_dwell(20)
        .with_speed(20)
        .with_weekend(False)
    )
