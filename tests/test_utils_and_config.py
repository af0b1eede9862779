import logging

import pytest

from transit_scenario import GroupBy, config
from transit_scenario.utils import json_dumps_sorted, setup_logging


def test_json_dumps_sorted_is_canonical() -> None:
    assert json_dumps_sorted({"b": 1, "a": (2, 3)}) == '{"a":[2,3],"b":1}'


def test_json_dumps_sorted_renders_enums() -> None:
    assert json_dumps_sorted([GroupBy.ROUTE]) == '["ROUTE"]'


def test_setup_logging_respects_existing_handlers(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        setup_logging()
    finally:
        root.removeHandler(handler)
    assert calls == []


def test_setup_logging_installs_handler_when_missing(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setattr(logging.Logger, "hasHandlers", lambda self: False)
    setup_logging(logging.DEBUG)
    assert calls and calls[0]["level"] == logging.DEBUG


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 7), ("12", 12), ("twelve", 7)],
)
def test_env_int_falls_back_to_default(monkeypatch, raw, expected) -> None:
    if raw is None:
        monkeypatch.delenv("SCENARIO_TEST_INT", raising=False)
    else:
        monkeypatch.setenv("SCENARIO_TEST_INT", raw)
    assert config._env_int("SCENARIO_TEST_INT", 7) == expected


def test_env_float_and_bool(monkeypatch) -> None:
    monkeypatch.setenv("SCENARIO_TEST_FLOAT", "6378.1")
    monkeypatch.setenv("SCENARIO_TEST_BOOL", "off")
    assert config._env_float("SCENARIO_TEST_FLOAT", 1.0) == pytest.approx(6378.1)
    assert config._env_bool("SCENARIO_TEST_BOOL", True) is False
    monkeypatch.setenv("SCENARIO_TEST_BOOL", "maybe")
    assert config._env_bool("SCENARIO_TEST_BOOL", True) is True


def test_time_bounds() -> None:
    assert config.MAX_START_SECONDS == 86400
    assert config.MAX_END_SECONDS == 172800


def test_json_dumps_sorted_rejects_non_finite_numbers() -> None:
    with pytest.raises(ValueError):
        json_dumps_sorted({"hopTimes": [float("nan")]})
