"""Tests for the remove-trip, adjust-headway and convert-to-frequency builders."""

from __future__ import annotations

import pytest

from transit_scenario import AdjustHeadway, ConvertToFrequency, GroupBy, RemoveTrip


def test_remove_trip_without_filters_emits_nulls() -> None:
    payload = RemoveTrip().finalize().to_dict()
    assert payload == {
        "type": "remove-trip",
        "agencyId": None,
        "routeId": None,
        "tripId": None,
        "routeType": None,
    }


def test_remove_trip_accumulates_filters_in_order() -> None:
    builder = (
        RemoveTrip()
        .with_agency("MUNI")
        .add_route("R1")
        .add_route("R2")
        .add_trip("T9")
        .add_type(3)
    )
    payload = builder.finalize().to_dict()
    assert payload["agencyId"] == "MUNI"
    assert payload["routeId"] == ["R1", "R2"]
    assert payload["tripId"] == ["T9"]
    assert payload["routeType"] == [3]


def test_filters_are_independent() -> None:
    builder = RemoveTrip().add_trip("T1")
    assert builder.trip_ids == ("T1",)
    assert builder.route_ids is None
    assert builder.route_types is None


def test_emitted_document_does_not_change_with_builder() -> None:
    builder = RemoveTrip().add_route("R1")
    doc = builder.finalize()
    builder.add_route("R2")

    assert doc.route_id == ("R1",)
    assert builder.finalize().route_id == ("R1", "R2")


def test_adjust_headway_defaults() -> None:
    payload = AdjustHeadway().finalize().to_dict()
    assert payload == {
        "type": "adjust-headway",
        "agencyId": None,
        "routeId": None,
        "tripId": None,
        "routeType": None,
        "headway": 600,
    }


def test_adjust_headway_with_filters() -> None:
    builder = AdjustHeadway().with_headway(300).add_route("38").add_type(3).add_type(0)
    assert builder.headway_seconds == 300
    payload = builder.finalize().to_dict()
    assert payload["headway"] == 300
    assert payload["routeId"] == ["38"]
    assert payload["routeType"] == [3, 0]
    assert payload["tripId"] is None


def test_fluent_methods_return_same_builder() -> None:
    builder = AdjustHeadway()
    assert builder.with_agency("A") is builder
    assert builder.add_route("R") is builder
    assert builder.add_trip("T") is builder
    assert builder.add_type(1) is builder
    assert builder.with_headway(120) is builder


def test_convert_to_frequency_defaults_to_empty_route_list() -> None:
    payload = ConvertToFrequency().finalize().to_dict()
    assert payload == {
        "type": "convert-to-frequency",
        "windowStart": 0,
        "windowEnd": 86400,
        "groupBy": "ROUTE_DIRECTION",
        "routeId": [],
    }


def test_convert_to_frequency_builder() -> None:
    builder = (
        ConvertToFrequency()
        .add_route("1")
        .add_route("2")
        .with_window_start(6 * 3600)
        .with_window_end(22 * 3600)
        .with_group_by("ROUTE")
    )
    assert builder.group_by is GroupBy.ROUTE
    doc = builder.finalize()
    assert doc.route_id == ("1", "2")
    assert doc.to_dict()["groupBy"] == "ROUTE"
    assert doc.window_start == 21600
    assert doc.window_end == 79200


def test_convert_to_frequency_accepts_enum_and_rejects_unknown() -> None:
    builder = ConvertToFrequency().with_group_by(GroupBy.PATTERN)
    assert builder.finalize().group_by is GroupBy.PATTERN
    with pytest.raises(ValueError):
        builder.with_group_by("STOP")


def test_documents_render_canonical_json() -> None:
    assert RemoveTrip().add_type(3).finalize().to_json() == (
        '{"agencyId":null,"routeId":null,"routeType":[3],"tripId":null,'
        '"type":"remove-trip"}'
    )
    assert ConvertToFrequency().finalize().to_json() == (
        '{"groupBy":"ROUTE_DIRECTION","routeId":[],"type":"convert-to-frequency",'
        '"windowEnd":86400,"windowStart":0}'
    )
