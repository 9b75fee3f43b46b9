"""Tests for response normalization, row formatting and the table client."""

import asyncio

import httpx
import pytest

from bowling_league.services.bowler_table import (
    EMPTY_OBJECT_ERROR,
    NO_RESPONSE_ERROR,
    NULL_BODY_ERROR,
    UNEXPECTED_SHAPE_ERROR,
    BowlerTableClient,
    build_table,
    format_bowler_row,
    normalize_bowlers,
)


@pytest.mark.parametrize(
    "body",
    [
        [{"a": 1}],
        {"value": [{"a": 1}]},
        {"result": [{"a": 1}]},
        {"x": {"a": 1}},
    ],
)
def test_normalize_extracts_records(body):
    normalized = normalize_bowlers(body)

    assert normalized.bowlers == [{"a": 1}]
    assert normalized.error is None


def test_normalize_value_wins_over_result():
    normalized = normalize_bowlers({"value": [1], "result": [2]})

    assert normalized.bowlers == [1]


def test_normalize_value_not_a_list_falls_through_to_values():
    normalized = normalize_bowlers({"value": "x", "count": 2})

    assert normalized.bowlers == ["x", 2]


def test_normalize_empty_value_list_is_used():
    assert normalize_bowlers({"value": []}).bowlers == []
    assert normalize_bowlers({"value": []}).error is None


@pytest.mark.parametrize(
    ("body", "error"),
    [
        ("unexpected", UNEXPECTED_SHAPE_ERROR),
        (42, UNEXPECTED_SHAPE_ERROR),
        (None, NULL_BODY_ERROR),
        ({}, EMPTY_OBJECT_ERROR),
    ],
)
def test_normalize_unrecoverable_shapes(body, error):
    normalized = normalize_bowlers(body)

    assert normalized.bowlers == []
    assert normalized.error == error


def test_format_full_record():
    row = format_bowler_row(
        {
            "bowlerId": 11,
            "bowlerFirstName": "Ben",
            "bowlerMiddleInit": "Q",
            "bowlerLastName": "Ortiz",
            "teamName": "Marlins",
            "bowlerAddress": "1 Main St",
            "bowlerCity": "Bothell",
            "bowlerState": "WA",
            "bowlerZip": "98011",
            "bowlerPhoneNumber": "(206) 555-0100",
        }
    )

    assert row.key == "11"
    assert row.name == "Ben Q. Ortiz"
    assert (row.team, row.city, row.zip) == ("Marlins", "Bothell", "98011")


def test_format_missing_fields_fall_back():
    row = format_bowler_row({"bowlerId": 5, "bowlerCity": ""}, index=3)

    assert row.name == "Unknown Unknown"
    assert row.team == "N/A"
    assert row.address == "N/A"
    assert row.city == "N/A"
    assert row.state == "N/A"
    assert row.zip == "N/A"
    assert row.phone == "N/A"


def test_format_non_mapping_record():
    row = format_bowler_row("garbage", index=2)

    assert row.key == "row-2"
    assert row.name == "Unknown Unknown"
    assert row.team == "N/A"


def test_build_table_keeps_error_and_empty_rows():
    table = build_table("unexpected")

    assert table.rows == []
    assert table.error == UNEXPECTED_SHAPE_ERROR


def _fetch(handler, method="fetch"):
    async def run():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://api.test"
        ) as client:
            return await getattr(BowlerTableClient(client), method)()

    return asyncio.run(run())


def test_client_fetch_wrapped_body():
    def handler(request):
        assert request.url.path == "/api/bowlers"
        return httpx.Response(200, json={"value": [{"bowlerId": 1, "bowlerFirstName": "Amy"}]})

    table = _fetch(handler)

    assert table.error is None
    assert [r.name for r in table.rows] == ["Amy Unknown"]


def test_client_fetch_server_error_message():
    def handler(request):
        return httpx.Response(500, json={"message": "Error retrieving bowlers"})

    table = _fetch(handler)

    assert table.rows == []
    assert table.error == "Server error: 500 - Error retrieving bowlers"


def test_client_fetch_no_response():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    table = _fetch(handler)

    assert table.error == NO_RESPONSE_ERROR


def test_client_fetch_non_json_body():
    def handler(request):
        return httpx.Response(200, text="<html></html>")

    assert _fetch(handler).error == UNEXPECTED_SHAPE_ERROR


def test_client_fetch_test_result():
    def handler(request):
        assert request.url.path == "/api/test"
        return httpx.Response(200, json={"teamsCount": 2})

    assert _fetch(handler, "fetch_test_result") == ({"teamsCount": 2}, None)
