"""Tests for query parameter flattening."""

from __future__ import annotations

from starlette.datastructures import QueryParams

from car_dealer.entrypoints.http.query_params import query_params_to_mapping


def test_single_values_are_strings() -> None:
    assert query_params_to_mapping(QueryParams("make=4&q=golf")) == {"make": "4", "q": "golf"}


def test_repeated_keys_become_lists() -> None:
    assert query_params_to_mapping(QueryParams("make=4&make=5&q=golf")) == {
        "make": ["4", "5"],
        "q": "golf",
    }


def test_blank_value_is_kept() -> None:
    assert query_params_to_mapping(QueryParams("make=")) == {"make": ""}


def test_empty_query() -> None:
    assert query_params_to_mapping(QueryParams("")) == {}
