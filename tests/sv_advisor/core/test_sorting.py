from __future__ import annotations

import pytest

from sv_advisor.core.fields import SORTABLE_FIELDS
from sv_advisor.core.filter_state import ASC, DESC, SortState
from sv_advisor.core.sorting import sort_records


def prices(records):
    return [r.get("price") for r in records]


def test_price_descending_puts_null_last():
    records = [{"price": 5000}, {"price": None}, {"price": 8000}]
    assert prices(sort_records(records, SortState("price", DESC))) == [8000, 5000, None]


def test_price_ascending_puts_null_last():
    records = [{"price": 5000}, {"price": None}, {"price": 8000}]
    assert prices(sort_records(records, SortState("price", ASC))) == [5000, 8000, None]


def test_numeric_fields_compare_as_numbers_not_text():
    records = [{"price": "900"}, {"price": 10000}, {"price": "85.5"}]
    assert prices(sort_records(records, SortState("price", ASC))) == ["85.5", "900", 10000]


def test_unparseable_numeric_values_are_null():
    records = [{"year": "unknown"}, {"year": 2019}, {}, {"year": 2015}]
    result = sort_records(records, SortState("year", DESC))
    assert [r.get("year") for r in result] == [2019, 2015, "unknown", None]


def test_text_fields_are_case_insensitive_and_blank_is_null():
    records = [{"brand": "vw"}, {"brand": "  "}, {"brand": "Audi"}, {"brand": "bmw"}]
    result = sort_records(records, SortState("brand", ASC))
    assert [r["brand"] for r in result] == ["Audi", "bmw", "vw", "  "]


@pytest.mark.parametrize("direction", [ASC, DESC])
def test_sort_is_stable_for_equal_keys(direction):
    records = [
        {"id": 1, "price": 100},
        {"id": 2, "price": 200},
        {"id": 3, "price": 100},
        {"id": 4, "price": 200},
        {"id": 5, "price": None},
        {"id": 6},
    ]
    result = sort_records(records, SortState("price", direction))
    ids = [r["id"] for r in result]

    assert ids.index(1) < ids.index(3)
    assert ids.index(2) < ids.index(4)
    assert ids[-2:] == [5, 6]


@pytest.mark.parametrize("key", SORTABLE_FIELDS)
@pytest.mark.parametrize("direction", [ASC, DESC])
def test_nulls_last_for_every_sortable_field(key, direction):
    records = [{key: None}, {key: "3"}, {}, {key: "1"}, {key: "2"}]
    result = sort_records(records, SortState(key, direction))
    assert all(r.get(key) is not None for r in result[:3])
    assert all(r.get(key) is None for r in result[3:])


def test_reversing_direction_reverses_only_non_null_prefix():
    records = [{"id": i, "price": p} for i, p in enumerate([300, None, 100, 200, None, 400])]

    asc = sort_records(records, SortState("price", ASC))
    desc = sort_records(records, SortState("price", DESC))

    assert [r["id"] for r in asc[:4]] == [r["id"] for r in reversed(desc[:4])]
    assert [r["id"] for r in asc[4:]] == [r["id"] for r in desc[4:]] == [1, 4]


def test_sort_does_not_mutate_input():
    records = [{"price": 2}, {"price": 1}]
    snapshot = list(records)
    sort_records(records, SortState("price", ASC))
    assert records == snapshot


def test_accented_brands_sort_with_their_base_letter():
    records = [{"brand": b} for b in ["Volvo", "Škoda", "Seat", "Citroën", "Cupra"]]

    ascending = [r["brand"] for r in sort_records(records, SortState("brand", ASC))]
    descending = [r["brand"] for r in sort_records(records, SortState("brand", DESC))]

    assert ascending == ["Citroën", "Cupra", "Seat", "Škoda", "Volvo"]
    assert descending == list(reversed(ascending))


def test_accented_initial_letter_sorts_among_base_letter():
    records = [{"title": t} for t in ["Peugeot 508", "Émile", "Ebro", "Fiat"]]

    ordered = [r["title"] for r in sort_records(records, SortState("title", ASC))]

    assert ordered == ["Ebro", "Émile", "Fiat", "Peugeot 508"]
