from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, List, Tuple

from pyuca import Collator

from sv_advisor.core.coercion import is_null_for_sort, to_optional_number
from sv_advisor.core.fields import NUMERIC_SORT_KEYS, Record
from sv_advisor.core.filter_state import SortState


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the DUCET table once per process
    return Collator()


def _text_key(value: Any) -> Tuple[int, ...]:
    return _collator().sort_key(str(value).lower())


def sort_records(records: Iterable[Record], sort: SortState) -> List[Record]:
    """
    Return a new list ordered by ``sort.key`` in ``sort.direction``.

    - Numeric keys compare as numbers, everything else as case-insensitive
      text ordered by the Unicode Collation Algorithm, so accented letters
      sort with their base letter (Škoda after Seat, before Volvo).
    - Null-for-comparison values go last in both directions and keep their
      input order.
    - The sort is stable: equal keys keep their input order either way.
    """
    key = sort.key
    numeric = key in NUMERIC_SORT_KEYS

    present: List[Record] = []
    missing: List[Record] = []
    for rec in records:
        if is_null_for_sort(rec.get(key), numeric):
            missing.append(rec)
        else:
            present.append(rec)

    if numeric:
        ordered = sorted(present, key=lambda r: to_optional_number(r.get(key)), reverse=sort.descending)
    else:
        ordered = sorted(present, key=lambda r: _text_key(r.get(key)), reverse=sort.descending)

    return ordered + missing
