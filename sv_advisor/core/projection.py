from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from sv_advisor.core.fields import Record
from sv_advisor.core.filter_state import FilterState, SortState
from sv_advisor.core.filtering import filter_records
from sv_advisor.core.sorting import sort_records


@dataclass(frozen=True)
class ProjectedView:
    """Filtered, sorted records plus the counts shown in the status line."""
    records: List[Record] = field(default_factory=list)
    total: int = 0

    @property
    def shown(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


def project_view(dataset: Sequence[Record], filters: FilterState, sort: SortState) -> ProjectedView:
    """
    Pure composition of filtering and sorting. Holds no memory between calls,
    so the result depends only on the three inputs.
    """
    filtered = filter_records(dataset, filters)
    return ProjectedView(records=sort_records(filtered, sort), total=len(dataset))


def project(dataset: Iterable[Record], filters: FilterState, sort: SortState) -> List[Record]:
    return project_view(list(dataset), filters, sort).records
