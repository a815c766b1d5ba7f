from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from sv_advisor.core.fields import Record
from sv_advisor.core.filter_state import FilterState, SortState
from sv_advisor.core.options import FilterOptions
from sv_advisor.core.projection import ProjectedView


@dataclass
class LoginForm:
    """
    Ephemeral login-form state.

    - loading: a login validation request is in flight; further submits are ignored.
    - error: last user-visible login/session message ("" when none).
    """
    username: str = ""
    password: str = ""
    error: str = ""
    loading: bool = False

    def can_submit(self) -> bool:
        return bool(self.username) and bool(self.password) and not self.loading


@dataclass
class AppState:
    """
    Everything the viewer shows, owned by a single controller.

    records/filters/sort are the inputs; options and view are derived and
    recomputed after every change.
    """
    login: LoginForm = field(default_factory=LoginForm)
    records: List[Record] = field(default_factory=list)
    filters: FilterState = field(default_factory=FilterState)
    sort: SortState = field(default_factory=SortState)

    loading: bool = False
    error: str = ""

    options: FilterOptions = field(default_factory=FilterOptions)
    view: ProjectedView = field(default_factory=ProjectedView)

    @property
    def show_empty_state(self) -> bool:
        return not self.loading and not self.error and self.view.is_empty
