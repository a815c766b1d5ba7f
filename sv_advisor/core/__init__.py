"""
Core domain layer: value coercion, filter/sort state, option derivation,
the filter and sort engines and the view projection.
"""

from .filter_state import FilterState, SortState
from .options import FilterOptions, derive_filter_options, reconcile_filter_state
from .projection import ProjectedView, project_view
from .state import AppState, LoginForm

__all__ = [
    "FilterState",
    "SortState",
    "FilterOptions",
    "derive_filter_options",
    "reconcile_filter_state",
    "ProjectedView",
    "project_view",
    "AppState",
    "LoginForm",
]
