"""
Top-level package for the StandVirtual Advisor.

This package exposes the filter/sort/session engine and its Dash front end.
Most code should import from submodules such as:
    sv_advisor.core
    sv_advisor.services
    sv_advisor.ui
"""

__all__: list[str] = []
