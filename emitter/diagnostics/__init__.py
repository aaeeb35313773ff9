"""Introspection helpers for emitters."""

from .checklist import ChecklistIssue, run_checklist
from .summary import describe, render_table

__all__ = [
    "ChecklistIssue",
    "describe",
    "render_table",
    "run_checklist",
]
