"""Automated checks to highlight suspicious listener setups."""

from __future__ import annotations

from dataclasses import dataclass

from ..core import Emitter, OnceListener


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(emitter: Emitter) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    events = emitter.event_names()
    if not events:
        issues.append(ChecklistIssue("info", "No listeners registered."))

    threshold = emitter.config.warn_threshold
    for event in events:
        listeners = emitter.listeners(event)
        if threshold is not None and len(listeners) > threshold:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Event '{event}' has {len(listeners)} listeners, above threshold {threshold}.",
                )
            )

        seen: list = []
        reported: list = []
        for listener in listeners:
            original = listener.listener if isinstance(listener, OnceListener) else listener
            if original in seen and original not in reported:
                reported.append(original)
                issues.append(
                    ChecklistIssue(
                        "warning",
                        f"Listener {original!r} is registered more than once for event '{event}'.",
                    )
                )
            seen.append(original)

    return issues
