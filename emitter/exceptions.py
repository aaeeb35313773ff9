"""Exceptions raised by the emitter package."""

from __future__ import annotations

from typing import Any


class EmitterError(RuntimeError):
    """Base class for emitter exceptions."""


class ListenerNotCallable(EmitterError, TypeError):
    """Raised in strict mode when a non-callable is registered as a listener."""

    def __init__(self, event: str, listener: Any) -> None:
        super().__init__(f"Listener {listener!r} for event '{event}' is not callable")
        self.event = event
        self.listener = listener
