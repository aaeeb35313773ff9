"""Synchronous listener registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .config import EmitterConfig
from .exceptions import ListenerNotCallable

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


@dataclass(slots=True, eq=False)
class OnceListener:
    """Listener adapter that unregisters itself before its first call.

    ``listener`` keeps the original callable so ``Emitter.off(event, fn)``
    finds the wrapper when given ``fn``.
    """

    emitter: "Emitter"
    event: str
    listener: Listener

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.emitter.off(self.event, self)
        return self.listener(*args, **kwargs)

    def matches(self, listener: Listener) -> bool:
        return self is listener or self.listener == listener


class Emitter:
    """Map event names to ordered listeners and dispatch to them synchronously.

    Operations that mutate the registry return the emitter so calls can be
    chained::

        emitter.on("ready", start).once("ready", announce).emit("ready")

    ``emit`` iterates a copy of the listener list taken before the first
    call. Listeners may register, unregister or emit from inside a dispatch;
    changes become visible from the next ``emit``. An exception raised by a
    listener is not caught: it propagates out of ``emit`` and the remaining
    listeners of that round are skipped.
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self.config = config or EmitterConfig()
        self._callbacks: Dict[str, List[Listener]] = {}
        self._warned: set[str] = set()

    def on(self, event: str, listener: Listener) -> "Emitter":
        """Append ``listener`` to the listeners of ``event``."""
        if self.config.strict and not callable(listener):
            raise ListenerNotCallable(event, listener)
        listeners = self._callbacks.setdefault(event, [])
        listeners.append(listener)
        logger.debug("Registered listener %r for event '%s'", listener, event)
        self._check_threshold(event, len(listeners))
        return self

    def once(self, event: str, listener: Listener) -> "Emitter":
        """Register ``listener`` for a single call of ``event``."""
        if self.config.strict and not callable(listener):
            raise ListenerNotCallable(event, listener)
        return self.on(event, OnceListener(self, event, listener))

    def off(self, event: str | None = None, listener: Listener | None = None) -> "Emitter":
        """Remove listeners.

        With no arguments every event is cleared. With only ``event`` all of its
        listeners are removed. With both, the first entry matching ``listener``
        (directly or as the original of a once-wrapper) is removed.
        """
        if event is None:
            if listener is not None:
                raise TypeError("off() requires an event name to remove a specific listener")
            self._callbacks.clear()
            logger.debug("Removed all listeners")
            return self

        if listener is None:
            if self._callbacks.pop(event, None) is not None:
                logger.debug("Removed all listeners for event '%s'", event)
            return self

        listeners = self._callbacks.get(event)
        if not listeners:
            return self
        for index, entry in enumerate(listeners):
            if entry == listener or (isinstance(entry, OnceListener) and entry.matches(listener)):
                del listeners[index]
                logger.debug("Removed listener %r for event '%s'", listener, event)
                break
        if not listeners:
            del self._callbacks[event]
        return self

    def emit(self, event: str, *args: Any, **kwargs: Any) -> "Emitter":
        """Call every listener registered for ``event`` with the given arguments."""
        listeners = self._callbacks.get(event)
        if not listeners:
            logger.debug("Emitting '%s' with no listeners", event)
            return self
        snapshot = list(listeners)
        logger.debug("Emitting '%s' to %d listeners", event, len(snapshot))
        for listener in snapshot:
            try:
                listener(*args, **kwargs)
            except Exception:
                logger.debug("Listener %r for event '%s' raised; dispatch aborted", listener, event)
                raise
        return self

    def listeners(self, event: str) -> List[Listener]:
        """Return a copy of the stored listeners for ``event``.

        Once-registrations appear as their :class:`OnceListener` wrappers.
        """
        return list(self._callbacks.get(event, ()))

    def has_listeners(self, event: str) -> bool:
        return bool(self._callbacks.get(event))

    def event_names(self) -> List[str]:
        return list(self._callbacks)

    def _check_threshold(self, event: str, count: int) -> None:
        threshold = self.config.warn_threshold
        if threshold is None or count <= threshold or event in self._warned:
            return
        self._warned.add(event)
        logger.warning(
            "Event '%s' has %d listeners (threshold %d); possible listener leak",
            event,
            count,
            threshold,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(events={len(self._callbacks)})"

    register = on
    add_listener = on
    register_once = once
    unregister = off
    remove_listener = off
    remove_all_listeners = off
    trigger = emit


__all__ = ["Emitter", "Listener", "OnceListener"]
