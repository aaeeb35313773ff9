"""Give arbitrary objects the emitter operations."""

from __future__ import annotations

from typing import Any, List, TypeVar

from .core import Emitter, Listener

T = TypeVar("T")


class Emittable:
    """Base class for objects that emit events through a backing :class:`Emitter`.

    Each instance gets its own registry unless one is passed in, in which case
    every host sharing it sees the same listeners. Chainable operations return
    the host rather than the registry.
    """

    def __init__(self, *, emitter: Emitter | None = None) -> None:
        self._emitter = emitter if emitter is not None else Emitter()

    @property
    def emitter(self) -> Emitter:
        return self._emitter

    def on(self, event: str, listener: Listener) -> "Emittable":
        self._emitter.on(event, listener)
        return self

    def once(self, event: str, listener: Listener) -> "Emittable":
        self._emitter.once(event, listener)
        return self

    def off(self, event: str | None = None, listener: Listener | None = None) -> "Emittable":
        self._emitter.off(event, listener)
        return self

    def emit(self, event: str, *args: Any, **kwargs: Any) -> "Emittable":
        self._emitter.emit(event, *args, **kwargs)
        return self

    def listeners(self, event: str) -> List[Listener]:
        return self._emitter.listeners(event)

    def has_listeners(self, event: str) -> bool:
        return self._emitter.has_listeners(event)


def mixin(obj: T, emitter: Emitter | None = None) -> T:
    """Attach emitter operations to ``obj`` and return it.

    The operations are stored on the instance, so other instances of the same
    class are unaffected.
    """
    if not hasattr(obj, "__dict__"):
        raise TypeError(f"Cannot mix emitter operations into {type(obj).__name__} instance")
    backing = emitter if emitter is not None else Emitter()

    def on(event: str, listener: Listener) -> T:
        backing.on(event, listener)
        return obj

    def once(event: str, listener: Listener) -> T:
        backing.once(event, listener)
        return obj

    def off(event: str | None = None, listener: Listener | None = None) -> T:
        backing.off(event, listener)
        return obj

    def emit(event: str, *args: Any, **kwargs: Any) -> T:
        backing.emit(event, *args, **kwargs)
        return obj

    vars(obj).update(
        emitter=backing,
        on=on,
        once=once,
        off=off,
        emit=emit,
        listeners=backing.listeners,
        has_listeners=backing.has_listeners,
    )
    return obj


__all__ = ["Emittable", "mixin"]
