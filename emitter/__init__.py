"""Synchronous in-process event emitter public API."""

from .config import EmitterConfig
from .core import Emitter, Listener, OnceListener
from .exceptions import EmitterError, ListenerNotCallable
from .mixin import Emittable, mixin

__all__ = [
    "Emittable",
    "Emitter",
    "EmitterConfig",
    "EmitterError",
    "Listener",
    "ListenerNotCallable",
    "OnceListener",
    "mixin",
]
