"""Testing utilities for emitter users."""

from .factory import EventNameFactory
from .fixtures import emitter_fixture
from .recorder import CallRecorder

__all__ = [
    "CallRecorder",
    "EventNameFactory",
    "emitter_fixture",
]
