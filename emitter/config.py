"""Configuration models for emitters."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class EmitterConfig:
    """Behaviour switches for an :class:`~emitter.core.Emitter`.

    The defaults keep the plain contract: listeners are not validated and
    there is no limit on how many may be registered.
    """

    strict: bool = False
    warn_threshold: int | None = None

    @classmethod
    def from_env(cls) -> "EmitterConfig":
        """Create config from environment variables prefixed with EMITTER_."""
        prefix = "EMITTER_"
        strict = os.getenv(f"{prefix}STRICT", "false").lower() in {"1", "true", "yes"}
        return cls(
            strict=strict,
            warn_threshold=_parse_threshold(os.getenv(f"{prefix}WARN_THRESHOLD")),
        )


def _parse_threshold(raw: str | None) -> int | None:
    if not raw or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError("EMITTER_WARN_THRESHOLD must be an integer") from exc
    if value < 0:
        raise ValueError("EMITTER_WARN_THRESHOLD cannot be negative")
    return value or None
