# config.py
# Tunables for loading and tracing, with MOORETRACE_* environment overrides.

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from .errors import ConfigError

_ENV_PREFIX = "MOORETRACE_"


@dataclass(frozen=True)
class TraceSettings:
    # text images: characters that count as foreground
    FOREGROUND_CHARS: str = "1"

    # raster images: grey level cut (None = Otsu); pixels at or below it are foreground
    THRESHOLD: Optional[int] = None
    INVERT: bool = False

    # neighbour-probe budget for one walk (None = unbounded)
    MAX_STEPS: Optional[int] = None

    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> TraceSettings:
        """Defaults overridden by MOORETRACE_<FIELD> variables."""
        env = os.environ if environ is None else environ
        s = cls()
        updates = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name)
            if raw is None:
                continue
            updates[f.name] = _coerce(f.name, raw)
        return replace(s, **updates) if updates else s


def _coerce(name: str, raw: str):
    if name in ("THRESHOLD", "MAX_STEPS"):
        if raw.strip().lower() in ("", "none"):
            return None
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if name == "INVERT":
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if name == "LOG_LEVEL":
        level = raw.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"{_ENV_PREFIX}LOG_LEVEL: unknown level {raw!r}")
        return level
    return raw


S = TraceSettings()
