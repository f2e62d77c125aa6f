#!/usr/bin/env python3
"""Mapper configuration from environment variables."""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from mapper.errors import ConfigurationError
from mapper.number_mapper import FixedPointMapper, OverflowPolicy
from mapper.throttle import DEFAULT_INTERVAL_MS, EveryMs

DEFAULT_WIDTH = 64
DEFAULT_DIVISOR = 2**20


def _int_var(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        # accepts 0x.. and 1_048_576 literals too
        return int(raw.strip(), 0)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class MapperSettings:
    width: int = DEFAULT_WIDTH
    divisor: int = DEFAULT_DIVISOR
    warn_interval_ms: int = DEFAULT_INTERVAL_MS
    overflow: OverflowPolicy = OverflowPolicy.WARN

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MapperSettings":
        env = os.environ if environ is None else environ
        overflow_raw = env.get("MAPPER_OVERFLOW", OverflowPolicy.WARN.value).strip().lower()
        try:
            overflow = OverflowPolicy(overflow_raw)
        except ValueError:
            raise ConfigurationError(f"MAPPER_OVERFLOW must be 'warn' or 'raise', got {overflow_raw!r}") from None
        interval = _int_var(env, "MAPPER_WARN_INTERVAL_MS", DEFAULT_INTERVAL_MS)
        if interval < 0:
            raise ConfigurationError(f"MAPPER_WARN_INTERVAL_MS must be >= 0, got {interval}")
        return cls(
            width=_int_var(env, "MAPPER_WIDTH", DEFAULT_WIDTH),
            divisor=_int_var(env, "MAPPER_DIVISOR", DEFAULT_DIVISOR),
            warn_interval_ms=interval,
            overflow=overflow,
        )

    def build(self) -> FixedPointMapper:
        # the default window keeps using the shared throttle
        throttle = None
        if self.warn_interval_ms != DEFAULT_INTERVAL_MS:
            throttle = EveryMs(self.warn_interval_ms)
        return FixedPointMapper(self.width, self.divisor, overflow=self.overflow, throttle=throttle)


def mapper_from_env(environ: Optional[Mapping[str, str]] = None) -> FixedPointMapper:
    return MapperSettings.from_env(environ).build()
