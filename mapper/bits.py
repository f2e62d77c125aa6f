#!/usr/bin/env python3
"""Width-parameterized helpers for W-bit unsigned / two's-complement values."""
from __future__ import annotations

from mapper.errors import ConfigurationError


def check_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ConfigurationError(f"width must be a positive integer, got {width!r}")
    return width


def group_size(width: int) -> int:
    return 1 << width


def max_unsigned(width: int) -> int:
    return (1 << width) - 1


def wrap_unsigned(value: int, width: int) -> int:
    # python's % is already non-negative for a positive modulus
    return value % (1 << width)


def is_unsigned(value: int, width: int) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value < (1 << width)


def to_signed(value: int, width: int) -> int:
    """Reinterpret the low `width` bits of value as a two's-complement integer."""
    value &= (1 << width) - 1
    if value >> (width - 1):
        return value - (1 << width)
    return value
