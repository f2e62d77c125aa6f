#!/usr/bin/env python3
"""Exceptions raised by the fixed-point mapper."""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Width or divisor cannot be represented by the mapper."""


class PrecisionWarning(UserWarning):
    """Input magnitude exceeds the group size; the encoding wraps around."""
