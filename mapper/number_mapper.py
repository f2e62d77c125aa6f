#!/usr/bin/env python3
"""
Map real numbers to W-bit unsigned fixed-point values and back.

encode(x) = trunc(x * divisor) mod 2**W. Decoding divides by the divisor,
reading the stored value either as an unsigned magnitude or as a W-bit
two's-complement integer.

Precision loss of decode_unsigned(encode(x)), while |x * divisor| <= 2**W:
- |x| >= 1: relative error below |x| / divisor
- |x| < 1: absolute error below 1 / divisor

Past the group size the product wraps around. By default that is logged
(at most once per throttle window) and the wrapped value is returned.
Products beyond the double range saturate at +/-sys.float_info.max first.
"""
from __future__ import annotations
import enum
import logging
import math
import sys
from typing import Iterable, List, Optional

from mapper.bits import check_width, group_size, is_unsigned, max_unsigned, to_signed, wrap_unsigned
from mapper.errors import ConfigurationError, PrecisionWarning
from mapper.throttle import EveryMs

logger = logging.getLogger(__name__)

# shared by every mapper, like a per-call-site limiter
_OVERFLOW_THROTTLE = EveryMs()


def _to_double(real) -> float:
    try:
        return float(real)
    except OverflowError:
        # ints past the double range saturate to the largest finite double
        return sys.float_info.max if real > 0 else -sys.float_info.max


class OverflowPolicy(enum.Enum):
    WARN = "warn"
    RAISE = "raise"


class FixedPointMapper:
    def __init__(self, width: int, divisor: int, overflow: OverflowPolicy | str = OverflowPolicy.WARN,
                 throttle: Optional[EveryMs] = None):
        self._width = check_width(width)
        self._group_size = group_size(width)
        self._divisor = self._checked_divisor(divisor)
        self.overflow = OverflowPolicy(overflow)
        self._throttle = throttle if throttle is not None else _OVERFLOW_THROTTLE

    def __repr__(self) -> str:
        return f"FixedPointMapper(width={self._width}, divisor={self._divisor}, overflow={self.overflow.value!r})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def group_size(self) -> int:
        return self._group_size

    @property
    def divisor(self) -> int:
        return self._divisor

    @divisor.setter
    def divisor(self, value: int) -> None:
        self.set_divisor(value)

    def get_divisor(self) -> int:
        return self._divisor

    def set_divisor(self, divisor: int) -> None:
        # validate first so a rejected value leaves the old one in place
        self._divisor = self._checked_divisor(divisor)

    def with_divisor(self, divisor: int) -> "FixedPointMapper":
        """Return a new mapper with the same width and policy but another divisor."""
        return FixedPointMapper(self._width, divisor, overflow=self.overflow, throttle=self._throttle)

    def _checked_divisor(self, divisor: int) -> int:
        if isinstance(divisor, bool) or not isinstance(divisor, int) or divisor <= 0:
            raise ConfigurationError(f"divisor must be a positive integer, got {divisor!r}")
        if divisor > max_unsigned(self._width):
            raise ConfigurationError(
                f"The divisor's value {divisor} should not exceed the max value a "
                f"{self._width}-bit unsigned integer can represent ({max_unsigned(self._width)})."
            )
        return divisor

    # real -> fixed

    def encode(self, real: float) -> int:
        real = _to_double(real)
        if not math.isfinite(real):
            raise ValueError(f"cannot encode non-finite input {real!r}")
        product = real * self._divisor
        if not math.isfinite(product):
            # saturate at the largest double, then wrap like any other overflow
            product = math.copysign(sys.float_info.max, product)
        if abs(product) > self._group_size:
            self._warn_overflow(real)
        return wrap_unsigned(int(product), self._width)

    def encode_many(self, reals: Iterable[float]) -> List[int]:
        return [self.encode(x) for x in reals]

    def _warn_overflow(self, real: float) -> None:
        msg = (f"Magnitude of input number {real!r} too large. Conversion exceeds group size "
               f"{self._group_size}. May incur unwanted precision loss.")
        if self.overflow is OverflowPolicy.RAISE:
            raise PrecisionWarning(msg)
        dropped = self._throttle.take()
        if dropped is None:
            return
        if dropped:
            msg += f" ({dropped} similar warnings suppressed)"
        logger.warning(msg)

    # fixed -> real

    def decode_unsigned(self, fixed: int) -> float:
        self._check_fixed(fixed)
        return fixed / self._divisor

    def decode_unsigned_many(self, fixed: Iterable[int]) -> List[float]:
        return [self.decode_unsigned(v) for v in fixed]

    def decode_signed(self, fixed: int) -> float:
        """Read fixed as a two's-complement integer of the mapper's width, then scale."""
        self._check_fixed(fixed)
        return to_signed(fixed, self._width) / self._divisor

    def decode_signed_many(self, fixed: Iterable[int]) -> List[float]:
        return [self.decode_signed(v) for v in fixed]

    def _check_fixed(self, fixed: int) -> None:
        if not is_unsigned(fixed, self._width):
            raise ValueError(f"{fixed!r} is not a {self._width}-bit unsigned value")

    def precision_bound(self, real: float) -> Optional[float]:
        """Error bound for decoding encode(real) (signed decode for negatives); None once the product wraps."""
        real = _to_double(real)
        if not math.isfinite(real) or abs(real * self._divisor) > self._group_size:
            return None
        if abs(real) >= 1.0:
            return abs(real) / self._divisor
        return 1.0 / self._divisor
