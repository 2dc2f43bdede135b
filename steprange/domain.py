"""Scalar domains: the arithmetic a range needs about its value type.

A domain converts user values to an internal scalar (``encode``) and back
(``decode``), validates steps, computes the value a given number of steps from
an origin (``nth``) and finds the step index nearest to an offset. The range
engine only ever compares encoded scalars and asks for them by index, so one
engine serves characters, fixed-width integers and floating-point numbers
alike.
"""

import math
import numbers
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import override

from steprange.util import (
    BYTE_BITS,
    FLOAT_TOLERANCE,
    INTEGER_BITS,
    LONG_BITS,
    SHORT_BITS,
    SINGLE_FLOAT_TOLERANCE,
)

T = TypeVar("T")
S = TypeVar("S")


def sign(x: Any) -> int:
    return (x > 0) - (x < 0)


class Domain(ABC, Generic[T, S]):
    """Arithmetic and ordering capability for one scalar kind."""

    @property
    @abstractmethod
    def unit(self) -> S:
        """The smallest positive default step."""
        pass

    @abstractmethod
    def encode(self, value: Any) -> Any:
        """Validate ``value`` and return its internal scalar.

        Raises:
            TypeError: If ``value`` has the wrong type (including None)
            ValueError: If ``value`` has the right type but lies outside the domain
        """
        pass

    @abstractmethod
    def decode(self, scalar: Any) -> T:
        pass

    @abstractmethod
    def coerce_step(self, step: Any) -> S:
        pass

    @abstractmethod
    def nearest_index(self, offset: Any, step: S) -> int | None:
        """Return the number of ``step``s closest to ``offset``.

        None means no whole number of steps can land on ``offset``.
        """
        pass

    def nth(self, origin: Any, step: S, index: int) -> Any:
        """The scalar ``index`` steps away from ``origin``."""
        return origin + index * step

    def matches(self, candidate: Any, value: Any, step: S) -> bool:
        """Whether ``value`` stands for the produced scalar ``candidate``."""
        return candidate == value

    def span(self, left: Any, right: Any) -> Any:
        return right - left

    def sign(self, x: Any) -> int:
        return sign(x)

    def default_step(self, left: Any, right: Any) -> S:
        """Step used when none is given: towards ``right`` by one unit."""
        unit = self.unit
        return -unit if left > right else unit  # type: ignore[operator]


class DiscreteDomain(Domain[T, int]):
    """Domain whose scalars and steps are Python ints."""

    @property
    @override
    def unit(self) -> int:
        return 1

    @override
    def nearest_index(self, offset: int, step: int) -> int | None:
        if step == 0:
            return 0 if offset == 0 else None
        if offset % step:
            return None
        return offset // step

    def _coerce_int(self, value: Any, what: str) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"{what} must be an integer, got {type(value).__name__!r}: {value!r}"
            )
        if isinstance(value, numbers.Integral):
            return int(value)
        if not math.isfinite(value) or value != int(value):
            raise ValueError(f"{what} must be a whole number, got {value!r}")
        return int(value)


@dataclass(frozen=True)
class CharacterDomain(DiscreteDomain[str]):
    """Single characters, stepped by code point."""

    @override
    def encode(self, value: Any) -> int:
        if not isinstance(value, str):
            raise TypeError(
                f"Character range values must be str, "
                f"got {type(value).__name__!r}: {value!r}"
            )
        if len(value) != 1:
            raise ValueError(
                f"Character range values must be a single character, got {value!r}"
            )
        return ord(value)

    @override
    def decode(self, scalar: int) -> str:
        return chr(scalar)

    @override
    def coerce_step(self, step: Any) -> int:
        if isinstance(step, bool) or not isinstance(step, numbers.Integral):
            raise TypeError(
                f"Character range step must be an int, "
                f"got {type(step).__name__!r}: {step!r}"
            )
        return int(step)


class NumericDomain(Domain[T, S]):
    """Marker base for domains whose values are numbers."""


@dataclass(frozen=True)
class IntegerDomain(DiscreteDomain[int], NumericDomain[int, int]):
    """Signed integers of a fixed bit width."""

    bits: int

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def _check_width(self, value: int, what: str) -> int:
        if not (self.min_value <= value <= self.max_value):
            raise ValueError(
                f"{what} {value} does not fit in {self.bits} bits "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    @override
    def encode(self, value: Any) -> int:
        return self._check_width(self._coerce_int(value, "Range value"), "Range value")

    @override
    def decode(self, scalar: int) -> int:
        return scalar

    @override
    def coerce_step(self, step: Any) -> int:
        return self._check_width(self._coerce_int(step, "Range step"), "Range step")


def _round_single(x: float) -> float:
    """Round to the nearest IEEE-754 single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


@dataclass(frozen=True)
class FloatingDomain(NumericDomain[float, float]):
    """Binary floating-point numbers.

    ``single`` rounds every value and step to single precision.

    The k-th value is computed directly as ``origin + k * step``, rounded once,
    so rounding error never accumulates along a traversal. A value is a member
    when it lies within ``tolerance`` steps of the produced value at the
    nearest index ``k = round((value - origin) / step)``. Because it is
    measured in steps the policy does not depend on the magnitude of the
    values.
    """

    single: bool = False
    tolerance: float = FLOAT_TOLERANCE

    def __post_init__(self) -> None:
        if not (0 <= self.tolerance < 0.5):
            raise ValueError(
                f"tolerance must be in [0, 0.5), got {self.tolerance!r}"
            )

    @property
    @override
    def unit(self) -> float:
        return 1.0

    def _coerce_float(self, value: Any, what: str) -> float:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"{what} must be a real number, got {type(value).__name__!r}: {value!r}"
            )
        try:
            result = float(value)
        except OverflowError:
            raise ValueError(f"{what} {value!r} is too large for a float") from None
        if not math.isfinite(result):
            raise ValueError(f"{what} must be finite, got {result!r}")
        if self.single:
            result = _round_single(result)
            if not math.isfinite(result):
                raise ValueError(f"{what} {value!r} overflows single precision")
        return result

    @override
    def encode(self, value: Any) -> float:
        return self._coerce_float(value, "Range value")

    @override
    def decode(self, scalar: float) -> float:
        return scalar

    @override
    def coerce_step(self, step: Any) -> float:
        return self._coerce_float(step, "Range step")

    @override
    def nth(self, origin: float, step: float, index: int) -> float:
        result = origin + index * step
        return _round_single(result) if self.single else result

    @override
    def nearest_index(self, offset: float, step: float) -> int | None:
        if step == 0:
            return 0 if offset == 0 else None
        quotient = offset / step
        if not math.isfinite(quotient):
            return None
        return round(quotient)

    @override
    def matches(self, candidate: float, value: float, step: float) -> bool:
        return abs(candidate - value) <= self.tolerance * abs(step)

    @override
    def span(self, left: float, right: float) -> float:
        result = right - left
        if not math.isfinite(result):
            raise ValueError(
                f"Range span from {left!r} to {right!r} overflows a float"
            )
        return result


CHARACTER = CharacterDomain()
BYTE = IntegerDomain(BYTE_BITS)
SHORT = IntegerDomain(SHORT_BITS)
INTEGER = IntegerDomain(INTEGER_BITS)
LONG = IntegerDomain(LONG_BITS)
FLOAT = FloatingDomain(single=True, tolerance=SINGLE_FLOAT_TOLERANCE)
DOUBLE = FloatingDomain()
