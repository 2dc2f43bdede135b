"""Concrete range types, one per scalar domain."""

from numbers import Real
from typing import Any, TypeVar

from steprange.core import Range
from steprange.domain import (
    BYTE,
    CHARACTER,
    DOUBLE,
    FLOAT,
    INTEGER,
    LONG,
    SHORT,
    Domain,
    NumericDomain,
)
from steprange.endpoint import BoundType, Endpoint
from steprange.util import DEFAULT_LEFT_BOUND_TYPE, DEFAULT_RIGHT_BOUND_TYPE

N = TypeVar("N", int, float)


class CharacterRange(Range[str, int]):
    """Range of single characters stepped by code point."""

    default_domain = CHARACTER


class NumericRange(Range[N, N]):
    """Base for ranges over numbers.

    Only numeric domains may be bound, either through ``default_domain`` or the
    ``domain=`` override.
    """

    def __init__(
        self,
        start: "Endpoint[Any] | Real",
        stop: "Endpoint[Any] | Real",
        step: "Real | None" = None,
        *,
        domain: Domain[N, N] | None = None,
    ):
        if domain is not None and not isinstance(domain, NumericDomain):
            raise TypeError(
                f"{type(self).__name__} requires a numeric domain, "
                f"got {type(domain).__name__}"
            )
        super().__init__(start, stop, step, domain=domain)  # type: ignore[arg-type]

    @classmethod
    def default_step(
        cls, from_: Real, to: Real, *, domain: Domain[N, N] | None = None
    ) -> N:
        """The step used when none is given for ``from_`` and ``to``.

        ``domain`` defaults to the class's ``default_domain``; pass the same
        override given to the constructor to get that range's default.
        """
        if domain is None:
            domain = cls.default_domain
        if domain is None:
            raise TypeError(f"{cls.__name__} has no default domain")
        return domain.default_step(domain.encode(from_), domain.encode(to))


class ByteRange(NumericRange[int]):
    default_domain = BYTE


class ShortRange(NumericRange[int]):
    default_domain = SHORT


class IntegerRange(NumericRange[int]):
    default_domain = INTEGER


class LongRange(NumericRange[int]):
    default_domain = LONG


class FloatRange(NumericRange[float]):
    """Single-precision floating-point range.

    Endpoints, step and every produced value are rounded to single precision.
    """

    default_domain = FLOAT


class DoubleRange(NumericRange[float]):
    default_domain = DOUBLE


def _bound(flag: "BoundType | bool") -> BoundType:
    if isinstance(flag, BoundType):
        return flag
    return BoundType.of(flag)


def srange(
    start: Any,
    stop: Any,
    step: Any = None,
    *,
    left: "BoundType | bool" = DEFAULT_LEFT_BOUND_TYPE,
    right: "BoundType | bool" = DEFAULT_RIGHT_BOUND_TYPE,
) -> Range[Any, Any]:
    """
    Return a range of the type that fits ``start`` and ``stop``.

    Args:
        start: First endpoint value
        stop: Second endpoint value
        step: Signed increment; defaults to one unit towards ``stop``
        left: Bound type of ``start`` (or True for closed, False for open)
        right: Bound type of ``stop`` (or True for closed, False for open)

    Returns:
        CharacterRange for one-character strings, LongRange for ints,
        DoubleRange when either endpoint or the step is a float

    Example:
        >>> from steprange import srange
        >>>
        >>> list(srange("a", "e"))
        ['a', 'b', 'c', 'd', 'e']
        >>> list(srange(0, 10, 3, right=False))
        [0, 3, 6, 9]
        >>> list(srange(1.0, 0.0, -0.25, left=False))
        [0.75, 0.5, 0.25, 0.0]
    """
    values = (start, stop) if step is None else (start, stop, step)
    range_type: type[Range[Any, Any]]
    if isinstance(start, str) or isinstance(stop, str):
        range_type = CharacterRange
    elif all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        range_type = LongRange
    elif all(isinstance(v, Real) and not isinstance(v, bool) for v in values):
        range_type = DoubleRange
    else:
        names = ", ".join(type(v).__name__ for v in values)
        raise TypeError(
            f"srange() cannot pick a range type for ({names}).\n"
            f"Hint: use str characters, ints or floats, "
            f"or construct a concrete range directly"
        )
    return range_type.bounded(start, _bound(left), stop, _bound(right), step)
