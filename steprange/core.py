import logging
from collections.abc import Iterator
from typing import Any, ClassVar, Generic, TypeVar

from typing_extensions import override

from steprange.domain import Domain
from steprange.endpoint import BoundType, Endpoint
from steprange.util import DEFAULT_LEFT_BOUND_TYPE, DEFAULT_RIGHT_BOUND_TYPE

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")


class InvalidRangeError(ValueError):
    """The step can never carry the left endpoint to the right one."""


class Range(Generic[T, S]):
    """An immutable, lazily stepped sequence between two endpoints.

    A range is a descriptor: it holds the endpoints and the step and answers
    ``is_empty()`` and ``in`` analytically. Iterating it creates a fresh
    ``Cursor``, so the same range can be traversed any number of times and
    by several consumers at once.

    Subclasses bind a scalar domain through ``default_domain``; the base class
    takes one with ``domain=``.

    Example:
        >>> list(CharacterRange("a", "e"))
        ['a', 'b', 'c', 'd', 'e']
        >>> list(CharacterRange(Endpoint.open("a"), "e"))
        ['b', 'c', 'd', 'e']
    """

    default_domain: ClassVar[Domain[Any, Any] | None] = None

    def __init__(
        self,
        start: "Endpoint[T] | T",
        stop: "Endpoint[T] | T",
        step: S | None = None,
        *,
        domain: Domain[T, S] | None = None,
    ):
        resolved = domain if domain is not None else self.default_domain
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} needs a scalar domain.\n"
                f"Hint: use a concrete range such as IntegerRange or CharacterRange,\n"
                f"      or pass one explicitly: Range(0, 10, domain=LONG)"
            )
        self._domain: Domain[T, S] = resolved

        left = self._as_endpoint(start, DEFAULT_LEFT_BOUND_TYPE, "start")
        right = self._as_endpoint(stop, DEFAULT_RIGHT_BOUND_TYPE, "stop")
        lo = resolved.encode(left.value)
        hi = resolved.encode(right.value)

        if step is None:
            step = resolved.default_step(lo, hi)
        else:
            step = resolved.coerce_step(step)

        if lo != hi and resolved.sign(step) != resolved.sign(resolved.span(lo, hi)):
            logger.debug(
                "rejected %s: step %r never reaches %r from %r",
                type(self).__name__,
                step,
                right.value,
                left.value,
            )
            raise InvalidRangeError(
                f"Will never reach {right.value!r} from {left.value!r} "
                f"using step {step!r}.\n"
                f"Hint: the step must point from start towards stop; "
                f"omit it to use the default step"
            )

        self._lo: Any = lo
        self._hi: Any = hi
        self._step: S = step
        self._left: Endpoint[T] = Endpoint(resolved.decode(lo), left.bound_type)
        self._right: Endpoint[T] = Endpoint(resolved.decode(hi), right.bound_type)
        logger.debug("created %r", self)

    @classmethod
    def bounded(
        cls,
        from_: T,
        left_bound: BoundType,
        to: T,
        right_bound: BoundType,
        step: S | None = None,
        *,
        domain: Domain[T, S] | None = None,
    ) -> "Range[T, S]":
        """Create a range from raw values and explicit bound types."""
        return cls(
            Endpoint(from_, left_bound), Endpoint(to, right_bound), step, domain=domain
        )

    @staticmethod
    def _as_endpoint(
        value: "Endpoint[T] | T", bound_type: BoundType, edge: str
    ) -> Endpoint[T]:
        if isinstance(value, Endpoint):
            return value
        if value is None:
            raise TypeError(f"Range {edge} must not be None")
        return Endpoint(value, bound_type)

    @property
    def left_endpoint(self) -> Endpoint[T]:
        return self._left

    @property
    def right_endpoint(self) -> Endpoint[T]:
        return self._right

    @property
    def step(self) -> S:
        return self._step

    @property
    def domain(self) -> Domain[T, S]:
        return self._domain

    @property
    def _direction(self) -> int:
        return self._domain.sign(self._step)

    @property
    def _start_index(self) -> int:
        return 0 if self._left.is_closed else 1

    def _nth(self, index: int) -> Any:
        """Scalar ``index`` steps from the left endpoint value."""
        return self._domain.nth(self._lo, self._step, index)

    def _first(self) -> Any:
        """Scalar of the first candidate value, honoring the left bound."""
        return self._nth(self._start_index)

    def _before_right(self, scalar: Any) -> bool:
        """True if ``scalar`` has not passed the right bound in the direction of travel."""
        closed = self._right.is_closed
        if self._direction < 0:
            return scalar >= self._hi if closed else scalar > self._hi
        return scalar <= self._hi if closed else scalar < self._hi

    def is_empty(self) -> bool:
        """Return True if the range produces no values.

        Computed from the endpoints and step alone; it never touches a cursor.
        """
        if self._left.is_open and self._right.is_open and self._lo == self._hi:
            return True
        if self._direction == 0:
            # Only reachable when both endpoint values are equal.
            return not (self._left.is_closed and self._right.is_closed)
        return not self._before_right(self._first())

    def contains(self, value: Any) -> bool:
        """Return True if iterating the range would produce ``value``."""
        if value is None:
            return False
        try:
            scalar = self._domain.encode(value)
        except (TypeError, ValueError):
            return False
        if self.is_empty():
            return False

        if self._direction == 0:
            return scalar == self._lo

        index = self._domain.nearest_index(scalar - self._lo, self._step)
        if index is None or index < self._start_index:
            return False
        # Judge the value iteration would produce at that index, not the argument.
        candidate = self._nth(index)
        if not self._before_right(candidate):
            return False
        return self._domain.matches(candidate, scalar, self._step)

    def cursor(self) -> "Cursor[T]":
        """Start a new, independent traversal of this range."""
        return Cursor(self)

    def __iter__(self) -> "Cursor[T]":
        return self.cursor()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def _key(self) -> tuple[Any, ...]:
        return (type(self), self._left, self._right, self._step, self._domain)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._key() == other._key()

    @override
    def __hash__(self) -> int:
        return hash(self._key())

    @override
    def __repr__(self) -> str:
        name = type(self).__name__
        left, right = self._left, self._right
        if left.is_closed and right.is_closed:
            return f"{name}({left.value!r}, {right.value!r}, {self._step!r})"
        return (
            f"{name}.bounded({left.value!r}, {left.bound_type}, "
            f"{right.value!r}, {right.bound_type}, {self._step!r})"
        )

    @override
    def __str__(self) -> str:
        return f"{self._left.left_str()}, {self._right.right_str()} by {self._step!r}"


class Cursor(Iterator[T]):
    """Single-use traversal state over a ``Range``.

    Not safe to share between threads; create one cursor per consumer.
    """

    def __init__(self, source: Range[T, Any]):
        self._source: Range[T, Any] = source
        self._domain: Domain[T, Any] = source.domain
        self._index: int = source._start_index
        self._position: Any = source._first()
        self._exhausted: bool = source.is_empty()

    @property
    def range(self) -> Range[T, Any]:
        return self._source

    def has_next(self) -> bool:
        if self._exhausted:
            return False
        return self._source._before_right(self._position)

    @override
    def __next__(self) -> T:
        if not self.has_next():
            self._exhausted = True
            raise StopIteration
        value = self._domain.decode(self._position)
        if self._source._direction == 0:
            self._exhausted = True
        else:
            self._index += 1
            self._position = self._source._nth(self._index)
        return value

    @override
    def __iter__(self) -> "Cursor[T]":
        return self
