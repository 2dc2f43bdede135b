from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class BoundType(Enum):
    """Whether an endpoint's own value belongs to the range."""

    CLOSED = "closed"
    OPEN = "open"

    @classmethod
    def of(cls, inclusive: bool) -> "BoundType":
        return cls.CLOSED if inclusive else cls.OPEN


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    value: T
    bound_type: BoundType

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("Endpoint value must not be None")
        if not isinstance(self.bound_type, BoundType):
            raise TypeError(
                f"Endpoint bound_type must be a BoundType, "
                f"got {type(self.bound_type).__name__!r}: {self.bound_type!r}\n"
                f"Hint: use BoundType.CLOSED or BoundType.OPEN"
            )

    @classmethod
    def closed(cls, value: T) -> "Endpoint[T]":
        return cls(value, BoundType.CLOSED)

    @classmethod
    def open(cls, value: T) -> "Endpoint[T]":
        return cls(value, BoundType.OPEN)

    @property
    def is_closed(self) -> bool:
        return self.bound_type is BoundType.CLOSED

    @property
    def is_open(self) -> bool:
        return self.bound_type is BoundType.OPEN

    def left_str(self) -> str:
        """Render as the left side of interval notation, e.g. ``[a`` or ``(a``."""
        return f"{'[' if self.is_closed else '('}{self.value!r}"

    def right_str(self) -> str:
        """Render as the right side of interval notation, e.g. ``e]`` or ``e)``."""
        return f"{self.value!r}{']' if self.is_closed else ')'}"

    def __str__(self) -> str:
        return f"{self.value!r} ({self.bound_type.value})"
