from .core import Cursor, InvalidRangeError, Range
from .domain import (
    BYTE,
    CHARACTER,
    DOUBLE,
    FLOAT,
    INTEGER,
    LONG,
    SHORT,
    CharacterDomain,
    Domain,
    FloatingDomain,
    IntegerDomain,
)
from .endpoint import BoundType, Endpoint
from .ranges import (
    ByteRange,
    CharacterRange,
    DoubleRange,
    FloatRange,
    IntegerRange,
    LongRange,
    NumericRange,
    ShortRange,
    srange,
)

__all__ = [
    "BoundType",
    "Endpoint",
    "Range",
    "Cursor",
    "InvalidRangeError",
    "NumericRange",
    "CharacterRange",
    "ByteRange",
    "ShortRange",
    "IntegerRange",
    "LongRange",
    "FloatRange",
    "DoubleRange",
    "srange",
    "Domain",
    "CharacterDomain",
    "IntegerDomain",
    "FloatingDomain",
    "CHARACTER",
    "BYTE",
    "SHORT",
    "INTEGER",
    "LONG",
    "FLOAT",
    "DOUBLE",
]
