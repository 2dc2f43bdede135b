import logging

import pytest

from steprange import (
    LONG,
    BoundType,
    CharacterRange,
    Endpoint,
    IntegerRange,
    InvalidRangeError,
    LongRange,
    Range,
)

CLOSED = BoundType.CLOSED
OPEN = BoundType.OPEN


def test_forward_enumeration() -> None:
    assert list(CharacterRange("a", "e")) == ["a", "b", "c", "d", "e"]


def test_left_open_enumeration() -> None:
    chars = CharacterRange(Endpoint.open("a"), Endpoint.closed("e"))

    assert list(chars) == ["b", "c", "d", "e"]


def test_reverse_enumeration_uses_negative_default_step() -> None:
    chars = CharacterRange("e", "a")

    assert chars.step == -1
    assert list(chars) == ["e", "d", "c", "b", "a"]


def test_explicit_step() -> None:
    assert list(CharacterRange("a", "e", 2)) == ["a", "c", "e"]
    assert list(IntegerRange(0, 10, 3)) == [0, 3, 6, 9]


def test_open_bounds() -> None:
    both_open = CharacterRange.bounded("a", OPEN, "e", OPEN)
    assert list(both_open) == ["b", "c", "d"]

    falling = IntegerRange.bounded(10, CLOSED, 0, OPEN, -3)
    assert list(falling) == [10, 7, 4, 1]

    right_open_on_step = IntegerRange.bounded(0, CLOSED, 9, OPEN, 3)
    assert list(right_open_on_step) == [0, 3, 6]


def test_invalid_step_rejection() -> None:
    with pytest.raises(InvalidRangeError, match="Will never reach 10 from 1"):
        IntegerRange(1, 10, -1)

    with pytest.raises(ValueError):
        CharacterRange("e", "a", 1)

    with pytest.raises(InvalidRangeError):
        IntegerRange(1, 10, 0)


def test_degenerate_closed_range_is_singleton() -> None:
    single = IntegerRange(5, 5, -3)

    assert not single.is_empty()
    assert list(single) == [5]
    assert 5 in single
    assert 2 not in single


def test_degenerate_open_range_is_empty() -> None:
    for step in (1, -1, 7, 0):
        empty = IntegerRange.bounded(5, OPEN, 5, OPEN, step)
        assert empty.is_empty()
        assert list(empty) == []
        assert 5 not in empty


def test_degenerate_half_open_ranges_are_empty() -> None:
    assert IntegerRange.bounded(5, OPEN, 5, CLOSED).is_empty()
    assert IntegerRange.bounded(5, CLOSED, 5, OPEN).is_empty()
    assert list(IntegerRange.bounded(5, OPEN, 5, CLOSED, -1)) == []
    assert list(IntegerRange.bounded(5, CLOSED, 5, OPEN, -1)) == []


def test_zero_step_only_on_degenerate_ranges() -> None:
    assert list(IntegerRange(5, 5, 0)) == [5]
    assert 5 in IntegerRange(5, 5, 0)

    half_open = IntegerRange.bounded(5, OPEN, 5, CLOSED, 0)
    assert half_open.is_empty()
    assert list(half_open) == []
    assert 5 not in half_open


def test_non_degenerate_empty_ranges() -> None:
    assert IntegerRange.bounded(0, OPEN, 1, OPEN).is_empty()
    assert IntegerRange.bounded(0, OPEN, 1, CLOSED, 5).is_empty()
    assert not IntegerRange.bounded(0, CLOSED, 1, OPEN, 5).is_empty()
    assert IntegerRange.bounded(1, OPEN, 0, OPEN).is_empty()
    assert not bool(IntegerRange.bounded(1, OPEN, 0, OPEN))
    assert bool(IntegerRange(0, 1))


def test_contains_checks_bounds_and_step() -> None:
    falling = IntegerRange.bounded(10, CLOSED, 0, OPEN, -3)

    assert 10 in falling
    assert 1 in falling
    assert 4 in falling
    assert 0 not in falling
    assert -2 not in falling
    assert 5 not in falling
    assert 13 not in falling

    chars = CharacterRange("a", "e", 2)
    assert chars.contains("c")
    assert not chars.contains("d")
    assert not chars.contains("f")


def test_contains_rejects_absent_and_foreign_values() -> None:
    chars = CharacterRange("a", "e")

    assert not chars.contains(None)
    assert "ab" not in chars
    assert 98 not in chars
    assert "b" in chars

    numbers = IntegerRange(0, 10)
    assert "3" not in numbers
    assert 2.5 not in numbers
    assert 3.0 in numbers
    assert 10**20 not in numbers


def test_range_can_be_traversed_repeatedly() -> None:
    chars = CharacterRange("a", "c")

    assert list(chars) == ["a", "b", "c"]
    assert list(chars) == ["a", "b", "c"]


def test_cursors_are_independent() -> None:
    chars = CharacterRange("a", "c")
    first = iter(chars)
    second = chars.cursor()

    assert next(first) == "a"
    assert next(first) == "b"
    assert next(second) == "a"
    assert next(first) == "c"
    assert next(second) == "b"
    assert first.range is chars


def test_is_empty_does_not_disturb_iteration() -> None:
    numbers = IntegerRange(1, 3)
    cursor = numbers.cursor()

    assert next(cursor) == 1
    assert not numbers.is_empty()
    assert 2 in numbers
    assert list(cursor) == [2, 3]


def test_exhausted_cursor_raises_stop_iteration() -> None:
    cursor = IntegerRange(1, 2).cursor()

    assert cursor.has_next()
    assert next(cursor) == 1
    assert cursor.has_next()
    assert next(cursor) == 2
    assert not cursor.has_next()
    with pytest.raises(StopIteration):
        next(cursor)
    assert not cursor.has_next()


def test_endpoints_never_decode_past_valid_characters() -> None:
    lowest = CharacterRange("\x00", "\x00", -1)

    assert list(lowest) == ["\x00"]


def test_accessors() -> None:
    numbers = IntegerRange.bounded(1, OPEN, 9, CLOSED, 2)

    assert numbers.left_endpoint == Endpoint(1, OPEN)
    assert numbers.right_endpoint == Endpoint(9, CLOSED)
    assert numbers.step == 2


def test_none_arguments_are_rejected() -> None:
    with pytest.raises(TypeError, match="start must not be None"):
        IntegerRange(None, 3)
    with pytest.raises(TypeError, match="stop must not be None"):
        IntegerRange(1, None)
    with pytest.raises(TypeError, match="BoundType"):
        IntegerRange.bounded(1, None, 3, CLOSED)  # type: ignore[arg-type]


def test_base_range_needs_a_domain() -> None:
    with pytest.raises(TypeError, match="needs a scalar domain"):
        Range(0, 3)

    assert list(Range(0, 3, domain=LONG)) == [0, 1, 2, 3]


def test_equality_is_structural() -> None:
    assert IntegerRange(1, 5) == IntegerRange(1, 5, 1)
    assert hash(IntegerRange(1, 5)) == hash(IntegerRange(1, 5, 1))
    assert IntegerRange(1, 5) != IntegerRange(1, 5, 2)
    assert IntegerRange(1, 5) != IntegerRange.bounded(1, OPEN, 5, CLOSED)
    assert IntegerRange(1, 5) != LongRange(1, 5)
    assert IntegerRange(1, 5) != (1, 5)
    assert len({IntegerRange(1, 5), IntegerRange(1, 5), IntegerRange(1, 6)}) == 2


def test_equality_ignores_traversal_state() -> None:
    numbers = IntegerRange(1, 5)
    cursor = iter(numbers)
    next(cursor)

    assert numbers == IntegerRange(1, 5)


def test_repr_and_str() -> None:
    assert repr(IntegerRange(1, 5)) == "IntegerRange(1, 5, 1)"
    assert (
        repr(IntegerRange.bounded(1, OPEN, 5, CLOSED))
        == "IntegerRange.bounded(1, BoundType.OPEN, 5, BoundType.CLOSED, 1)"
    )
    assert str(CharacterRange("a", "e")) == "['a', 'e'] by 1"
    assert str(IntegerRange.bounded(9, CLOSED, 0, OPEN, -3)) == "[9, 0) by -3"


def test_construction_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="steprange.core")

    IntegerRange(1, 3)
    assert "created IntegerRange(1, 3, 1)" in caplog.text

    with pytest.raises(InvalidRangeError):
        IntegerRange(1, 3, -1)
    assert "rejected IntegerRange" in caplog.text


def test_endpoint_pair_with_explicit_step() -> None:
    evens = IntegerRange(Endpoint.open(0), Endpoint.closed(6), 2)

    assert list(evens) == [2, 4, 6]
    assert 0 not in evens
    assert 6 in evens
