import pytest

from stel.exceptions import UnexpectedBytesException, UnexpectedEofException
from stel.primitives import Parsed, match_literal, optional, take_fixed, take_until
from stel.streams import Cursor


def test_cursor_is_not_modified():
    cursor = Cursor.wrap(b'\x01\x02\x03')

    advanced = cursor.advance(2)

    assert cursor.offset == 0
    assert advanced.offset == 2
    assert advanced.available == 1
    assert advanced.remaining() == b'\x03'
    assert not advanced.at_end
    assert advanced.advance(1).at_end

    with pytest.raises(ValueError):
        advanced.advance(2)


def test_cursor_wrong_data():
    with pytest.raises(TypeError):
        Cursor.wrap('kebab')


def test_match_literal():
    cursor, matched = match_literal(Cursor.wrap(b'PK\x03\x04rest'), b'PK\x03\x04').unwrap()

    assert matched == b'PK\x03\x04'
    assert cursor.offset == 4
    assert cursor.remaining() == b'rest'


def test_match_literal_mismatch():
    cursor = Cursor.wrap(b'PK\x05\x06').advance(1)
    result = match_literal(cursor, b'K\x03')

    assert not result.ok
    assert result.cursor == cursor
    assert isinstance(result.error, UnexpectedBytesException)
    assert result.error.position == 1
    assert result.error.expected == b'K\x03'
    assert result.error.found == b'K\x05'

    with pytest.raises(UnexpectedBytesException):
        result.unwrap()


def test_match_literal_truncated():
    result = match_literal(Cursor.wrap(b'PK'), b'PK\x03\x04')

    assert not result.ok
    assert isinstance(result.error, UnexpectedEofException)
    assert result.error.position == 2
    assert result.error.expected_length == 2


def test_take_fixed():
    cursor, taken = take_fixed(Cursor.wrap(b'\x00' * 4 + b'\xff'), 4).unwrap()

    assert taken == b'\x00' * 4
    assert cursor.remaining() == b'\xff'

    cursor, taken = take_fixed(cursor, 0).unwrap()
    assert taken == b''
    assert cursor.offset == 4


def test_take_fixed_short():
    result = take_fixed(Cursor.wrap(b'\x01\x02\x03'), 4)

    assert not result.ok
    assert isinstance(result.error, UnexpectedEofException)
    assert result.cursor.offset == 0


def test_take_until():
    cursor, taken = take_until(Cursor.wrap(b'abc3def'), lambda byte: byte == ord('3')).unwrap()

    assert taken == b'abc'
    assert cursor.remaining() == b'3def'


def test_take_until_never_fails():
    data = Cursor.wrap(b'abc')

    cursor, taken = take_until(data, lambda byte: True).unwrap()
    assert taken == b''
    assert cursor.offset == 0

    cursor, taken = take_until(data, lambda byte: False).unwrap()
    assert taken == b'abc'
    assert cursor.at_end

    cursor, taken = take_until(cursor, lambda byte: False).unwrap()
    assert taken == b''


def test_optional_rewinds():
    cursor = Cursor.wrap(b'\x01\x02')

    result = optional(match_literal, cursor, b'\x02')
    assert result == Parsed(cursor, None)

    result = optional(match_literal, cursor, b'\x01')
    assert result.value == b'\x01'
    assert result.cursor.offset == 1
