"""
Matchers working on a Cursor.

Each one returns either Parsed (the advanced cursor and the value obtained) or
Failed (the cursor it was called with and the error describing why): nothing
is raised, so trying alternatives is only a matter of keeping the old cursor
around. The error becomes an exception only when someone calls unwrap() on a
failure they cannot recover from.
"""
from typing import Any, Callable, NamedTuple, Tuple, Union

from .streams import Cursor
from .exceptions import (
    StelException,
    UnexpectedBytesException,
    UnexpectedEofException,
)


class Parsed(NamedTuple):
    cursor: Cursor
    value: Any

    ok = True

    def unwrap(self) -> Tuple[Cursor, Any]:
        return self.cursor, self.value


class Failed(NamedTuple):
    cursor: Cursor
    error: StelException

    ok = False

    def unwrap(self):
        raise self.error


Result = Union[Parsed, Failed]


def match_literal(cursor: Cursor, literal: bytes) -> Result:
    found = cursor.peek(len(literal))

    if found == literal:
        return Parsed(cursor.advance(len(literal)), found)

    # the data ended while still agreeing with the literal
    if literal.startswith(found):
        return Failed(cursor, UnexpectedEofException(cursor.offset + len(found), len(literal) - len(found)))

    return Failed(cursor, UnexpectedBytesException(cursor.offset, literal, found))


def take_fixed(cursor: Cursor, n: int) -> Result:
    if n < 0:
        raise ValueError("The number of bytes to take cannot be negative")

    if cursor.available < n:
        return Failed(cursor, UnexpectedEofException(cursor.offset, n))

    return Parsed(cursor.advance(n), cursor.peek(n))


def take_until(cursor: Cursor, predicate: Callable[[int], bool]) -> Parsed:
    '''Take bytes as long as predicate() is false on them: it never fails,
    at worst it takes nothing or everything.'''
    data = cursor.data
    end = cursor.offset

    while end < len(data) and not predicate(data[end]):
        end += 1

    return Parsed(cursor.advance(end - cursor.offset), data[cursor.offset:end])


def optional(parser: Callable[..., Result], cursor: Cursor, *args) -> Parsed:
    '''Attempt the parser and commit only on success; otherwise give back the
    original cursor with None as value.'''
    result = parser(cursor, *args)

    if not result.ok:
        return Parsed(cursor, None)

    return result
