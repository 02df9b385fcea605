"""
A tagged string is the building block of the human metadata: a fixed tag followed
by a NUL-terminated text, e.g.

    37 00 48 65 6c 6c 6f 00
    `---' `------------' `'
     tag     "Hello"     NUL
"""
import logging

from .enum import HumanField
from .primitives import Failed, Parsed, Result, match_literal, take_until
from .streams import Cursor
from .exceptions import (
    TagMismatchException,
    UnexpectedBytesException,
    UnexpectedEofException,
)


NUL = 0x00
TEXT_ENCODING = 'utf-8'


def decode_text(raw: bytes) -> str:
    '''Invalid sequences become U+FFFD: a badly encoded string must not make the parsing fail.'''
    return raw.decode(TEXT_ENCODING, errors='replace')


def read_tagged_string(cursor: Cursor, tag: bytes) -> Result:
    result = match_literal(cursor, tag)
    if not result.ok:
        error = result.error
        found = error.found if isinstance(error, UnexpectedBytesException) else cursor.peek(len(tag))
        return Failed(cursor, TagMismatchException(cursor.offset, tag, found))

    text_cursor, text = take_until(result.cursor, lambda byte: byte == NUL)
    if text_cursor.at_end:
        return Failed(cursor, UnexpectedEofException(text_cursor.offset, 1))

    return Parsed(text_cursor.advance(1), decode_text(text))


class TaggedStringField(object):
    '''Binds a field of the human metadata to the tag that introduces it.'''

    def __init__(self, field: HumanField):
        self.field = field
        self.logger = logging.getLogger(f'{self.__module__}.{self.__class__.__name__}')

    def __repr__(self):
        return '<%s(%s, tag=0x%s)>' % (self.__class__.__name__, self.name, self.tag.hex())

    @property
    def name(self) -> str:
        return self.field.attribute

    @property
    def tag(self) -> bytes:
        return self.field.tag

    def unpack(self, cursor: Cursor) -> Result:
        self.logger.debug('unpacking \'%s\' at offset 0x%x', self.name, cursor.offset)

        result = read_tagged_string(cursor, self.tag)
        if not result.ok:
            self.logger.debug('field \'%s\' not found: %s', self.name, result.error)

        return result
