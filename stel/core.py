"""
Core module for the STEL container format

The layout is the following

    .--------------------------------------------------.
    | magic A "Stella BINARY " (14 bytes)              |
    | header region A (14 bytes)                       |
    | magic B b8 a5 a9 6a (4 bytes)                    |
    | header region B (up to the first 0x33 byte)      |
    | human metadata (optional, see stel.human)        |
    | leftover                                         |
    '--------------------------------------------------'

Only the two magic sequences and the size of the first header region are
mandatory: everything after the second magic always produces something,
possibly empty.
"""
import logging
from typing import Dict, NamedTuple, Optional, Tuple

from .human import HumanMetadata, hex_upper, parse_human_metadata
from .primitives import Failed, Result, match_literal, optional, take_fixed, take_until
from .streams import Cursor
from .exceptions import (
    BadMagicException,
    UnexpectedBytesException,
)


logger = logging.getLogger(__name__)

MAGIC_A = b'Stella BINARY '
MAGIC_B = b'\xb8\xa5\xa9\x6a'
HEADER_REGION_A_SIZE = 14
METADATA_DELIMITER = 0x33  # first byte of the name tag


class ContainerData(NamedTuple):
    header_region_a: bytes
    header_region_b: bytes
    human_metadata: Optional[HumanMetadata]
    leftover: bytes

    def __str__(self):
        lines = [
            'First metadata section: %s' % hex_upper(self.header_region_a),
            'Second metadata section: %s' % hex_upper(self.header_region_b),
        ]

        if self.human_metadata is not None:
            lines.append(str(self.human_metadata))
        else:
            lines.append('Failed to parse human metadata.')

        lines.append('Leftover:')
        lines.append(hex_upper(self.leftover))

        return '\n'.join(lines)

    @property
    def raw(self) -> bytes:
        '''The bytes this container was parsed from.'''
        human_raw = self.human_metadata.raw if self.human_metadata is not None else b''

        return b''.join([
            MAGIC_A,
            self.header_region_a,
            MAGIC_B,
            self.header_region_b,
            human_raw,
            self.leftover,
        ])

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        sizes = [
            ('magic_a', len(MAGIC_A)),
            ('header_region_a', len(self.header_region_a)),
            ('magic_b', len(MAGIC_B)),
            ('header_region_b', len(self.header_region_b)),
            ('human_metadata', self.human_metadata.size if self.human_metadata is not None else 0),
            ('leftover', len(self.leftover)),
        ]

        result = {}
        offset = 0
        for name, size in sizes:
            result[name] = (offset, size)
            offset += size

        return result


def _match_magic(cursor: Cursor, magic: bytes) -> Result:
    result = match_literal(cursor, magic)
    if result.ok or not isinstance(result.error, UnexpectedBytesException):
        return result

    error = result.error
    return Failed(cursor, BadMagicException(error.position, error.expected, error.found))


def _require(result: Result, section: str) -> Tuple[Cursor, bytes]:
    '''Unwrap the result of a mandatory section, raising with the section name in the chain.'''
    if result.ok:
        return result.unwrap()

    error = result.error
    error.chain.append(section)
    logger.debug('unpacking \'%s\' failed: %s', section, error)

    raise error


def parse(data) -> ContainerData:
    '''Decode a whole STEL container from memory.

    Raises BadMagicException if the data is not a STEL container and
    UnexpectedEofException if it is truncated before the second magic.'''
    cursor = Cursor.wrap(data)

    logger.debug('unpacking container of %d bytes', cursor.available)

    cursor, _ = _require(_match_magic(cursor, MAGIC_A), 'magic_a')
    cursor, header_region_a = _require(take_fixed(cursor, HEADER_REGION_A_SIZE), 'header_region_a')
    cursor, _ = _require(_match_magic(cursor, MAGIC_B), 'magic_b')

    logger.debug('unpacking \'header_region_b\' at offset 0x%x', cursor.offset)
    cursor, header_region_b = take_until(cursor, lambda byte: byte == METADATA_DELIMITER)

    logger.debug('unpacking \'human_metadata\' at offset 0x%x', cursor.offset)
    cursor, human_metadata = optional(parse_human_metadata, cursor).unwrap()
    if human_metadata is None:
        logger.debug('no human metadata found at offset 0x%x', cursor.offset)

    return ContainerData(
        header_region_a=header_region_a,
        header_region_b=header_region_b,
        human_metadata=human_metadata,
        leftover=cursor.remaining(),
    )


def parse_file(path) -> ContainerData:
    logger.debug('opening path \'%s\'', path)
    with open(path, 'rb') as f:
        data = f.read()

    return parse(data)
