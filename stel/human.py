"""
# Human metadata

Block of NUL-terminated strings, each introduced by its own tag, that follows
the second header region:

    33 00 <name> 00 [37 00 <description> 00] [3a 00 <field3a> 00] [8e 00 <website link> 00]

Only the name is mandatory. The optional fields are tried in that fixed order,
each one at the position where the previous one ended: a field whose tag is not
there is left empty and the next one is tried at the same position, so a field
that appears out of order is never recovered.
"""
import logging
from typing import NamedTuple, Optional

from .enum import HumanField
from .fields import TaggedStringField
from .primitives import Parsed, Result, optional
from .streams import Cursor


logger = logging.getLogger(__name__)

NAME_FIELD = TaggedStringField(HumanField.NAME)
OPTIONAL_FIELDS = [TaggedStringField(_) for _ in HumanField if _ is not HumanField.NAME]


class HumanMetadata(NamedTuple):
    name: Optional[str] = None
    description: Optional[str] = None
    field3a: Optional[str] = None
    website_link: Optional[str] = None
    raw: bytes = b''  # the bytes consumed to build this record

    def __str__(self):
        # the strings are printed below, only the tag goes on the section line
        lines = ['Human metadata section: %s' % hex_upper(HumanField.NAME.tag)]
        for label, value in (
            ('Name', self.name),
            ('Description', self.description),
            ('Field 3A', self.field3a),
            ('Website link', self.website_link),
        ):
            if value is not None:
                lines.append(f'{label}: {value}')

        return '\n'.join(lines)

    @property
    def size(self) -> int:
        return len(self.raw)


def hex_upper(data: bytes) -> str:
    return data.hex().upper()


def parse_human_metadata(cursor: Cursor) -> Result:
    start = cursor

    result = NAME_FIELD.unpack(cursor)
    if not result.ok:
        return result

    cursor, name = result.unwrap()
    values = {NAME_FIELD.name: name}

    for field in OPTIONAL_FIELDS:
        cursor, value = optional(field.unpack, cursor).unwrap()
        if value is None:
            logger.debug('field \'%s\' is absent', field.name)
            continue

        values[field.name] = value

    raw = start.data[start.offset:cursor.offset]

    return Parsed(cursor, HumanMetadata(raw=raw, **values))
