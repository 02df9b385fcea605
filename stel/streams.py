from typing import NamedTuple


class Cursor(NamedTuple):
    '''Read position over an in-memory buffer.

    A cursor is never modified: advancing returns a new instance, so keeping a
    reference to an old cursor is all that is needed to rewind to it.'''
    data: bytes
    offset: int = 0

    @classmethod
    def wrap(cls, data) -> 'Cursor':
        if isinstance(data, Cursor):
            return data

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError('\'%s\' is the wrong kind of data to parse' % data.__class__.__name__)

        return cls(bytes(data))

    def __repr__(self):
        return '<%s(offset=0x%x, available=%d)>' % (self.__class__.__name__, self.offset, self.available)

    @property
    def available(self) -> int:
        return len(self.data) - self.offset

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.data)

    def peek(self, n: int) -> bytes:
        '''Return at most n bytes from the current position without consuming them.'''
        return self.data[self.offset:self.offset + n]

    def remaining(self) -> bytes:
        return self.data[self.offset:]

    def advance(self, n: int) -> 'Cursor':
        if n < 0 or n > self.available:
            raise ValueError(f'cannot advance {n} byte(s) with {self.available} available')

        return self._replace(offset=self.offset + n)
