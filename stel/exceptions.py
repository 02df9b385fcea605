from typing import List, Optional


class StelException(Exception):
    '''Base class to extend in order to throw exception in stel.

    It takes as argument the chain of the sections that caused the exception,
    the innermost last.
    '''

    def __init__(self, message='', chain: Optional[List[str]] = None):
        self.chain = chain if chain is not None else []
        super().__init__(message)

    def __str__(self):
        message = super().__str__()
        if not self.chain:
            return message

        return '%s: %s' % ('.'.join(self.chain), message)


class UnpackException(StelException):
    '''The data doesn't follow the format.'''
    pass


class UnexpectedBytesException(UnpackException):

    def __init__(self, position: int, expected: bytes, found: bytes, chain=None):
        self.position = position
        self.expected = expected
        self.found = found

        super().__init__(
            f'at offset 0x{position:x} expected 0x{expected.hex()} but found 0x{found.hex()}',
            chain=chain,
        )


class BadMagicException(UnexpectedBytesException):
    '''One of the magic sequences is not where it should be: the data is not a STEL container.'''
    pass


class TagMismatchException(UnexpectedBytesException):
    '''A tagged field is not at the expected position.'''
    pass


class UnexpectedEofException(UnpackException):

    def __init__(self, position: int, expected_length: int, chain=None):
        self.position = position
        self.expected_length = expected_length

        super().__init__(
            f'at offset 0x{position:x} expected {expected_length} more byte(s) but the data ends',
            chain=chain,
        )
