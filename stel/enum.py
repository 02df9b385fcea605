from enum import Enum


class HumanField(Enum):
    '''Tags introducing the fields of the human metadata block, in the order they are expected'''
    NAME         = b'\x33\x00'
    DESCRIPTION  = b'\x37\x00'
    FIELD3A      = b'\x3a\x00'  # meaning unknown
    WEBSITE_LINK = b'\x8e\x00'

    @property
    def tag(self) -> bytes:
        return self.value

    @property
    def attribute(self) -> str:
        return self.name.lower()
