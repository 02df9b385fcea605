from pathlib import Path

import pytest

from stel.core import MAGIC_A, MAGIC_B


HEADER_REGION_A = bytes(range(0x10, 0x1e))
HEADER_REGION_B = b'\x01\x02\x03\x04'


def tagged(tag: bytes, text: bytes) -> bytes:
    return tag + text + b'\x00'


def build_stel(header_region_a=HEADER_REGION_A, header_region_b=HEADER_REGION_B, metadata=b'', leftover=b''):
    return MAGIC_A + header_region_a + MAGIC_B + header_region_b + metadata + leftover


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def full_metadata():
    return b''.join([
        tagged(b'\x33\x00', b'Kebab'),
        tagged(b'\x37\x00', b'A tasty level'),
        tagged(b'\x3a\x00', b'unknown'),
        tagged(b'\x8e\x00', b'https://example.com'),
    ])


@pytest.fixture
def stel_file(tmp_path, full_metadata):
    path = tmp_path / 'level.stel'
    path.write_bytes(build_stel(metadata=full_metadata, leftover=b'\xca\xfe'))

    return path
