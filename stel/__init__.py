"""
# STEL container decoder.

A STEL file starts with two magic sequences, each followed by an opaque header
region, then it can carry a block of human readable metadata (name, description
and a couple of other strings) and ends with data whose meaning is not known.

The decoding works on data already in memory and it is organized in layers

 1. streams and primitives: a Cursor over the data and the functions
    consuming it (match a literal, take a fixed amount, take until a delimiter);
    they return a result instead of raising, so an alternative can be tried
    simply restarting from the old cursor.

 2. fields and human: the tagged strings and the human metadata block built
    out of them, where every field but the name can be missing.

 3. core: the container itself; only a wrong magic or truncated headers make
    it fail, everything else ends up in the leftover.

The compression.rle module models the run-length encoded data found in the
format; it is not used by the decoding yet.
"""
from .core import ContainerData, parse, parse_file, MAGIC_A, MAGIC_B
from .human import HumanMetadata


__version__ = '0.1.0'
