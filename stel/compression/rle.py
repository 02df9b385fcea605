'''
# Run-length encoded data

The data is represented as an ordered list of runs, each one a byte sequence
with the number of times it must be repeated:

  .--------------------------.
  | copies 1 | run 1         |
  | copies 2 | run 2         |
    ...
  | copies N | run N         |
  '--------------------------'

Decompressing concatenates every run repeated its number of times, in order.

How STEL files produce the runs is not known: compress() here groups each
maximal sequence of a repeated byte in a run of a single byte, which is enough
to get the data back with decompress() but is not guaranteed to match what the
original files contain.
'''
from typing import Iterable, Iterator, List, NamedTuple, Tuple, Union


class CompressedRun(NamedTuple):
    copies: int
    run: bytes

    def expand(self) -> bytes:
        return self.run * self.copies


class CompressedData(object):

    def __init__(self, runs: Iterable[Union[CompressedRun, Tuple[int, bytes]]] = ()):
        self._runs: List[CompressedRun] = []
        for copies, run in runs:
            if not isinstance(copies, int):
                raise TypeError('\'%s\' is the wrong kind of repeat count' % copies.__class__.__name__)
            if not isinstance(run, (bytes, bytearray, memoryview)):
                raise TypeError('\'%s\' is the wrong kind of run' % run.__class__.__name__)
            if copies < 0:
                raise ValueError(f'a run cannot be repeated {copies} times')

            self._runs.append(CompressedRun(copies, bytes(run)))

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._runs)

    def __iter__(self) -> Iterator[CompressedRun]:
        return iter(self._runs)

    def __len__(self):
        return len(self._runs)

    def __getitem__(self, item):
        return self._runs[item]

    def __eq__(self, other):
        if not isinstance(other, CompressedData):
            return NotImplemented

        return self._runs == other._runs

    def decompress(self) -> bytes:
        return b''.join(_.expand() for _ in self._runs)

    @classmethod
    def compress(cls, data: bytes) -> 'CompressedData':
        runs = []
        start = 0
        for idx in range(1, len(data) + 1):
            if idx == len(data) or data[idx] != data[start]:
                runs.append(CompressedRun(idx - start, data[start:start + 1]))
                start = idx

        return cls(runs)
