from dataclasses import dataclass
from typing import Iterator

from ral.errors import IndexOutOfRange


@dataclass(frozen=True, order=True)
class Path:
    """
    Address of one leaf in a perfect tree of the same rank

    Bits are read from the most significant end, each one picking
    the left (0) or right (1) child on the way down from the root,
    so ``bits`` is also the leaf's in-order position.
    """

    rank: int
    bits: int = 0

    def __post_init__(self):
        if self.rank < 0:
            raise IndexOutOfRange(self.rank, 0)
        if not 0 <= self.bits < 1 << self.rank:
            raise IndexOutOfRange(self.bits, 1 << self.rank)

    def steps(self) -> Iterator[int]:
        """Left/right choices from the root down"""
        for depth in reversed(range(self.rank)):
            yield self.bits >> depth & 1

    def __str__(self) -> str:
        if not self.rank:
            return "ε"
        return format(self.bits, f"0{self.rank}b")


@dataclass(frozen=True, order=True)
class Pos:
    """
    Position in a random access list

    ``offset`` is how many elements come before the digit, and the
    path's rank says which digit it is. Ordering by (offset,
    path) is the same as ordering by ``value`` for positions in
    one list.
    """

    offset: int
    path: Path

    @property
    def rank(self) -> int:
        return self.path.rank

    @property
    def value(self) -> int:
        return self.offset + self.path.bits

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
