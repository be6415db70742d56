from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property, total_ordering
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence

from frozendict import frozendict

from ral.errors import IndexOutOfRange, LengthMismatch
from ral.path import Pos
from ral.tree import Leaf, PerfectTree

type Spine[T] = Last[T] | Cons0[T] | Cons1[T]
"""
Digits of the length in binary, least significant first

The digit at depth ``i`` has rank ``i``. Only the ranks of the
present digits are stored (in their trees), the rest is implicit.
"""


@dataclass(frozen=True)
class Last[T]:
    """The highest set bit"""

    tree: PerfectTree[T]


@dataclass(frozen=True)
class Cons0[T]:
    rest: Spine[T]


@dataclass(frozen=True)
class Cons1[T]:
    tree: PerfectTree[T]
    rest: Spine[T]


@total_ordering
@dataclass(frozen=True)
class RandomAccessList[T]:
    """
    Persistent list with O(1) amortised ``cons`` and O(log n)
    indexing and update

    Stored as one perfect tree per set bit of the length, smallest
    first. Nothing is ever mutated: every "update" hands back a
    new list that shares all the untouched trees with the old
    one.

    The shape only depends on the length, so two lists are equal
    exactly when their elements are. Ordering is lexicographic.
    """

    spine: Spine[T] | None = None

    @cached_property
    def length(self) -> int:
        """Read off the digits, so it can't disagree with them"""
        if self.spine is None:
            return 0
        return measure_spine(self.spine)

    @staticmethod
    def empty() -> RandomAccessList[Any]:
        return RandomAccessList()

    @staticmethod
    def singleton(value: T) -> RandomAccessList[T]:
        return RandomAccessList(Last(Leaf(value)))

    @staticmethod
    def from_list(
        items: Iterable[T], length: int | None = None
    ) -> RandomAccessList[T]:
        """
        Builds the digits straight from the bits of the length,
        which gives the same list as consing everything on from
        the right

        If ``length`` is given the items have to match it.
        """
        if not isinstance(items, Sequence):
            items = tuple(items)

        if length is not None and length != len(items):
            raise LengthMismatch(length, len(items))

        return RandomAccessList(spine_from_list(items))

    @staticmethod
    def from_spine(spine: Spine[T] | None) -> RandomAccessList[T]:
        """Checks every digit has the rank of its slot up front"""
        if spine is not None:
            measure_spine(spine)
        return RandomAccessList(spine)

    @staticmethod
    def repeat(length: int, value: T) -> RandomAccessList[T]:
        return RandomAccessList(repeat_spine(length, value))

    @staticmethod
    def tabulate(
        length: int, f: Callable[[Pos], T]
    ) -> RandomAccessList[T]:
        return RandomAccessList(tabulate_spine(length, f))

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        if self.spine is None:
            return iter(())
        return iterate_spine(self.spine)

    def __getitem__(self, i: int | Pos) -> T:
        return self.index(i)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, RandomAccessList):
            return NotImplemented
        return self.to_list() < other.to_list()

    def null(self) -> bool:
        return self.spine is None

    def cons(self, value: T) -> RandomAccessList[T]:
        if self.spine is None:
            return RandomAccessList.singleton(value)
        return RandomAccessList(
            cons_tree(Leaf(value), self.spine)
        )

    def uncons(self) -> tuple[T, RandomAccessList[T]]:
        if self.spine is None:
            raise IndexOutOfRange(0, 0)

        first, rest = uncons_tree(self.spine)
        assert isinstance(first, Leaf)
        return first.value, RandomAccessList(rest)

    def tail(self) -> RandomAccessList[T]:
        return self.uncons()[1]

    def head(self) -> T:
        if self.spine is None:
            raise IndexOutOfRange(0, 0)
        return head_spine(self.spine)

    def last(self) -> T:
        if self.spine is None:
            raise IndexOutOfRange(-1, 0)
        return last_spine(self.spine)

    def index(self, i: int | Pos) -> T:
        return index_spine(*self._locate(i))

    def set(self, i: int | Pos, value: T) -> RandomAccessList[T]:
        return self.adjust(i, lambda _: value)

    def adjust(
        self, i: int | Pos, f: Callable[[T], T]
    ) -> RandomAccessList[T]:
        return RandomAccessList(adjust_spine(*self._locate(i), f))

    def to_list(self) -> list[T]:
        return list(self)

    def map[B](self, f: Callable[[T], B]) -> RandomAccessList[B]:
        if self.spine is None:
            return RandomAccessList()
        return RandomAccessList(map_spine(f, self.spine))

    def imap[B](
        self, f: Callable[[int, T], B]
    ) -> RandomAccessList[B]:
        if self.spine is None:
            return RandomAccessList()
        return RandomAccessList(imap_spine(f, self.spine))

    def foldr[B](self, f: Callable[[T, B], B], z: B) -> B:
        if self.spine is None:
            return z
        return foldr_spine(f, z, self.spine)

    def ifoldr[B](self, f: Callable[[int, T, B], B], z: B) -> B:
        if self.spine is None:
            return z
        return ifoldr_spine(f, z, self.spine)

    def fold_map[M](
        self,
        f: Callable[[T], M],
        combine: Callable[[M, M], M],
        unit: M,
    ) -> M:
        return self.foldr(lambda x, acc: combine(f(x), acc), unit)

    def zip_with[B, C](
        self, f: Callable[[T, B], C], other: RandomAccessList[B]
    ) -> RandomAccessList[C]:
        return self.izip_with(lambda _, x, y: f(x, y), other)

    def izip_with[B, C](
        self,
        f: Callable[[int, T, B], C],
        other: RandomAccessList[B],
    ) -> RandomAccessList[C]:
        if self.length != other.length:
            raise LengthMismatch(self.length, other.length)

        if self.spine is None or other.spine is None:
            return RandomAccessList()

        return RandomAccessList(
            izip_spines_with(f, self.spine, other.spine)
        )

    def combine(
        self,
        other: RandomAccessList[T],
        op: Callable[[T, T], T] = operator.add,
    ) -> RandomAccessList[T]:
        """Pointwise, so both sides need the same length"""
        return self.zip_with(op, other)

    def universe(self) -> RandomAccessList[Pos]:
        return universe(self.length)

    def digits(self) -> frozendict[int, PerfectTree[T]]:
        """The tree in each present digit, by rank"""
        if self.spine is None:
            return frozendict()
        return spine_digits(self.spine)

    def _locate(self, i: int | Pos) -> tuple[Spine[T], int]:
        index = operator.index(i)
        if self.spine is None or not 0 <= index < self.length:
            raise IndexOutOfRange(i, self.length)
        return self.spine, index


def universe(length: int) -> RandomAccessList[Pos]:
    """Every position of a list that long, in order"""
    return RandomAccessList(universe_spine(length))


# Implementations
from ral.random_access_list.at import (
    adjust_spine,
    head_spine,
    index_spine,
    last_spine,
)
from ral.random_access_list.build import (
    repeat_spine,
    spine_from_list,
    tabulate_spine,
    universe_spine,
)
from ral.random_access_list.carry import cons_tree, uncons_tree
from ral.random_access_list.fold import (
    foldr_spine,
    ifoldr_spine,
    iterate_spine,
    measure_spine,
    spine_digits,
)
from ral.random_access_list.map import (
    imap_spine,
    izip_spines_with,
    map_spine,
)

__all__ = [
    "Cons0",
    "Cons1",
    "Last",
    "RandomAccessList",
    "Spine",
    "universe",
]
