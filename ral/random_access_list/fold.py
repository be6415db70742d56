from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Iterator

from frozendict import frozendict

from ral.errors import ShapeMismatch
from ral.tree import foldr_tree, ifoldr_tree, iterate_leaves

from ral.random_access_list import Cons0, Cons1, Last

if TYPE_CHECKING:
    from ral.random_access_list import Spine
    from ral.tree import PerfectTree


def foldr_spine[T, B](
    f: Callable[[T, B], B], z: B, spine: Spine[T]
) -> B:
    match spine:
        case Last(tree):
            return foldr_tree(f, z, tree)
        case Cons0(rest):
            return foldr_spine(f, z, rest)
        case Cons1(tree, rest):
            return foldr_tree(f, foldr_spine(f, z, rest), tree)


def ifoldr_spine[T, B](
    f: Callable[[int, T, B], B],
    z: B,
    spine: Spine[T],
    rank: int = 0,
    offset: int = 0,
) -> B:
    def at_offset(digit_offset: int) -> Callable:
        return lambda path, value, acc: f(
            digit_offset + path.bits, value, acc
        )

    match spine:
        case Last(tree):
            return ifoldr_tree(at_offset(offset), z, tree)
        case Cons0(rest):
            return ifoldr_spine(f, z, rest, rank + 1, offset)
        case Cons1(tree, rest):
            return ifoldr_tree(
                at_offset(offset),
                ifoldr_spine(
                    f, z, rest, rank + 1, offset + (1 << rank)
                ),
                tree,
            )


def iterate_spine[T](spine: Spine[T]) -> Iterator[T]:
    for tree in iterate_digits(spine):
        yield from iterate_leaves(tree)


def iterate_digits[T](
    spine: Spine[T],
) -> Iterator[PerfectTree[T]]:
    """Present digits only, smallest first"""
    match spine:
        case Last(tree):
            yield tree
        case Cons0(rest):
            yield from iterate_digits(rest)
        case Cons1(tree, rest):
            yield tree
            yield from iterate_digits(rest)


def spine_digits[T](
    spine: Spine[T],
) -> frozendict[int, PerfectTree[T]]:
    return frozendict(
        {tree.rank: tree for tree in iterate_digits(spine)}
    )


def measure_spine[T](spine: Spine[T], rank: int = 0) -> int:
    """
    Element count, checking each digit has the rank of its slot
    """
    match spine:
        case Last(tree):
            if tree.rank != rank:
                raise ShapeMismatch(rank, tree.rank)
            return tree.size
        case Cons0(rest):
            return measure_spine(rest, rank + 1)
        case Cons1(tree, rest):
            if tree.rank != rank:
                raise ShapeMismatch(rank, tree.rank)
            return tree.size + measure_spine(rest, rank + 1)
