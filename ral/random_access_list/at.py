from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from ral.tree import (
    adjust_tree_at,
    index_tree,
    leftmost,
    rightmost,
)

from ral.random_access_list import Cons0, Cons1, Last

if TYPE_CHECKING:
    from ral.random_access_list import Spine


def head_spine[T](spine: Spine[T]) -> T:
    match spine:
        case Last(tree) | Cons1(tree, _):
            return leftmost(tree)
        case Cons0(rest):
            return head_spine(rest)


def last_spine[T](spine: Spine[T]) -> T:
    match spine:
        case Last(tree):
            return rightmost(tree)
        case Cons0(rest) | Cons1(_, rest):
            return last_spine(rest)


def index_spine[T](spine: Spine[T], i: int, rank: int = 0) -> T:
    """
    Skips whole digits until ``i`` lands inside one, then the low
    bits of what's left of ``i`` are the path into that digit

    Bounds are the caller's job, apart from the terminal digit's
    own path check.
    """
    match spine:
        case Last(tree):
            return index_tree(tree, i)
        case Cons0(rest):
            return index_spine(rest, i, rank + 1)
        case Cons1(tree, rest):
            span = 1 << rank
            if i < span:
                return index_tree(tree, i)
            return index_spine(rest, i - span, rank + 1)


def adjust_spine[T](
    spine: Spine[T], i: int, f: Callable[[T], T], rank: int = 0
) -> Spine[T]:
    match spine:
        case Last(tree):
            return Last(adjust_tree_at(tree, i, f))
        case Cons0(rest):
            return Cons0(adjust_spine(rest, i, f, rank + 1))
        case Cons1(tree, rest):
            span = 1 << rank
            if i < span:
                return Cons1(adjust_tree_at(tree, i, f), rest)
            return Cons1(
                tree, adjust_spine(rest, i - span, f, rank + 1)
            )
