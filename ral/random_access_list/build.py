from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Sequence

from ral.path import Pos
from ral.tree import repeat_tree, tabulate_tree
from ral.tree.build import build_tree

from ral.random_access_list import Cons0, Cons1, Last

if TYPE_CHECKING:
    from ral.random_access_list import Spine
    from ral.tree import PerfectTree


def build_spine[T](
    length: int,
    digit: Callable[[int, int], PerfectTree[T]],
    rank: int = 0,
    offset: int = 0,
) -> Spine[T] | None:
    """
    One digit per set bit of ``length``, lowest first

    ``digit`` gets the rank and the offset of the digit it has to
    make. ``length`` is shifted right as we go up, so at each
    level its lowest bit is the bit for ``rank``.
    """
    if length < 0:
        raise ValueError(f"Can't have a list of length {length}")
    if length == 0:
        return None

    higher = length >> 1
    span = 1 << rank

    if higher == 0:
        return Last(digit(rank, offset))

    if length & 1:
        return Cons1(
            digit(rank, offset),
            build_spine(higher, digit, rank + 1, offset + span),
        )
    else:
        return Cons0(build_spine(higher, digit, rank + 1, offset))


def spine_from_list[T](items: Sequence[T]) -> Spine[T] | None:
    return build_spine(
        len(items),
        lambda rank, offset: build_tree(
            rank, items.__getitem__, offset
        ),
    )


def repeat_spine[T](length: int, value: T) -> Spine[T] | None:
    return build_spine(
        length, lambda rank, _: repeat_tree(rank, value)
    )


def tabulate_spine[T](
    length: int, f: Callable[[Pos], T]
) -> Spine[T] | None:
    return build_spine(
        length,
        lambda rank, offset: tabulate_tree(
            rank, lambda path: f(Pos(offset, path))
        ),
    )


def universe_spine(length: int) -> Spine[Pos] | None:
    return tabulate_spine(length, lambda pos: pos)
