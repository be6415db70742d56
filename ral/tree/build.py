from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Iterable, Sequence

from ral.errors import LengthMismatch
from ral.path import Path

from ral.tree import Leaf, Node

if TYPE_CHECKING:
    from ral.tree import PerfectTree


def singleton[T](value: T) -> PerfectTree[T]:
    return Leaf(value)


def tree_from_list[T](
    rank: int, items: Iterable[T]
) -> PerfectTree[T]:
    check_rank(rank)

    if not isinstance(items, Sequence):
        items = tuple(items)

    if len(items) != 1 << rank:
        raise LengthMismatch(1 << rank, len(items))

    return build_tree(rank, items.__getitem__)


def repeat_tree[T](rank: int, value: T) -> PerfectTree[T]:
    """Every level is one node with both children the same one"""
    check_rank(rank)

    tree: PerfectTree[T] = Leaf(value)
    for _ in range(rank):
        tree = Node(tree, tree)
    return tree


def tabulate_tree[T](
    rank: int, f: Callable[[Path], T]
) -> PerfectTree[T]:
    return build_tree(rank, lambda bits: f(Path(rank, bits)))


def tree_universe(rank: int) -> PerfectTree[Path]:
    return tabulate_tree(rank, lambda path: path)


def check_rank(rank: int):
    if rank < 0:
        raise ValueError(f"Can't have a tree of rank {rank}")


def build_tree[T](
    rank: int, leaf: Callable[[int], T], start: int = 0
) -> PerfectTree[T]:
    """
    ``leaf`` gets the in-order position of each leaf, left to
    right
    """
    check_rank(rank)

    if rank == 0:
        return Leaf(leaf(start))

    half = 1 << (rank - 1)
    return Node(
        build_tree(rank - 1, leaf, start),
        build_tree(rank - 1, leaf, start + half),
    )
