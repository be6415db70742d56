from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Iterator

from ral.path import Path

from ral.tree import Leaf, Node

if TYPE_CHECKING:
    from ral.tree import PerfectTree


def foldr_tree[T, B](
    f: Callable[[T, B], B], z: B, tree: PerfectTree[T]
) -> B:
    match tree:
        case Leaf(value):
            return f(value, z)
        case Node(left, right):
            return foldr_tree(f, foldr_tree(f, z, right), left)


def ifoldr_tree[T, B](
    f: Callable[[Path, T, B], B], z: B, tree: PerfectTree[T]
) -> B:
    return _ifoldr(f, z, tree, tree.rank, 0)


def _ifoldr[T, B](
    f: Callable[[Path, T, B], B],
    z: B,
    tree: PerfectTree[T],
    rank: int,
    start: int,
) -> B:
    match tree:
        case Leaf(value):
            return f(Path(rank, start), value, z)
        case Node(left, right):
            half = 1 << (tree.rank - 1)
            return _ifoldr(
                f,
                _ifoldr(f, z, right, rank, start + half),
                left,
                rank,
                start,
            )


def iterate_leaves[T](tree: PerfectTree[T]) -> Iterator[T]:
    match tree:
        case Leaf(value):
            yield value
        case Node(left, right):
            yield from iterate_leaves(left)
            yield from iterate_leaves(right)


def tree_to_list[T](tree: PerfectTree[T]) -> list[T]:
    return list(iterate_leaves(tree))
