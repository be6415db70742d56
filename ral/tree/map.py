from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from ral.errors import ShapeMismatch
from ral.path import Path

from ral.tree import Leaf, Node

if TYPE_CHECKING:
    from ral.tree import PerfectTree


def map_tree[A, B](
    f: Callable[[A], B], tree: PerfectTree[A]
) -> PerfectTree[B]:
    match tree:
        case Leaf(value):
            return Leaf(f(value))
        case Node(left, right):
            return Node(map_tree(f, left), map_tree(f, right))


def imap_tree[A, B](
    f: Callable[[Path, A], B], tree: PerfectTree[A]
) -> PerfectTree[B]:
    return izip_trees_with(
        lambda path, value, _: f(path, value), tree, tree
    )


def zip_trees_with[A, B, C](
    f: Callable[[A, B], C],
    a: PerfectTree[A],
    b: PerfectTree[B],
) -> PerfectTree[C]:
    return izip_trees_with(lambda _, x, y: f(x, y), a, b)


def izip_trees_with[A, B, C](
    f: Callable[[Path, A, B], C],
    a: PerfectTree[A],
    b: PerfectTree[B],
) -> PerfectTree[C]:
    if a.rank != b.rank:
        raise ShapeMismatch(a.rank, b.rank)

    return _izip(f, a, b, a.rank, 0)


def _izip[A, B, C](
    f: Callable[[Path, A, B], C],
    a: PerfectTree[A],
    b: PerfectTree[B],
    rank: int,
    start: int,
) -> PerfectTree[C]:
    match a, b:
        case Leaf(x), Leaf(y):
            return Leaf(f(Path(rank, start), x, y))
        case Node(a_left, a_right), Node(b_left, b_right):
            half = 1 << (a.rank - 1)
            return Node(
                _izip(f, a_left, b_left, rank, start),
                _izip(f, a_right, b_right, rank, start + half),
            )
        case _:
            raise ShapeMismatch(a, b)
