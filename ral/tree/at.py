from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from ral.errors import IndexOutOfRange
from ral.path import Path

from ral.tree import Leaf, Node

if TYPE_CHECKING:
    from ral.tree import PerfectTree


def as_path[T](tree: PerfectTree[T], path: Path | int) -> Path:
    """Paths have to be exactly as wide as the tree is deep"""
    if isinstance(path, Path):
        if path.rank != tree.rank:
            raise IndexOutOfRange(path, tree.size)
        return path
    return Path(tree.rank, path)


def leftmost[T](tree: PerfectTree[T]) -> T:
    match tree:
        case Leaf(value):
            return value
        case Node(left, _):
            return leftmost(left)


def rightmost[T](tree: PerfectTree[T]) -> T:
    match tree:
        case Leaf(value):
            return value
        case Node(_, right):
            return rightmost(right)


def index_tree[T](tree: PerfectTree[T], path: Path | int) -> T:
    for step in as_path(tree, path).steps():
        assert isinstance(tree, Node)
        tree = tree.right if step else tree.left

    assert isinstance(tree, Leaf)
    return tree.value


def adjust_tree_at[T](
    tree: PerfectTree[T], path: Path | int, f: Callable[[T], T]
) -> PerfectTree[T]:
    """
    Only the nodes between the root and the leaf get rebuilt,
    every sibling along the way is reused as is
    """
    return _adjust(tree, as_path(tree, path).bits, f)


def set_tree_at[T](
    tree: PerfectTree[T], path: Path | int, value: T
) -> PerfectTree[T]:
    return adjust_tree_at(tree, path, lambda _: value)


def _adjust[T](
    tree: PerfectTree[T], bits: int, f: Callable[[T], T]
) -> PerfectTree[T]:
    match tree:
        case Leaf(value):
            return Leaf(f(value))
        case Node(left, right):
            if bits >> (tree.rank - 1) & 1:
                return Node(left, _adjust(right, bits, f))
            else:
                return Node(_adjust(left, bits, f), right)
