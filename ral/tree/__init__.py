from __future__ import annotations
from dataclasses import dataclass, field

from ral.errors import ShapeMismatch

type PerfectTree[T] = Leaf[T] | Node[T]


@dataclass(frozen=True)
class Leaf[T]:
    value: T

    @property
    def rank(self) -> int:
        return 0

    @property
    def size(self) -> int:
        return 1


@dataclass(frozen=True)
class Node[T]:
    """
    Both children always have the same rank, so a rank ``r`` node
    has exactly ``2 ** r`` leaves below it
    """

    left: PerfectTree[T]
    right: PerfectTree[T]
    rank: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.left.rank != self.right.rank:
            raise ShapeMismatch(self.left.rank, self.right.rank)
        object.__setattr__(self, "rank", self.left.rank + 1)

    @property
    def size(self) -> int:
        return 1 << self.rank


# Implementations
from ral.tree.at import (
    adjust_tree_at,
    index_tree,
    leftmost,
    rightmost,
    set_tree_at,
)
from ral.tree.build import (
    repeat_tree,
    singleton,
    tabulate_tree,
    tree_from_list,
    tree_universe,
)
from ral.tree.fold import (
    foldr_tree,
    ifoldr_tree,
    iterate_leaves,
    tree_to_list,
)
from ral.tree.map import (
    imap_tree,
    izip_trees_with,
    map_tree,
    zip_trees_with,
)

__all__ = [
    "Leaf",
    "Node",
    "PerfectTree",
    "adjust_tree_at",
    "foldr_tree",
    "ifoldr_tree",
    "imap_tree",
    "index_tree",
    "iterate_leaves",
    "izip_trees_with",
    "leftmost",
    "map_tree",
    "repeat_tree",
    "rightmost",
    "set_tree_at",
    "singleton",
    "tabulate_tree",
    "tree_from_list",
    "tree_to_list",
    "tree_universe",
    "zip_trees_with",
]
