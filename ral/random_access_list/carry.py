from __future__ import annotations
from typing import TYPE_CHECKING

from ral.tree import Node

from ral.random_access_list import Cons0, Cons1, Last

if TYPE_CHECKING:
    from ral.random_access_list import Spine
    from ral.tree import PerfectTree


def cons_tree[T](
    tree: PerfectTree[T], spine: Spine[T]
) -> Spine[T]:
    """
    Binary increment: ``tree`` has the same rank as the spine's
    first digit and carries upwards until it finds an empty slot

    Stops at the first ``Cons0``, so it's amortised O(1).
    """
    match spine:
        case Last(last):
            return Cons0(Last(Node(tree, last)))
        case Cons0(rest):
            return Cons1(tree, rest)
        case Cons1(digit, rest):
            return Cons0(cons_tree(Node(tree, digit), rest))


def uncons_tree[T](
    spine: Spine[T],
) -> tuple[PerfectTree[T], Spine[T] | None]:
    """
    Binary decrement, the inverse of ``cons_tree``

    Returns the tree at the spine's first rank and whatever is
    left (``None`` if that was everything). An absent first digit
    borrows from the next rank up by splitting its tree in half.
    """
    match spine:
        case Last(last):
            return last, None
        case Cons1(digit, rest):
            return digit, Cons0(rest)
        case Cons0(rest):
            borrowed, remaining = uncons_tree(rest)
            # Borrowed from one rank up, which is never rank 0
            assert isinstance(borrowed, Node)
            return borrowed.left, (
                Last(borrowed.right)
                if remaining is None
                else Cons1(borrowed.right, remaining)
            )
