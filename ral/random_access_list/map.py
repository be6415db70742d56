from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from ral.errors import ShapeMismatch
from ral.tree import izip_trees_with, map_tree

from ral.random_access_list import Cons0, Cons1, Last

if TYPE_CHECKING:
    from ral.random_access_list import Spine


def map_spine[A, B](
    f: Callable[[A], B], spine: Spine[A]
) -> Spine[B]:
    match spine:
        case Last(tree):
            return Last(map_tree(f, tree))
        case Cons0(rest):
            return Cons0(map_spine(f, rest))
        case Cons1(tree, rest):
            return Cons1(map_tree(f, tree), map_spine(f, rest))


def imap_spine[A, B](
    f: Callable[[int, A], B], spine: Spine[A]
) -> Spine[B]:
    return izip_spines_with(
        lambda i, value, _: f(i, value), spine, spine
    )


def zip_spines_with[A, B, C](
    f: Callable[[A, B], C], a: Spine[A], b: Spine[B]
) -> Spine[C]:
    return izip_spines_with(lambda _, x, y: f(x, y), a, b)


def izip_spines_with[A, B, C](
    f: Callable[[int, A, B], C],
    a: Spine[A],
    b: Spine[B],
    rank: int = 0,
    offset: int = 0,
) -> Spine[C]:
    """Both spines need the same digits present, digit by digit"""

    def zip_digit(x, y):
        return izip_trees_with(
            lambda path, l, r: f(offset + path.bits, l, r), x, y
        )

    match a, b:
        case Last(x), Last(y):
            return Last(zip_digit(x, y))
        case Cons0(a_rest), Cons0(b_rest):
            return Cons0(
                izip_spines_with(
                    f, a_rest, b_rest, rank + 1, offset
                )
            )
        case Cons1(x, a_rest), Cons1(y, b_rest):
            return Cons1(
                zip_digit(x, y),
                izip_spines_with(
                    f,
                    a_rest,
                    b_rest,
                    rank + 1,
                    offset + (1 << rank),
                ),
            )
        case _:
            raise ShapeMismatch(
                type(a).__name__, type(b).__name__
            )
