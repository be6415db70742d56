import operator

import pytest

from ral.errors import (
    IndexOutOfRange,
    LengthMismatch,
    ShapeMismatch,
)
from ral.path import Path, Pos
from ral.random_access_list import (
    Cons0,
    Cons1,
    Last,
    RandomAccessList,
)
from ral.random_access_list.map import zip_spines_with
from ral.tree import Leaf, Node

LENGTHS = range(34)


def numbers(n: int) -> RandomAccessList[int]:
    return RandomAccessList.from_list(range(n))


def test_abc():
    xs = RandomAccessList.from_list("abc")

    assert (
        Cons1(Leaf("a"), Last(Node(Leaf("b"), Leaf("c"))))
        == xs.spine
    )
    assert 3 == len(xs)
    assert "a" == xs.index(0)
    assert "c" == xs[2]
    assert "a" == xs.head()
    assert "c" == xs.last()

    zs = xs.cons("z")
    assert 4 == len(zs)
    assert list("zabc") == zs.to_list()
    assert [2] == list(zs.digits())
    assert list("abc") == xs.to_list()


def test_empty():
    xs = RandomAccessList.empty()
    assert 0 == len(xs)
    assert xs.null()
    assert not xs
    assert [] == xs.to_list()
    assert RandomAccessList() == xs


def test_empty_has_no_ends():
    xs = RandomAccessList.empty()
    with pytest.raises(IndexOutOfRange):
        xs.head()
    with pytest.raises(IndexOutOfRange):
        xs.last()
    with pytest.raises(IndexOutOfRange):
        xs.uncons()
    with pytest.raises(IndexOutOfRange):
        xs[0]


def test_singleton():
    xs = RandomAccessList.singleton(5)
    assert RandomAccessList.empty().cons(5) == xs
    assert 5 == xs.head() == xs.last()
    assert xs


@pytest.mark.parametrize("n", LENGTHS)
def test_from_list_round_trip(n: int):
    xs = numbers(n)
    assert n == len(xs)
    assert list(range(n)) == xs.to_list()
    assert xs == RandomAccessList.from_list(xs.to_list())
    assert n == sum(tree.size for tree in xs.digits().values())


@pytest.mark.parametrize("n", LENGTHS)
def test_from_list_same_as_consing(n: int):
    xs = RandomAccessList.empty()
    for x in reversed(range(n)):
        xs = xs.cons(x)
    assert numbers(n) == xs


def test_from_list_length_check():
    assert 3 == len(RandomAccessList.from_list("abc", length=3))
    with pytest.raises(LengthMismatch):
        RandomAccessList.from_list("abc", length=4)
    with pytest.raises(LengthMismatch):
        RandomAccessList.from_list([], length=1)


def test_from_list_takes_iterators():
    assert [0, 2, 4] == RandomAccessList.from_list(
        x * 2 for x in range(3)
    ).to_list()


def test_from_spine():
    xs = RandomAccessList.from_spine(
        Cons1(Leaf(1), Last(Node(Leaf(2), Leaf(3))))
    )
    assert 3 == len(xs)
    assert [1, 2, 3] == xs.to_list()
    empty = RandomAccessList.from_spine(None)
    assert RandomAccessList.empty() == empty


def test_from_spine_checks_ranks():
    with pytest.raises(ShapeMismatch):
        RandomAccessList.from_spine(
            Cons1(Node(Leaf(1), Leaf(2)), Last(Leaf(3)))
        )
    with pytest.raises(ShapeMismatch):
        RandomAccessList.from_spine(Cons0(Last(Leaf(3))))


@pytest.mark.parametrize("n", LENGTHS)
def test_cons(n: int):
    xs = numbers(n)
    ys = xs.cons(-1)
    assert -1 == ys.head()
    assert [-1, *range(n)] == ys.to_list()
    assert n + 1 == len(ys)
    assert list(range(n)) == xs.to_list()


@pytest.mark.parametrize("n", range(1, 34))
def test_uncons(n: int):
    x, rest = numbers(n).uncons()
    assert 0 == x
    assert RandomAccessList.from_list(range(1, n)) == rest


@pytest.mark.parametrize("n", LENGTHS)
def test_uncons_undoes_cons(n: int):
    xs = numbers(n)
    assert ("new", xs) == xs.cons("new").uncons()


def test_tail():
    assert RandomAccessList.empty() == (
        RandomAccessList.singleton(1).tail()
    )
    assert [1, 2, 3] == numbers(4).tail().to_list()


@pytest.mark.parametrize("n", range(1, 34))
def test_head_and_last(n: int):
    xs = numbers(n)
    assert 0 == xs.head()
    assert n - 1 == xs.last()


@pytest.mark.parametrize("n", LENGTHS)
def test_index(n: int):
    xs = numbers(n)
    flat = xs.to_list()
    for i in range(n):
        assert flat[i] == xs[i]


@pytest.mark.parametrize(
    "n,i", [(0, 0), (3, 3), (3, -1), (8, 8), (9, 100)]
)
def test_index_out_of_range(n, i):
    with pytest.raises(IndexOutOfRange):
        numbers(n)[i]


def test_set():
    xs = numbers(10)
    ys = xs.set(7, "x")
    assert [0, 1, 2, 3, 4, 5, 6, "x", 8, 9] == ys.to_list()
    assert list(range(10)) == xs.to_list()
    # 10 is 0b1010, the rank 1 digit holds 0 and 1
    assert xs.digits()[1] is ys.digits()[1]


def test_adjust():
    assert [0, 10, 2] == numbers(3).adjust(
        1, lambda x: x * 10
    ).to_list()


@pytest.mark.parametrize("n", LENGTHS)
def test_set_everywhere(n: int):
    xs = numbers(n)
    for i in range(n):
        ys = xs.set(i, None)
        expected = [None if j == i else j for j in range(n)]
        assert expected == ys.to_list()


def test_set_out_of_range():
    with pytest.raises(IndexOutOfRange):
        numbers(3).set(3, "x")
    with pytest.raises(IndexOutOfRange):
        RandomAccessList.empty().adjust(0, lambda x: x)


def test_map():
    doubled = numbers(5).map(lambda x: x * 2)
    assert [0, 2, 4, 6, 8] == doubled.to_list()
    empty = RandomAccessList.empty()
    assert empty == empty.map(str)


@pytest.mark.parametrize("n", LENGTHS)
def test_imap(n: int):
    xs = RandomAccessList.from_list(
        [chr(ord("a") + i % 26) for i in range(n)]
    )
    pairs = xs.imap(lambda i, x: (i, x))
    assert list(enumerate(xs)) == pairs.to_list()


def test_foldr():
    xs = RandomAccessList.from_list("abcde")
    assert "(a(b(c(d(e)))))" == xs.foldr(
        lambda x, acc: f"({x}{acc})", ""
    )
    empty = RandomAccessList.empty()
    assert "z" == empty.foldr(operator.add, "z")


@pytest.mark.parametrize("n", LENGTHS)
def test_ifoldr(n: int):
    xs = numbers(n).map(str)
    assert list(enumerate(xs)) == xs.ifoldr(
        lambda i, x, acc: [(i, x), *acc], []
    )


def test_fold_map():
    xs = RandomAccessList.from_list("abc")
    assert "ABC" == xs.fold_map(str.upper, operator.add, "")
    empty = RandomAccessList.empty()
    assert 0 == empty.fold_map(len, operator.add, 0)


@pytest.mark.parametrize("n", LENGTHS)
def test_zip(n: int):
    xs = numbers(n)
    ys = numbers(n).map(lambda x: x * 10)
    zipped = xs.zip_with(operator.add, ys)
    assert [x + y for x, y in zip(xs, ys)] == zipped.to_list()


@pytest.mark.parametrize(
    "n,m", [(0, 1), (1, 0), (3, 4), (4, 3), (5, 6)]
)
def test_zip_different_lengths(n, m):
    with pytest.raises(LengthMismatch):
        numbers(n).zip_with(operator.add, numbers(m))


def test_izip():
    xs = RandomAccessList.from_list("abc")
    ys = RandomAccessList.from_list("xyz")
    assert ["0ax", "1by", "2cz"] == xs.izip_with(
        lambda i, x, y: f"{i}{x}{y}", ys
    ).to_list()


def test_zip_spines_with_different_digits():
    xs = numbers(5)
    ys = numbers(6)
    assert xs.spine is not None and ys.spine is not None
    with pytest.raises(ShapeMismatch):
        zip_spines_with(operator.add, xs.spine, ys.spine)


def test_combine():
    xs = RandomAccessList.from_list([1, 2, 3])
    ys = RandomAccessList.from_list([10, 20, 30])
    assert [11, 22, 33] == xs.combine(ys).to_list()
    assert [10, 20, 30] == xs.combine(ys, max).to_list()
    assert ["ab"] == RandomAccessList.from_list("a").combine(
        RandomAccessList.from_list("b")
    ).to_list()


def test_combine_different_lengths():
    with pytest.raises(LengthMismatch):
        numbers(2).combine(numbers(3))


def test_combine_with_repeat_unit():
    xs = RandomAccessList.from_list(["a", "b", "c"])
    assert xs == xs.combine(RandomAccessList.repeat(3, ""))


@pytest.mark.parametrize("n", LENGTHS)
def test_repeat(n: int):
    assert RandomAccessList.from_list("x" * n) == (
        RandomAccessList.repeat(n, "x")
    )


def test_repeat_negative():
    with pytest.raises(ValueError):
        RandomAccessList.repeat(-1, "x")


def test_tabulate():
    assert [0, 1, 4, 9, 16, 25] == RandomAccessList.tabulate(
        6, lambda pos: pos.value**2
    ).to_list()


def test_digits():
    xs = numbers(11)
    assert {0, 1, 3} == set(xs.digits())
    assert Leaf(0) == xs.digits()[0]
    assert RandomAccessList.empty().digits() == {}


def test_persistence():
    xs = numbers(7)
    xs.cons(100)
    xs.set(3, "x")
    xs.tail()
    assert list(range(7)) == xs.to_list()


def test_pos_indexes():
    xs = RandomAccessList.from_list("abc")
    pos = Pos(1, Path(1, 1))
    assert "c" == xs[pos]
    assert "c" == "abc"[pos]
    assert ["a", "b", "C"] == xs.adjust(pos, str.upper).to_list()


def test_path_is_not_a_list_index():
    xs = RandomAccessList.from_list("abc")
    with pytest.raises(TypeError):
        xs[Path(1, 1)]
    with pytest.raises(TypeError):
        xs.set(Path(1, 1), "z")


def test_length_comes_from_the_digits():
    xs = RandomAccessList(
        Cons1(Leaf(1), Last(Node(Leaf(2), Leaf(3))))
    )
    assert 3 == len(xs)
    assert [1, 2, 3] == xs.to_list()

    with pytest.raises(TypeError):
        RandomAccessList(Last(Leaf(1)), 5)  # type: ignore


def test_length_checks_digit_ranks():
    with pytest.raises(ShapeMismatch):
        len(RandomAccessList(Cons0(Last(Leaf(1)))))


def test_ordering():
    abc = RandomAccessList.from_list("abc")
    assert abc < RandomAccessList.from_list("abd")
    assert RandomAccessList.from_list("ab") < abc
    assert RandomAccessList.empty() < abc
    assert abc <= RandomAccessList.from_list("abc")
    assert abc > RandomAccessList.from_list("aaaa")
    assert not abc < abc


def test_sorting_lists():
    lists = [numbers(3), numbers(1), numbers(0), numbers(2)]
    assert [0, 1, 2, 3] == [len(xs) for xs in sorted(lists)]
