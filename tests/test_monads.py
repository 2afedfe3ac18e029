import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fpcore.ftypes import Either, Maybe
from fpcore.monads import (
    Monad,
    do10x,
    either_monad,
    get_pairs,
    identity_monad,
    list_monad,
    maybe_monad,
    sequence,
    tree_monad,
)
from fpcore.tree import Branch, Leaf


def test_pure_and_flat_map():
    assert maybe_monad.pure(42) == Maybe.some(42)
    transformed = maybe_monad.flat_map(
        Maybe.some(42), lambda x: Maybe.some(x + 1) if x % 3 == 0 else Maybe.nothing()
    )
    assert transformed == Maybe.some(43)
    assert list_monad.pure(1) == [1]
    assert tree_monad.pure(1) == Leaf(1)


def test_map_derived_from_flat_map():
    assert maybe_monad.map(Maybe.some(2), lambda x: x + 1) == Maybe.some(3)
    assert either_monad.map(Either.left("e"), lambda x: x + 1) == Either.left("e")
    assert list_monad.map([1, 2, 3], lambda x: x + 1) == [2, 3, 4]


def test_get_pairs():
    assert get_pairs(list_monad, [1, 2], ["a", "b"]) == [
        (1, "a"),
        (1, "b"),
        (2, "a"),
        (2, "b"),
    ]
    assert get_pairs(maybe_monad, Maybe.some(4), Maybe.some("c")) == Maybe.some((4, "c"))
    assert get_pairs(maybe_monad, Maybe.some(4), Maybe.nothing()) == Maybe.nothing()


def test_do10x_over_instances():
    assert do10x(list_monad, [1, 2, 3]) == [10, 20, 30]
    assert do10x(maybe_monad, Maybe.some(42)) == Maybe.some(420)
    assert do10x(identity_monad, 35) == 350
    assert do10x(tree_monad, Branch(Leaf(3), Leaf(1))) == Branch(Leaf(30), Leaf(10))


def test_flatten():
    assert maybe_monad.flatten(Maybe.some(Maybe.some(1))) == Maybe.some(1)
    assert list_monad.flatten([[1], [2, 3]]) == [1, 2, 3]


def test_sequence():
    assert sequence(maybe_monad, (Maybe.some(1), Maybe.some(2))) == Maybe.some((1, 2))
    assert sequence(maybe_monad, (Maybe.some(1), Maybe.nothing())) == Maybe.nothing()
    assert sequence(either_monad, (Either.right(1), Either.left("x"))) == Either.left("x")


# ============ tail_rec_m ============


def test_identity_tail_rec_m_is_stack_safe():
    result = identity_monad.tail_rec_m(
        0, lambda n: Either.left(n + 1) if n < 100_000 else Either.right(n)
    )
    assert result == 100_000


def test_maybe_tail_rec_m():
    assert maybe_monad.tail_rec_m(
        0, lambda n: Maybe.some(Either.left(n + 1) if n < 100_000 else Either.right(n))
    ) == Maybe.some(100_000)
    assert maybe_monad.tail_rec_m(
        0, lambda n: Maybe.nothing() if n == 5 else Maybe.some(Either.left(n + 1))
    ) == Maybe.nothing()


def test_either_tail_rec_m_stops_on_left():
    result = either_monad.tail_rec_m(
        0, lambda n: Either.left("too big") if n > 3 else Either.right(Either.left(n + 1))
    )
    assert result == Either.left("too big")


def test_list_tail_rec_m_order():
    def step(n):
        if n >= 2:
            return [Either.right(n)]
        return [Either.left(n + 1), Either.right(-n), Either.left(n + 2)]

    # порядок обхода в глубину, как у вложенных flat_map
    assert list_monad.tail_rec_m(0, step) == [2, -1, 3, 0, 2]


def test_tree_tail_rec_m():
    result = tree_monad.tail_rec_m(
        3,
        lambda v: Branch(Leaf(Either.left(v - 1)), Leaf(Either.right(v)))
        if v > 0
        else Leaf(Either.right(0)),
    )
    assert result == Branch(Branch(Branch(Leaf(0), Leaf(1)), Leaf(2)), Leaf(3))


def test_tree_flat_map():
    tree = Branch(Leaf(10), Leaf(20))
    changed = tree_monad.flat_map(tree, lambda v: Branch(Leaf(v - 1), Leaf(v + 1)))
    assert changed == Branch(Branch(Leaf(9), Leaf(11)), Branch(Leaf(19), Leaf(21)))


def test_iterate_while_m():
    assert maybe_monad.iterate_while_m(
        0, lambda n: Maybe.some(n + 1), lambda n: n < 3
    ) == Maybe.some(3)
    assert maybe_monad.iterate_until_m(
        1, lambda n: Maybe.some(n * 2), lambda n: n > 100
    ) == Maybe.some(128)
    assert identity_monad.iterate_while_m(0, lambda n: n + 1, lambda n: n < 50_000) == 50_000


def test_base_monad_is_abstract():
    with pytest.raises(NotImplementedError):
        Monad().pure(1)
    assert repr(tree_monad) == "Tree()"
