import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from fpcore.ftypes import Maybe, Either


# ТЕСТЫ Maybe
def test_maybe_some_and_none_behavior():
    just = Maybe.some(42)
    nothing = Maybe.nothing()

    assert not just.is_none()
    assert nothing.is_none()
    assert just.get_or_else(0) == 42
    assert nothing.get_or_else(0) == 0


def test_maybe_some_none_is_still_some():
    """Some(None) и Nothing являются разными значениями"""
    assert Maybe.some(None).is_some()
    assert Maybe.some(None) != Maybe.nothing()
    assert Maybe.of(None) == Maybe.nothing()
    assert Maybe.of(0) == Maybe.some(0)


def test_maybe_map_and_bind():
    maybe_val = Maybe.some(10)
    mapped = maybe_val.map(lambda x: x * 2)
    bound = maybe_val.bind(lambda x: Maybe.some(x + 5))

    assert mapped.get_or_else(0) == 20
    assert bound.get_or_else(0) == 15
    assert Maybe.nothing().map(lambda x: x * 2).is_none()


def test_maybe_fold_and_repr():
    assert Maybe.some(3).fold(lambda: "none", str) == "3"
    assert Maybe.nothing().fold(lambda: "none", str) == "none"
    assert repr(Maybe.some(3)) == "Some(3)"
    assert repr(Maybe.nothing()) == "Nothing"


# ТЕСТЫ Either
def test_either_left_and_right_behavior():
    right_val = Either.right(100)
    left_val = Either.left("error")

    assert right_val.is_right
    assert not left_val.is_right
    assert right_val.get_or_else(0) == 100
    assert left_val.get_or_else(0) == 0


def test_either_map_and_bind():
    val = Either.right(5)
    mapped = val.map(lambda x: x * 2)
    bound = val.bind(lambda x: Either.right(x + 3))

    assert mapped.get_or_else(0) == 10
    assert bound.get_or_else(0) == 8


def test_either_left_short_circuits():
    err = Either.left("boom")
    assert err.map(lambda x: x * 2) == err
    assert err.bind(lambda x: Either.right(x)) == err
    assert err.map_left(str.upper) == Either.left("BOOM")


def test_either_fold_swap_to_maybe():
    assert Either.right(2).fold(len, lambda x: x + 1) == 3
    assert Either.left("ab").fold(len, lambda x: x + 1) == 2
    assert Either.left(1).swap() == Either.right(1)
    assert Either.right(1).to_maybe() == Maybe.some(1)
    assert Either.left(1).to_maybe() == Maybe.nothing()
    assert repr(Either.left("e")) == "Left('e')"
