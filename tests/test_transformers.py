import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fpcore.ftypes import Either, Maybe
from fpcore.monads import identity_monad, list_monad, maybe_monad
from fpcore.transformers import EitherT, OptionT


@pytest.fixture
def numbers():
    return OptionT(list_monad, [Maybe.some(1), Maybe.some(2)])


@pytest.fixture
def chars():
    return OptionT(list_monad, [Maybe.some("a"), Maybe.some("b"), Maybe.nothing()])


def test_option_t_cross_product(numbers, chars):
    pairs = numbers.flat_map(lambda n: chars.map(lambda c: (n, c)))
    assert pairs.value == [
        Maybe.some((1, "a")),
        Maybe.some((1, "b")),
        Maybe.nothing(),
        Maybe.some((2, "a")),
        Maybe.some((2, "b")),
        Maybe.nothing(),
    ]


def test_option_t_nothing_short_circuits(chars):
    calls = []

    def fn(c):
        calls.append(c)
        return OptionT.some(list_monad, c.upper())

    result = chars.flat_map(fn)
    assert result.value == [Maybe.some("A"), Maybe.some("B"), Maybe.nothing()]
    assert calls == ["a", "b"]


def test_option_t_constructors_and_get_or_else():
    assert OptionT.some(maybe_monad, 1).value == Maybe.some(Maybe.some(1))
    assert OptionT.none(list_monad).value == [Maybe.nothing()]
    assert OptionT.lift(list_monad, [1, 2]).value == [Maybe.some(1), Maybe.some(2)]
    assert OptionT(list_monad, [Maybe.some(1), Maybe.nothing()]).get_or_else(0) == [1, 0]


def test_either_t_over_list():
    eithers = EitherT(list_monad, [Either.left("something wrong"), Either.right(42), Either.right(2)])
    doubled = eithers.map(lambda x: x * 2)
    assert doubled.value == [Either.left("something wrong"), Either.right(84), Either.right(4)]


def test_either_t_flat_map_stops_on_left():
    start = EitherT.right(identity_monad, 10)
    result = start.flat_map(lambda x: EitherT.left(identity_monad, f"bad {x}")).flat_map(
        lambda _: EitherT.right(identity_monad, "unreachable")
    )
    assert result.value == Either.left("bad 10")


def test_either_t_transform_and_left_map():
    value = EitherT.right(identity_monad, 3).transform(
        lambda e: Either.left("odd") if e.value % 2 else Either.right(e.value)
    )
    assert value.value == Either.left("odd")
    assert value.left_map(str.upper).value == Either.left("ODD")


def test_either_t_lift():
    assert EitherT.lift(list_monad, [1]).value == [Either.right(1)]
