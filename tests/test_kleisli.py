import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fpcore.ftypes import Maybe
from fpcore.kleisli import Kleisli, compose, pipe
from fpcore.monads import identity_monad, maybe_monad


@pytest.fixture
def func1():
    return Kleisli(
        maybe_monad,
        lambda x: Maybe.some(f"{x} is even") if x % 2 == 0 else Maybe.nothing(),
    )


@pytest.fixture
def func2():
    return Kleisli(maybe_monad, lambda x: Maybe.some(x * 3))


def test_compose_and_pipe():
    def f(x):
        return x + 1

    def g(x):
        return x * 2

    assert compose(f, g)(3) == 7
    assert pipe(f, g)(3) == 8


def test_and_then(func1, func2):
    func3 = func2.and_then(func1)
    assert func3(2) == Maybe.some("6 is even")
    assert func3(3) == Maybe.nothing()


def test_compose_is_reverse_and_then(func1, func2):
    assert func1.compose(func2)(4) == func2.and_then(func1)(4)


def test_map(func2):
    assert func2.map(lambda v: v * 2)(5) == Maybe.some(30)


def test_flat_map_same_as_and_then_when_input_ignored(func1, func2):
    """func2.flat_map(_ -> func1) запускает func1 на исходном входе"""
    assert func2.flat_map(lambda _: func1)(2) == Maybe.some("2 is even")
    assert func2.flat_map(lambda _: func1)(3) == Maybe.nothing()


def test_identity_kleisli_composition():
    """Kleisli над Identity: оба шага видят один и тот же вход"""
    times2 = Kleisli(identity_monad, lambda x: x * 2)
    plus4 = Kleisli(identity_monad, lambda x: x + 4)
    composed = times2.flat_map(lambda x: plus4.map(lambda y: x + y))
    assert composed(3) == 13
