from dataclasses import dataclass
from functools import reduce
from typing import Callable

from .monads import Monad


def compose(*funcs):
    """compose(f, g, h)(x) == f(g(h(x)))"""
    return reduce(lambda f, g: lambda x: f(g(x)), funcs)


def pipe(*funcs):
    """pipe(f, g, h)(x) == h(g(f(x))), то же, что andThen"""
    return reduce(lambda f, g: lambda x: g(f(x)), funcs)


# ============ Kleisli ============


@dataclass(frozen=True)
class Kleisli:
    """
    Обёртка над функцией A -> F[B].
    Позволяет соединять такие функции так же, как pipe соединяет обычные:
      Kleisli(maybe_monad, f).and_then(Kleisli(maybe_monad, g))
    """

    monad: Monad
    run: Callable

    def __call__(self, value):
        return self.run(value)

    def and_then(self, other: "Kleisli") -> "Kleisli":
        """сначала self, потом other (через flat_map)"""
        return Kleisli(self.monad, lambda a: self.monad.flat_map(self.run(a), other.run))

    def compose(self, other: "Kleisli") -> "Kleisli":
        """сначала other, потом self"""
        return other.and_then(self)

    def map(self, fn: Callable) -> "Kleisli":
        return Kleisli(self.monad, lambda a: self.monad.map(self.run(a), fn))

    def flat_map(self, fn: Callable[..., "Kleisli"]) -> "Kleisli":
        """
        fn получает результат self и возвращает следующий Kleisli,
        который запускается на том же входе
        """
        return Kleisli(
            self.monad,
            lambda a: self.monad.flat_map(self.run(a), lambda b: fn(b).run(a)),
        )
