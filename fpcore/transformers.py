# fpcore/transformers.py
# Монадные трансформеры: OptionT[F, A] ~ F[Maybe[A]], EitherT[F, L, R] ~ F[Either[L, R]].
# Дают map / flat_map сразу "сквозь" оба слоя.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable

from .ftypes import Either, Maybe
from .monads import Monad


# ============ OptionT ============


@dataclass(frozen=True)
class OptionT:
    """
    Обёртка над F[Maybe[A]].
    Пример (F = List):
      OptionT(list_monad, [Maybe.some(1), Maybe.nothing()])
    """

    monad: Monad
    value: Any

    @staticmethod
    def some(monad: Monad, value) -> "OptionT":
        return OptionT(monad, monad.pure(Maybe.some(value)))

    @staticmethod
    def none(monad: Monad) -> "OptionT":
        return OptionT(monad, monad.pure(Maybe.nothing()))

    @staticmethod
    def lift(monad: Monad, fa) -> "OptionT":
        """F[A] -> OptionT[F, A]"""
        return OptionT(monad, monad.map(fa, Maybe.some))

    def map(self, fn: Callable) -> "OptionT":
        return OptionT(self.monad, self.monad.map(self.value, lambda m: m.map(fn)))

    def flat_map(self, fn: Callable[[Any], "OptionT"]) -> "OptionT":
        def inner(maybe: Maybe):
            if maybe.is_none():
                return self.monad.pure(Maybe.nothing())
            return fn(maybe.value).value

        return OptionT(self.monad, self.monad.flat_map(self.value, inner))

    def get_or_else(self, default):
        """F[A]: Nothing заменяется на default"""
        return self.monad.map(self.value, lambda m: m.get_or_else(default))


# ============ EitherT ============


@dataclass(frozen=True)
class EitherT:
    """
    Обёртка над F[Either[L, R]].
    Left прерывает цепочку flat_map, как и у обычного Either.
    """

    monad: Monad
    value: Any

    @staticmethod
    def right(monad: Monad, value) -> "EitherT":
        return EitherT(monad, monad.pure(Either.right(value)))

    @staticmethod
    def left(monad: Monad, value) -> "EitherT":
        return EitherT(monad, monad.pure(Either.left(value)))

    @staticmethod
    def lift(monad: Monad, fa) -> "EitherT":
        """F[R] -> EitherT[F, L, R]"""
        return EitherT(monad, monad.map(fa, Either.right))

    def map(self, fn: Callable) -> "EitherT":
        return EitherT(self.monad, self.monad.map(self.value, lambda e: e.map(fn)))

    def left_map(self, fn: Callable) -> "EitherT":
        return EitherT(self.monad, self.monad.map(self.value, lambda e: e.map_left(fn)))

    def flat_map(self, fn: Callable[[Any], "EitherT"]) -> "EitherT":
        def inner(either: Either):
            if either.is_left:
                return self.monad.pure(either)
            return fn(either.value).value

        return EitherT(self.monad, self.monad.flat_map(self.value, inner))

    def transform(self, fn: Callable[[Either], Either]) -> "EitherT":
        """Either[L, R] -> Either[L2, R2] внутри F"""
        return EitherT(self.monad, self.monad.map(self.value, fn))
