# fpcore/ftypes.py
# Maybe и Either: маленькие иммутабельные типы-суммы.
# Either используется и как результат с ошибкой, и как метка
# "продолжить / готово" при разворачивании деревьев.

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")
R = TypeVar("R")

# Maybe (optional value)


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    Maybe-обёртка (Option).
    Используем Maybe.some(value) или Maybe.nothing().
    Nothing отличается флагом, поэтому Maybe.some(None) тоже возможен.
    """

    present: bool
    value: Optional[T]

    # factories
    @staticmethod
    def some(value: T) -> "Maybe[T]":
        return Maybe(True, value)

    @staticmethod
    def nothing() -> "Maybe[T]":
        return Maybe(False, None)

    @staticmethod
    def of(value: Optional[T]) -> "Maybe[T]":
        """None -> Nothing, всё остальное -> Some"""
        return Maybe.some(value) if value is not None else Maybe.nothing()

    # predicates
    def is_some(self) -> bool:
        return self.present

    def is_none(self) -> bool:
        return not self.present

    # functor / monad operations
    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":
        return Maybe.some(fn(self.value)) if self.present else Maybe.nothing()

    def bind(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return fn(self.value) if self.present else Maybe.nothing()

    def fold(self, if_none: Callable[[], U], if_some: Callable[[T], U]) -> U:
        return if_some(self.value) if self.present else if_none()

    # extractor
    def get_or_else(self, default: U) -> T | U:
        return self.value if self.present else default

    def __repr__(self) -> str:
        return f"Some({self.value!r})" if self.present else "Nothing"


# Either (Left / Right)


@dataclass(frozen=True)
class Either(Generic[L, R]):
    """
    Either<L, R> — левая ветвь обычно ошибка (или "ещё не готово"),
    правая: успешное (готовое) значение.

    Фабрики: Either.left(val), Either.right(val)
    Методы: map, bind, fold, swap, get_or_else, is_left, is_right
    """

    is_left: bool
    value: Union[L, R]

    # factories
    @staticmethod
    def left(value: L) -> "Either[L, R]":
        return Either(True, value)

    @staticmethod
    def right(value: R) -> "Either[L, R]":
        return Either(False, value)

    @property
    def is_right(self) -> bool:
        return not self.is_left

    # functor / monad operations (operate on Right)
    def map(self, fn: Callable[[R], U]) -> "Either[L, U]":
        return self if self.is_left else Either.right(fn(self.value))  # type: ignore[return-value]

    def map_left(self, fn: Callable[[L], U]) -> "Either[U, R]":
        return Either.left(fn(self.value)) if self.is_left else self  # type: ignore[return-value]

    def bind(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return self if self.is_left else fn(self.value)  # type: ignore[return-value]

    def fold(self, if_left: Callable[[L], U], if_right: Callable[[R], U]) -> U:
        return if_left(self.value) if self.is_left else if_right(self.value)  # type: ignore[arg-type]

    def swap(self) -> "Either[R, L]":
        return Either(not self.is_left, self.value)

    # extractor: returns Right value or default (when Left)
    def get_or_else(self, default: U) -> R | U:
        return default if self.is_left else self.value  # type: ignore[return-value]

    def to_maybe(self) -> Maybe[R]:
        return Maybe.nothing() if self.is_left else Maybe.some(self.value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Left({self.value!r})" if self.is_left else f"Right({self.value!r})"
