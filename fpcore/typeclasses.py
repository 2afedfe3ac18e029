# fpcore/typeclasses.py
# Eq, Semigroup, Monoid как обычные значения-словари операций.
# Экземпляр передаётся явно: combine(int_semigroup, 2, 3).

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Generic, List, TypeVar

from .domain import Expense, ShoppingCart, ToyCar
from .ftypes import Maybe

T = TypeVar("T")
K = TypeVar("K")


# ============ Eq ============


@dataclass(frozen=True)
class Eq(Generic[T]):
    """Типобезопасное сравнение: eqv(a, b) вместо a == b"""

    eqv: Callable[[T, T], bool]

    @staticmethod
    def instance(fn: Callable[[T, T], bool]) -> "Eq[T]":
        return Eq(fn)

    @staticmethod
    def by(key: Callable[[T], object]) -> "Eq[T]":
        """Равенство по ключу: Eq.by(lambda car: car.price)"""
        return Eq(lambda a, b: key(a) == key(b))

    def neqv(self, a: T, b: T) -> bool:
        return not self.eqv(a, b)


def _strict_eq(kind: type) -> Eq:
    def eqv(a, b):
        if not isinstance(a, kind) or not isinstance(b, kind):
            raise TypeError(
                f"Eq[{kind.__name__}] got {type(a).__name__} and {type(b).__name__}"
            )
        return a == b

    return Eq(eqv)


int_eq: Eq[int] = _strict_eq(int)
str_eq: Eq[str] = _strict_eq(str)


def list_eq(inner: Eq[T]) -> Eq[List[T]]:
    """Eq для списков выводится из Eq элементов"""
    return Eq(
        lambda xs, ys: len(xs) == len(ys)
        and all(inner.eqv(x, y) for x, y in zip(xs, ys))
    )


# машинки равны, если равны цены
toy_car_eq: Eq[ToyCar] = Eq.by(lambda car: car.price)


# ============ Semigroup ============


@dataclass(frozen=True)
class Semigroup(Generic[T]):
    """Ассоциативная операция combine(a, b)"""

    combine: Callable[[T, T], T]

    @staticmethod
    def instance(fn: Callable[[T, T], T]) -> "Semigroup[T]":
        return Semigroup(fn)


def combine_n(semigroup: Semigroup[T], value: T, n: int) -> T:
    """value |+| value |+| ... (n раз)"""
    if n < 1:
        raise ValueError(f"combine_n needs n >= 1, got {n}")
    return reduce(semigroup.combine, [value] * n)


int_semigroup: Semigroup[int] = Semigroup(lambda a, b: a + b)

expense_semigroup: Semigroup[Expense] = Semigroup.instance(
    lambda e1, e2: Expense(id=max(e1.id, e2.id), amount=e1.amount + e2.amount)
)


def maybe_semigroup(inner: Semigroup[T]) -> Semigroup[Maybe[T]]:
    """Nothing нейтрален; два Some объединяются через inner"""

    def combine(a: Maybe[T], b: Maybe[T]) -> Maybe[T]:
        if a.is_none():
            return b
        if b.is_none():
            return a
        return Maybe.some(inner.combine(a.value, b.value))

    return Semigroup(combine)


# ============ Monoid ============


@dataclass(frozen=True)
class Monoid(Semigroup[T]):
    """Semigroup + нейтральный элемент empty"""

    empty: T = None  # type: ignore[assignment]

    @staticmethod
    def instance(empty: T, fn: Callable[[T, T], T]) -> "Monoid[T]":
        return Monoid(combine=fn, empty=empty)


int_monoid: Monoid[int] = Monoid.instance(0, int_semigroup.combine)
str_monoid: Monoid[str] = Monoid.instance("", lambda a, b: a + b)
list_monoid: Monoid[list] = Monoid.instance([], lambda a, b: list(a) + list(b))
tuple_monoid: Monoid[tuple] = Monoid.instance((), lambda a, b: tuple(a) + tuple(b))


def maybe_monoid(inner: Semigroup[T]) -> Monoid[Maybe[T]]:
    return Monoid.instance(Maybe.nothing(), maybe_semigroup(inner).combine)


def dict_monoid(inner: Semigroup[T]) -> Monoid[Dict[K, T]]:
    """
    Объединение словарей: ключи из обоих,
    значения по совпадающему ключу объединяются через inner
    """

    def combine(a: Dict[K, T], b: Dict[K, T]) -> Dict[K, T]:
        merged = dict(a)
        for key, value in b.items():
            merged[key] = inner.combine(merged[key], value) if key in merged else value
        return merged

    return Monoid.instance({}, combine)


shopping_cart_monoid: Monoid[ShoppingCart] = Monoid.instance(
    ShoppingCart(items=(), total=0.0),
    lambda s1, s2: ShoppingCart(
        items=tuple_monoid.combine(s1.items, s2.items),
        total=s1.total + s2.total,
    ),
)
