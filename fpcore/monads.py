# fpcore/monads.py
# Monad как набор операций pure / flat_map / tail_rec_m над контейнером F.
# map, product и итерации выводятся из этих трёх.

from __future__ import annotations
from typing import Callable, Generic, List, Tuple, TypeVar

from .ftypes import Either, Maybe
from .recursion import flat_map_tree, map_tree, unfold_tree
from .tree import Leaf

A = TypeVar("A")


class Monad(Generic[A]):
    """
    Базовый класс экземпляра монады.
    Наследник обязан определить pure, flat_map и tail_rec_m.
    tail_rec_m(a, f): применять f, пока результат внутри F: Left(a'),
    и вернуть F[B], когда получен Right(b). Реализации не используют рекурсию.
    """

    name = "Monad"

    def pure(self, value):
        raise NotImplementedError

    def flat_map(self, fa, fn: Callable):
        raise NotImplementedError

    def tail_rec_m(self, seed, fn: Callable):
        raise NotImplementedError

    # производные операции

    def map(self, fa, fn: Callable):
        return self.flat_map(fa, lambda x: self.pure(fn(x)))

    def flatten(self, ffa):
        return self.flat_map(ffa, lambda fa: fa)

    def product(self, fa, fb):
        """Все пары (a, b): get_pairs из примеров"""
        return self.flat_map(fa, lambda a: self.map(fb, lambda b: (a, b)))

    def iterate_while_m(self, initial, fn: Callable, predicate: Callable[[A], bool]):
        """
        Пока predicate(a) истинен, делает следующий шаг fn(a) внутри F.
        Пример (Maybe): iterate_while_m(0, lambda n: Some(n + 1), lambda n: n < 3)
          -> Some(3)
        """

        def step(a):
            if predicate(a):
                return self.map(fn(a), Either.left)
            return self.pure(Either.right(a))

        return self.tail_rec_m(initial, step)

    def iterate_until_m(self, initial, fn: Callable, predicate: Callable[[A], bool]):
        return self.iterate_while_m(initial, fn, lambda a: not predicate(a))

    def __repr__(self) -> str:
        return f"{self.name}()"


# ============ Экземпляры ============


class MaybeMonad(Monad):
    name = "Maybe"

    def pure(self, value):
        return Maybe.some(value)

    def flat_map(self, fa: Maybe, fn):
        return fa.bind(fn)

    def tail_rec_m(self, seed, fn):
        current = fn(seed)
        while current.is_some() and current.value.is_left:
            current = fn(current.value.value)
        return current.map(lambda either: either.value)


class EitherMonad(Monad):
    """Правосторонний Either: Left прерывает цепочку"""

    name = "Either"

    def pure(self, value):
        return Either.right(value)

    def flat_map(self, fa: Either, fn):
        return fa.bind(fn)

    def tail_rec_m(self, seed, fn):
        current = fn(seed)
        while current.is_right and current.value.is_left:
            current = fn(current.value.value)
        return current.map(lambda either: either.value)


class IdentityMonad(Monad):
    """F[A] = A: значение без обёртки"""

    name = "Identity"

    def pure(self, value):
        return value

    def flat_map(self, fa, fn):
        return fn(fa)

    def tail_rec_m(self, seed, fn):
        current = fn(seed)
        while current.is_left:
            current = fn(current.value)
        return current.value


class ListMonad(Monad):
    name = "List"

    def pure(self, value):
        return [value]

    def flat_map(self, fa: list, fn):
        return [b for a in fa for b in fn(a)]

    def tail_rec_m(self, seed, fn):
        # стек итераторов вместо рекурсии; порядок результатов как у flat_map
        results: List = []
        stack = [iter(fn(seed))]
        while stack:
            item = next(stack[-1], None)
            if item is None:
                stack.pop()
            elif item.is_left:
                stack.append(iter(fn(item.value)))
            else:
                results.append(item.value)
        return results


class TreeMonad(Monad):
    """
    Монада бинарного дерева: pure -> Leaf,
    flat_map заменяет листья поддеревьями, а tail_rec_m выполняет стекобезопасное
    разворачивание (см. recursion.unfold_tree)
    """

    name = "Tree"

    def pure(self, value):
        return Leaf(value)

    def flat_map(self, fa, fn):
        return flat_map_tree(fa, fn)

    def map(self, fa, fn):
        return map_tree(fa, fn)

    def tail_rec_m(self, seed, fn):
        return unfold_tree(seed, fn)


maybe_monad = MaybeMonad()
either_monad = EitherMonad()
identity_monad = IdentityMonad()
list_monad = ListMonad()
tree_monad = TreeMonad()


# ============ Обобщённые функции ============


def do10x(functor: Monad, container):
    """Умножает на 10 всё внутри контейнера любого экземпляра"""
    return functor.map(container, lambda x: x * 10)


def get_pairs(monad: Monad, fa, fb):
    return monad.product(fa, fb)


def sequence(monad: Monad, values: Tuple):
    """Tuple[F[A]] -> F[Tuple[A]]: собирает значения, пока монада не прервёт"""
    result = monad.pure(())
    for fa in values:
        result = monad.flat_map(
            result, lambda acc, fa=fa: monad.map(fa, lambda a: acc + (a,))
        )
    return result
