from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, List, Tuple, TypeVar, Union

T = TypeVar("T")


# ============ Бинарное дерево ============


@dataclass(frozen=True, eq=False)
class Leaf(Generic[T]):
    value: T

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Leaf, Branch)):
            return NotImplemented
        return tree_equals(self, other)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class Branch(Generic[T]):
    left: "Tree[T]"
    right: "Tree[T]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Leaf, Branch)):
            return NotImplemented
        return tree_equals(self, other)

    __hash__ = None  # type: ignore[assignment]


Tree = Union[Leaf[T], Branch[T]]


# "умные" конструкторы: возвращают Tree, а не конкретный вариант


def leaf(value: T) -> Tree[T]:
    return Leaf(value)


def branch(left: Tree[T], right: Tree[T]) -> Tree[T]:
    return Branch(left, right)


def is_tree(value: object) -> bool:
    return isinstance(value, (Leaf, Branch))


# ============ Сравнение без рекурсии ============


def tree_equals(a: Tree, b: Tree) -> bool:
    """
    Структурное равенство двух деревьев.
    Обход через явный стек пар, поэтому работает и для очень глубоких деревьев,
    где сравнение сгенерированным dataclass __eq__ упало бы с RecursionError.
    """
    stack: List[Tuple[Tree, Tree]] = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is y:
            continue
        if isinstance(x, Leaf) and isinstance(y, Leaf):
            if x.value != y.value:
                return False
        elif isinstance(x, Branch) and isinstance(y, Branch):
            stack.append((x.right, y.right))
            stack.append((x.left, y.left))
        else:
            return False
    return True
