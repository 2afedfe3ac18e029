import logging
from typing import Callable, Dict, List, TypeVar

from .ftypes import Either
from .tree import Branch, Leaf, Tree, is_tree

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")

Step = Callable[[A], Tree]  # A -> Tree[Either[A, B]]


# ============ Проверка результата шага ============


def _checked(node):
    """Шаг обязан вернуть дерево, а лист такого дерева: Either"""
    if not is_tree(node):
        raise TypeError(f"step must return a Leaf or Branch, got {node!r}")
    if isinstance(node, Leaf) and not isinstance(node.value, Either):
        raise TypeError(f"leaf payload must be an Either, got {node.value!r}")
    return node


# ============ Разворачивание дерева без рекурсии (tailRecM) ============


def unfold_tree(seed: A, step: Step) -> Tree:
    """
    Разворачивает дерево, начиная с seed:
      step(a) -> дерево, листья которого Left(a') (развернуть ещё раз)
      или Right(b) (готовый результат).

    Вместо рекурсии используются три явные структуры:
      todo    : стек узлов на обработку (вершина в конце списка)
      expanded: ветви, которые уже разбиты на детей (по id узла)
      done    : стек готовых поддеревьев; в конце в нём ровно одно дерево

    Ветвь остаётся в todo под своими детьми; второй визит к ней означает,
    что оба ребёнка уже лежат на вершине done.

    Пример:
      unfold_tree(5, lambda v: Leaf(Either.left(v - 1)) if v > 0
                               else Leaf(Either.right(0)))
      -> Leaf(0)
    """
    todo: List[Tree] = [_checked(step(seed))]
    # id -> узел: ссылка держит узел живым, пока id занят
    expanded: Dict[int, Branch] = {}
    done: List[Tree] = []
    iterations = 0

    while todo:
        iterations += 1
        node = todo[-1]

        if isinstance(node, Leaf):
            payload = node.value
            if payload.is_left:
                # перезапускаем шаг на месте вершины
                todo[-1] = _checked(step(payload.value))
            else:
                todo.pop()
                done.append(Leaf(payload.value))

        elif id(node) not in expanded:
            expanded[id(node)] = node
            todo.append(_checked(node.right))
            todo.append(_checked(node.left))

        else:
            todo.pop()
            del expanded[id(node)]
            # левый ребёнок обработан первым, поэтому лежит глубже
            resolved_right = done.pop()
            resolved_left = done.pop()
            done.append(Branch(resolved_left, resolved_right))

    logger.debug(
        "unfold_tree: %d iterations, %d result(s) on done stack",
        iterations,
        len(done),
    )
    return done[0]


def unfold_tree_recursive(seed: A, step: Step) -> Tree:
    """
    Наивная рекурсивная версия того же разворачивания.
    Глубина рекурсии равна глубине дерева: на глубоких деревьях RecursionError.
    """

    def resolve(node: Tree) -> Tree:
        node = _checked(node)
        if isinstance(node, Branch):
            return Branch(resolve(node.left), resolve(node.right))
        payload = node.value
        if payload.is_left:
            return resolve(step(payload.value))
        return Leaf(payload.value)

    return resolve(step(seed))


# ============ flatMap / map через разворачивание ============


def flat_map_tree(tree: Tree, fn: Callable[[A], Tree]) -> Tree:
    """
    Заменяет каждый лист Leaf(a) деревом fn(a).

    Пример:
      flat_map_tree(Branch(Leaf(10), Leaf(20)),
                    lambda v: Branch(Leaf(v - 1), Leaf(v + 1)))
      -> Branch(Branch(Leaf(9), Leaf(11)), Branch(Leaf(19), Leaf(21)))

    Состояние шага: пара (поддерево, уже_результат_fn). Исходное дерево и
    деревья fn(a) разбираются по одному узлу за шаг, так что глубина любого
    из них не влияет на стек вызовов.
    """

    def step(state):
        node, produced = state
        if isinstance(node, Branch):
            return Branch(
                Leaf(Either.left((node.left, produced))),
                Leaf(Either.left((node.right, produced))),
            )
        if produced:
            return Leaf(Either.right(node.value))
        replacement = fn(node.value)
        if not is_tree(replacement):
            raise TypeError(f"flat_map function must return a tree, got {replacement!r}")
        return Leaf(Either.left((replacement, True)))

    return unfold_tree((tree, False), step)


def map_tree(tree: Tree, fn: Callable[[A], B]) -> Tree:
    """Сохраняет форму дерева, применяя fn к каждому листу"""
    return flat_map_tree(tree, lambda value: Leaf(fn(value)))
