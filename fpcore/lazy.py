from typing import Iterator, List, Tuple
from .tree import Branch, Leaf, Tree


## ленивый обход листьев слева направо, без рекурсии
def iter_leaves(tree: Tree) -> Iterator:
    stack: List[Tree] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Branch):
            # правый кладём первым, чтобы левый вышел раньше
            stack.append(node.right)
            stack.append(node.left)
        else:
            yield node.value


## ленивый обход всех узлов в прямом порядке вместе с глубиной
def iter_nodes(tree: Tree) -> Iterator[Tuple[Tree, int]]:
    stack: List[Tuple[Tree, int]] = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if isinstance(node, Branch):
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))


def tree_stats(tree: Tree) -> dict:
    """Сводка по дереву за один проход: узлы, листья, ветви, глубина"""
    nodes = leaves = depth = 0
    for node, node_depth in iter_nodes(tree):
        nodes += 1
        if isinstance(node, Leaf):
            leaves += 1
        depth = max(depth, node_depth)

    return {
        "nodes": nodes,
        "leaves": leaves,
        "branches": nodes - leaves,
        "depth": depth,
    }


def render_tree(tree: Tree, indent: str = "  ") -> Iterator[str]:
    """Построчное текстовое представление (для UI), тоже без рекурсии"""
    for node, depth in iter_nodes(tree):
        label = f"Leaf({node.value!r})" if isinstance(node, Leaf) else "Branch"
        yield f"{indent * depth}{label}"
