"""Tree normalization.

One pass flattens a group nested directly in a group of the same kind,
replaces single-child groups with their child and cancels double negation.
Passes repeat until one makes no change. A pass returns a new tree together
with a flag saying whether anything changed; nodes are never mutated.
"""

from __future__ import annotations

from PlainQuery.core.nodes import Conjunction, Disjunction, Leaf, Negation, Node


def reduce_node(node: Node) -> tuple[Node, bool]:
    """Apply one reduction pass.

    Args:
        node: Tree to reduce.

    Returns:
        The reduced tree and whether the pass changed anything.
    """
    if isinstance(node, Leaf):
        return node, False
    if isinstance(node, Negation):
        return _reduce_negation(node)
    if isinstance(node, (Conjunction, Disjunction)):
        return _reduce_group(node)
    raise TypeError(f"Cannot reduce {type(node).__name__}")


def _reduce_negation(node: Negation) -> tuple[Node, bool]:
    # a run of negations keeps only its parity
    depth = 0
    inner: Node = node
    while isinstance(inner, Negation):
        depth += 1
        inner = inner.child

    reduced, changed = reduce_node(inner)
    if depth % 2 == 0:
        return reduced, True
    return Negation(reduced), changed or depth > 1


def _reduce_group(node: Conjunction | Disjunction) -> tuple[Node, bool]:
    children: list[Node] = []
    changed = False
    for child in node.children:
        if type(child) is type(node):
            changed = True
            children.extend(reduce_node(grandchild)[0] for grandchild in child.children)
        else:
            reduced, child_changed = reduce_node(child)
            changed = changed or child_changed
            children.append(reduced)

    if len(children) == 1:
        return children[0], True
    return type(node)(tuple(children)), changed


def normalize(node: Node) -> Node:
    """Reduce until a pass makes no change."""
    changed = True
    while changed:
        node, changed = reduce_node(node)
    return node
