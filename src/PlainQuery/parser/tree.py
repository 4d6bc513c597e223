"""Tree construction and operator binding.

The token stream is first nested on its parentheses, then operators are folded
into nodes: `not` binds to the operand on its right, `and` groups are built
next and `or` last, so `and` binds tighter than `or`.

Until both binary passes have run, a level may still hold lists (groups whose
operators are not yet bound) and operator tokens next to nodes.
"""

from __future__ import annotations

from typing import Sequence, Union

from PlainQuery.core.errors import MalformedQuery
from PlainQuery.core.nodes import Conjunction, Disjunction, Group, Leaf, Negation, Node
from PlainQuery.core.tokens import Token, TokenKind

Item = Union[Node, Token, list]

_GROUP_TYPES: dict[str, type[Conjunction] | type[Disjunction]] = {
    "and": Conjunction,
    "or": Disjunction,
}


def build_tree(tokens: Sequence[Token]) -> list[Item]:
    """Nest a flat token stream on its parentheses.

    Terms become `Leaf` nodes, operators stay tokens. An empty group adds
    nothing, a group with one element adds that element, a larger group
    adds a nested list.

    Args:
        tokens: Token stream with balanced parentheses.

    Returns:
        The top level of the tree.
    """
    level, _ = _build_level(tokens, 0)
    return level


def _build_level(tokens: Sequence[Token], start: int) -> tuple[list[Item], int]:
    level: list[Item] = []
    pos = start
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        if token.kind is TokenKind.OPEN:
            group, pos = _build_level(tokens, pos)
            if len(group) == 1:
                level.append(group[0])
            elif group:
                level.append(group)
        elif token.kind is TokenKind.CLOSE:
            return level, pos
        elif token.kind is TokenKind.TERM:
            level.append(Leaf(token.text))
        else:
            level.append(token)
    return level, pos


def bind_negations(items: Sequence[Item]) -> list[Item]:
    """Wrap the operand to the right of each `not` in a `Negation`.

    Scanning right to left lets `not not not apple` stack onto one operand.

    Raises:
        MalformedQuery: If a `not` has no operand to its right.
    """
    bound: list[Item] = []
    for item in reversed(items):
        if isinstance(item, list):
            item = bind_negations(item)
        if isinstance(item, Token) and item.is_op("not"):
            if not bound:
                raise MalformedQuery("'not' has nothing to negate")
            bound.append(Negation(bound.pop()))
        else:
            bound.append(item)
    bound.reverse()
    return bound


def bind_operators(items: Sequence[Item], operator: str) -> list[Item]:
    """Fold one binary operator into group nodes, left to right.

    `a and b and c` becomes a single three-child `Conjunction`. Nested lists
    and the children of existing nodes are bound first.

    Args:
        items: One level of the tree.
        operator: `and` or `or`.

    Returns:
        The level with every matching operator folded away.

    Raises:
        MalformedQuery: If an operator has no left operand.
    """
    group_type = _GROUP_TYPES[operator]
    bound: list[Item] = []
    pending: list[Item] | None = None
    chained: Group | None = None

    for item in items:
        item = _bind_nested(item, operator)
        if pending is not None:
            pending.append(item)
            chained = group_type(tuple(pending))
            bound.append(chained)
            pending = None
        elif isinstance(item, Token) and item.is_op(operator):
            if not bound:
                raise MalformedQuery(f"'{operator}' has no left operand")
            left = bound.pop()
            pending = list(left.children) if left is chained else [left]
        else:
            bound.append(item)
            chained = None

    if pending is not None:
        raise MalformedQuery(f"'{operator}' has no right operand")
    return bound


def _bind_nested(item: Item, operator: str) -> Item:
    # negation runs can be arbitrarily long
    depth = 0
    while isinstance(item, Negation):
        depth += 1
        item = item.child

    if isinstance(item, list):
        inner = bind_operators(item, operator)
        item = inner[0] if len(inner) == 1 else inner
    elif isinstance(item, (Conjunction, Disjunction)):
        item = type(item)(tuple(bind_operators(item.children, operator)))

    for _ in range(depth):
        item = Negation(item)
    return item


def bind(items: Sequence[Item]) -> Node:
    """Run every binding pass and return the single resulting node.

    Raises:
        MalformedQuery: If the level does not fold down to one node.
    """
    bound = bind_operators(bind_operators(bind_negations(items), "and"), "or")
    if len(bound) != 1 or not isinstance(bound[0], (Leaf, Negation, Conjunction, Disjunction)):
        raise MalformedQuery("Query does not reduce to a single expression")
    return bound[0]
