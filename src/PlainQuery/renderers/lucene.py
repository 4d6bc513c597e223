"""Lucene / Solr query serializer.

Renders a normalized query tree into Lucene query syntax, where `+` marks a
required clause, `-` a prohibited one and a bare clause an optional one.

    apple and banana          -> +(+content:apple +content:banana)
    apple not banana or fig   -> +((+content:apple -content:banana) content:fig)

Extra fields get one additional clause each, holding only the terms that are
not negated, so documents that also match those fields score higher:

    apple not banana, title=^10 -> +(+content:apple -content:banana) title:apple^10
"""

from __future__ import annotations

from typing import Mapping

from PlainQuery.core.nodes import Conjunction, Disjunction, Leaf, Negation, Node


def render_node(node: Node, field: str, suffix: str | None = None) -> str:
    """Render a tree for one field.

    Args:
        node: Query tree.
        field: Field name prefixed to every term.
        suffix: Optional text appended to every term, such as `~0.6`.

    Returns:
        Lucene query text.
    """
    if isinstance(node, Leaf):
        return f"{field}:{node.text}{suffix or ''}"
    if isinstance(node, Negation):
        return "-" + render_node(node.child, field, suffix)
    if isinstance(node, (Conjunction, Disjunction)):
        required = isinstance(node, Conjunction)
        parts = []
        for child in node.children:
            prefix = "+" if required and not isinstance(child, Negation) else ""
            parts.append(prefix + render_node(child, field, suffix))
        if len(parts) == 1:
            return parts[0]
        return "(" + " ".join(parts) + ")"
    raise TypeError(f"Cannot render {type(node).__name__}")


def boostable_leaves(node: Node, negative: bool = False) -> list[Leaf]:
    """Collect the terms that sit under an even number of negations.

    In `tom and dick and not harry` only `tom` and `dick` are boostable.
    """
    if isinstance(node, Leaf):
        return [] if negative else [node]
    if isinstance(node, Negation):
        return boostable_leaves(node.child, not negative)
    if isinstance(node, (Conjunction, Disjunction)):
        leaves: list[Leaf] = []
        for child in node.children:
            leaves.extend(boostable_leaves(child, negative))
        return leaves
    raise TypeError(f"Cannot collect terms from {type(node).__name__}")


def render_query(
    tree: Node,
    *,
    field: str,
    similarity: str | None = None,
    boosts: Mapping[str, str] | None = None,
) -> str:
    """Render the full query: the primary clause plus one clause per boost.

    Boost clauses repeat only the terms under an even number of negations.
    When every term is negated, as in `not apple`, there is nothing to boost
    and the boost clauses are left out, so the result is the primary clause
    alone.

    Args:
        tree: Normalized query tree.
        field: Primary field name.
        similarity: Optional similarity suffix applied to every term.
        boosts: Extra field name to boost suffix, rendered in mapping order.

    Returns:
        Lucene query text.
    """
    primary = render_node(tree, field, similarity)
    if primary.startswith("("):
        primary = "+" + primary
    clauses = [primary]

    if boosts:
        boostable = Disjunction(tuple(boostable_leaves(tree)))
        # a fully negated query has nothing to boost
        if boostable.children:
            for boost_field, boost in boosts.items():
                suffix = (similarity or "") + (boost or "")
                clauses.append(render_node(boostable, boost_field, suffix))

    return " ".join(clauses)
