from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Leaf:
    """A searchable term or quoted phrase."""

    text: str


@dataclass(frozen=True, slots=True)
class Negation:
    """Logical NOT of exactly one child."""

    child: Node


@dataclass(frozen=True, slots=True)
class Conjunction:
    """Logical AND over the children, in query order."""

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Disjunction:
    """Logical OR over the children, in query order."""

    children: tuple[Node, ...]


Node = Union[Leaf, Negation, Conjunction, Disjunction]
Group = Union[Conjunction, Disjunction]


def describe(node: object) -> str:
    """Render a node in a compact debugging form.

    `apple not banana` becomes `<AND term:apple <NOT term:banana>>`.
    """
    if isinstance(node, Leaf):
        return f"term:{node.text}"
    if isinstance(node, Negation):
        depth = 0
        while isinstance(node, Negation):
            depth += 1
            node = node.child
        return "<NOT " * depth + describe(node) + ">" * depth
    if isinstance(node, Conjunction):
        return _describe_group("AND", node.children)
    if isinstance(node, Disjunction):
        return _describe_group("OR", node.children)
    if isinstance(node, list):
        return "[" + " ".join(describe(item) for item in node) + "]"
    return str(node)


def _describe_group(label: str, children: tuple[Node, ...]) -> str:
    return f"<{label} " + " ".join(describe(child) for child in children) + ">"
