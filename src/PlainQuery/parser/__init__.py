"""Query parsing pipeline.

Turns plain-English query text into a normalized query tree. Serializing
the tree for a search engine lives in `PlainQuery.renderers`.
"""

from __future__ import annotations

import logging

from PlainQuery.core.nodes import Node, describe
from PlainQuery.core.tokens import expand_parens, tokenize
from PlainQuery.parser.reduce import normalize, reduce_node
from PlainQuery.parser.tree import bind, bind_negations, bind_operators, build_tree
from PlainQuery.parser.validate import check_braces, check_content, insert_implicit_and
from PlainQuery.utils.log import log


def parse_query(text: str) -> Node:
    """Parse query text into a normalized tree.

    Args:
        text: Plain-English query such as `apple not banana or cherry`.

    Returns:
        The normalized query tree.

    Raises:
        EmptyQuery: If no searchable term remains.
        UnbalancedBraces: If the parentheses do not pair up.
        MalformedQuery: If an operator is missing an operand.
    """
    tokens = expand_parens(tokenize(text))
    debug = log.isEnabledFor(logging.DEBUG)
    if debug:
        log.debug("Tokens: %s", " ".join(str(token) for token in tokens))

    check_braces(tokens)
    check_content(tokens)
    tokens = insert_implicit_and(tokens)

    tree = bind(build_tree(tokens))
    if debug:
        log.debug("Bound tree: %s", describe(tree))

    tree = normalize(tree)
    if debug:
        log.debug("Normalized tree: %s", describe(tree))
    return tree


__all__ = [
    "bind",
    "bind_negations",
    "bind_operators",
    "build_tree",
    "check_braces",
    "check_content",
    "insert_implicit_and",
    "normalize",
    "parse_query",
    "reduce_node",
]
