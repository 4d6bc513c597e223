"""Tests for Lucene serialization and boostable term extraction."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PlainQuery.core.nodes import Conjunction, Disjunction, Leaf, Negation
from PlainQuery.renderers.lucene import boostable_leaves, render_node, render_query

APPLE = Leaf("apple")
BANANA = Leaf("banana")
CHERRY = Leaf("cherry")
QUOTED = Leaf('"killroy was here"')
FIELD = "content"


class TestRenderNode(unittest.TestCase):
    def test_term(self) -> None:
        self.assertEqual(render_node(APPLE, FIELD), "content:apple")

    def test_quoted_term(self) -> None:
        self.assertEqual(render_node(QUOTED, FIELD), 'content:"killroy was here"')

    def test_and(self) -> None:
        node = Conjunction((APPLE, BANANA))
        self.assertEqual(render_node(node, FIELD), "(+content:apple +content:banana)")

    def test_or(self) -> None:
        node = Disjunction((APPLE, BANANA))
        self.assertEqual(render_node(node, FIELD), "(content:apple content:banana)")

    def test_and_not(self) -> None:
        node = Conjunction((APPLE, Negation(BANANA)))
        self.assertEqual(render_node(node, FIELD), "(+content:apple -content:banana)")

    def test_and_not_or(self) -> None:
        node = Conjunction((APPLE, Negation(Disjunction((BANANA, CHERRY)))))
        self.assertEqual(
            render_node(node, FIELD),
            "(+content:apple -(content:banana content:cherry))",
        )

    def test_not(self) -> None:
        self.assertEqual(render_node(Negation(APPLE), FIELD), "-content:apple")

    def test_singleton_group_has_no_markers(self) -> None:
        self.assertEqual(render_node(Conjunction((APPLE,)), FIELD), "content:apple")

    def test_suffix_on_term(self) -> None:
        self.assertEqual(render_node(APPLE, FIELD, "~0.5"), "content:apple~0.5")

    def test_suffix_reaches_every_term(self) -> None:
        node = Conjunction((APPLE, Negation(BANANA)))
        self.assertEqual(
            render_node(node, FIELD, "~0.6"),
            "(+content:apple~0.6 -content:banana~0.6)",
        )


class TestBoostableLeaves(unittest.TestCase):
    def test_term(self) -> None:
        self.assertEqual(boostable_leaves(APPLE), [APPLE])

    def test_term_under_negative_polarity(self) -> None:
        self.assertEqual(boostable_leaves(APPLE, negative=True), [])

    def test_not(self) -> None:
        self.assertEqual(boostable_leaves(Negation(APPLE)), [])

    def test_not_under_negative_polarity(self) -> None:
        self.assertEqual(boostable_leaves(Negation(APPLE), negative=True), [APPLE])

    def test_double_not(self) -> None:
        self.assertEqual(boostable_leaves(Negation(Negation(APPLE))), [APPLE])

    def test_and_with_a_not(self) -> None:
        node = Conjunction((APPLE, BANANA, Negation(CHERRY)))
        self.assertEqual(boostable_leaves(node), [APPLE, BANANA])

    def test_and_with_a_double_negative(self) -> None:
        node = Conjunction((APPLE, Negation(Negation(BANANA)), CHERRY))
        self.assertEqual(boostable_leaves(node), [APPLE, BANANA, CHERRY])


class TestRenderQuery(unittest.TestCase):
    def test_plain(self) -> None:
        self.assertEqual(render_query(APPLE, field=FIELD), "content:apple")

    def test_group_is_made_required(self) -> None:
        node = Disjunction((APPLE, BANANA))
        self.assertEqual(render_query(node, field=FIELD), "+(content:apple content:banana)")

    def test_boost(self) -> None:
        self.assertEqual(
            render_query(APPLE, field=FIELD, boosts={"title": "^10"}),
            "content:apple title:apple^10",
        )

    def test_boost_with_similarity(self) -> None:
        node = Conjunction((APPLE, Negation(BANANA)))
        self.assertEqual(
            render_query(node, field=FIELD, similarity="~0.6", boosts={"title": "^10"}),
            "+(+content:apple~0.6 -content:banana~0.6) title:apple~0.6^10",
        )

    def test_boost_several_terms(self) -> None:
        node = Disjunction((APPLE, BANANA))
        self.assertEqual(
            render_query(node, field=FIELD, boosts={"title": "^10"}),
            "+(content:apple content:banana) (title:apple^10 title:banana^10)",
        )

    def test_boosts_keep_mapping_order(self) -> None:
        self.assertEqual(
            render_query(APPLE, field=FIELD, boosts={"title": "^10", "other": "^20"}),
            "content:apple title:apple^10 other:apple^20",
        )

    def test_fully_negated_query_has_no_boost_clause(self) -> None:
        self.assertEqual(
            render_query(Negation(APPLE), field=FIELD, boosts={"title": "^10"}),
            "-content:apple",
        )


if __name__ == "__main__":
    unittest.main()
