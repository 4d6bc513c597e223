"""Tests for tree building and operator binding."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PlainQuery.core.errors import MalformedQuery
from PlainQuery.core.nodes import Conjunction, Disjunction, Leaf, Negation, describe
from PlainQuery.core.tokens import Token, expand_parens, tokenize
from PlainQuery.parser.tree import bind, bind_negations, bind_operators, build_tree
from PlainQuery.parser.validate import insert_implicit_and

APPLE = Leaf("apple")
BANANA = Leaf("banana")
CHERRY = Leaf("cherry")
FIG = Leaf("fig")
AND = Token.from_text("and")
OR = Token.from_text("or")
NOT = Token.from_text("not")


def _tree(text: str):
    return build_tree(insert_implicit_and(expand_parens(tokenize(text))))


class TestBuildTree(unittest.TestCase):
    def test_flat(self) -> None:
        self.assertEqual(_tree("apple or banana"), [APPLE, OR, BANANA])

    def test_nested_group(self) -> None:
        self.assertEqual(
            _tree("apple and (banana or cherry)"),
            [APPLE, AND, [BANANA, OR, CHERRY]],
        )

    def test_single_element_groups_collapse(self) -> None:
        self.assertEqual(_tree("((apple))"), [APPLE])

    def test_top_level_is_always_a_list(self) -> None:
        self.assertEqual(_tree("(apple banana)"), [[APPLE, AND, BANANA]])


class TestBindNegations(unittest.TestCase):
    def test_single(self) -> None:
        self.assertEqual(bind_negations([NOT, APPLE]), [Negation(APPLE)])

    def test_chained(self) -> None:
        self.assertEqual(
            bind_negations([NOT, NOT, NOT, APPLE]),
            [Negation(Negation(Negation(APPLE)))],
        )

    def test_inside_group(self) -> None:
        self.assertEqual(
            bind_negations([APPLE, AND, [NOT, BANANA]]),
            [APPLE, AND, [Negation(BANANA)]],
        )

    def test_negates_group(self) -> None:
        self.assertEqual(
            bind_negations([NOT, [APPLE, OR, BANANA]]),
            [Negation([APPLE, OR, BANANA])],
        )

    def test_nothing_to_negate(self) -> None:
        with self.assertRaises(MalformedQuery):
            bind_negations([APPLE, AND, NOT])


class TestBindOperators(unittest.TestCase):
    def test_chain_is_flat(self) -> None:
        self.assertEqual(
            bind_operators([APPLE, AND, BANANA, AND, CHERRY], "and"),
            [Conjunction((APPLE, BANANA, CHERRY))],
        )

    def test_other_operator_left_alone(self) -> None:
        self.assertEqual(
            bind_operators([APPLE, OR, BANANA, AND, CHERRY], "and"),
            [APPLE, OR, Conjunction((BANANA, CHERRY))],
        )

    def test_missing_left_operand(self) -> None:
        with self.assertRaises(MalformedQuery):
            bind_operators([OR, APPLE], "or")


class TestBind(unittest.TestCase):
    def test_and_binds_tighter_than_or(self) -> None:
        node = bind(_tree("apple and banana or cherry and fig"))
        self.assertEqual(
            node,
            Disjunction((Conjunction((APPLE, BANANA)), Conjunction((CHERRY, FIG)))),
        )

    def test_negated_group(self) -> None:
        node = bind(_tree("apple not (banana or cherry)"))
        self.assertEqual(
            node,
            Conjunction((APPLE, Negation(Disjunction((BANANA, CHERRY))))),
        )

    def test_or_group_inside_and(self) -> None:
        node = bind(_tree("(apple or banana) and (cherry or fig)"))
        self.assertEqual(
            node,
            Conjunction((Disjunction((APPLE, BANANA)), Disjunction((CHERRY, FIG)))),
        )

    def test_leading_operator(self) -> None:
        with self.assertRaises(MalformedQuery):
            bind(_tree("or apple"))

    def test_long_negation_run_over_group(self) -> None:
        node = bind(_tree("not " * 2001 + "(apple or banana)"))
        depth = 0
        while isinstance(node, Negation):
            depth += 1
            node = node.child
        self.assertEqual(depth, 2001)
        self.assertEqual(node, Disjunction((APPLE, BANANA)))

    def test_describe(self) -> None:
        node = bind(_tree("apple not banana"))
        self.assertEqual(describe(node), "<AND term:apple <NOT term:banana>>")

    def test_describe_long_negation_run(self) -> None:
        node = APPLE
        for _ in range(3000):
            node = Negation(node)
        self.assertEqual(describe(node), "<NOT " * 3000 + "term:apple" + ">" * 3000)


if __name__ == "__main__":
    unittest.main()
