"""Property tests for class-name composition.

Properties verified:
- Output is deterministic and free of duplicate tokens
- First occurrence of a token keeps its position
- Composing an already composed string is a no-op
- Falsy contributions and false conditions contribute nothing
"""

from __future__ import annotations

from hypothesis import given, settings

from vellum import class_names, compose
from vellum.classes import iter_tokens

from .strategies import class_token, contribution, contributions, falsy_contribution


class TestClassNamesExamples:
    """Concrete compositions."""

    def test_documented_example(self) -> None:
        assert class_names("a b", {"c": True, "d": False}, "a") == "a b c"

    def test_no_contributions(self) -> None:
        assert class_names() == ""

    def test_only_falsy(self) -> None:
        assert class_names(None, False, "", {}, [], ()) == ""

    def test_irregular_whitespace(self) -> None:
        assert class_names("  a\tb\n", " c ") == "a b c"

    def test_nested_lists_flatten_depth_first(self) -> None:
        assert class_names(["a", ["b", {"c": True}]], ("d",)) == "a b c d"

    def test_mapping_condition_truthiness(self) -> None:
        assert class_names({"a": 1, "b": 0, "c": "yes", "d": None}) == "a c"

    def test_non_class_values_ignored(self) -> None:
        assert class_names(True, 3, "a") == "a"

    def test_duplicate_keeps_first_position(self) -> None:
        assert class_names("b a", "c b", {"a": True, "d": True}) == "b a c d"


class TestClassNamesProperties:
    """Algebraic properties of compose()."""

    @given(contributions)
    @settings(max_examples=200)
    def test_no_duplicates(self, items) -> None:
        tokens = compose(items).split()
        assert len(tokens) == len(set(tokens))

    @given(contributions)
    @settings(max_examples=200)
    def test_idempotent(self, items) -> None:
        once = compose(items)
        assert compose([once]) == once

    @given(contributions)
    @settings(max_examples=200)
    def test_deterministic(self, items) -> None:
        assert compose(items) == compose(items)

    @given(contributions)
    @settings(max_examples=200)
    def test_first_occurrence_order(self, items) -> None:
        """Output order is the first-seen order of the flattened tokens."""
        expected: list[str] = []
        for item in items:
            for token in iter_tokens(item):
                if token not in expected:
                    expected.append(token)
        assert compose(items).split() == expected

    @given(contributions, falsy_contribution)
    @settings(max_examples=100)
    def test_falsy_contribution_is_neutral(self, items, falsy) -> None:
        assert compose([*items, falsy]) == compose(items)
        assert compose([falsy, *items]) == compose(items)

    @given(contribution, class_token)
    @settings(max_examples=100)
    def test_false_condition_adds_nothing(self, item, token) -> None:
        base = compose([item])
        assert compose([item, {token: False}]) == base

    @given(contributions)
    @settings(max_examples=100)
    def test_no_stray_whitespace(self, items) -> None:
        result = compose(items)
        assert result == result.strip()
        assert "  " not in result
