"""Tests for the layout document structural guard."""
import unittest

from layout_interchange.parser.validator import (
    LayoutValidationError,
    describe_problem,
    is_valid_layout,
    require_valid_layout,
)


class ValidatorTest(unittest.TestCase):
    """Only the root shape is checked."""

    def test_accepts_layout_with_children(self) -> None:
        self.assertTrue(is_valid_layout({"type": "layout", "children": []}))
        self.assertTrue(is_valid_layout({"type": "layout", "children": [{"type": "section"}]}))

    def test_descendants_are_not_inspected(self) -> None:
        self.assertTrue(is_valid_layout({"type": "layout", "children": [42, "junk", None]}))

    def test_rejects_wrong_root_type(self) -> None:
        self.assertFalse(is_valid_layout({"type": "document", "children": []}))

    def test_rejects_non_objects(self) -> None:
        for value in (None, [], ["layout"], "layout", 3, True):
            with self.subTest(value=value):
                self.assertFalse(is_valid_layout(value))

    def test_rejects_missing_or_non_array_children(self) -> None:
        self.assertFalse(is_valid_layout({"type": "layout"}))
        self.assertFalse(is_valid_layout({"type": "layout", "children": None}))
        self.assertFalse(is_valid_layout({"type": "layout", "children": {}}))

    def test_require_raises_with_reason(self) -> None:
        with self.assertRaises(LayoutValidationError) as ctx:
            require_valid_layout({"type": "document", "children": []})
        self.assertIn("'document'", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_describe_problem_names_failed_check(self) -> None:
        self.assertIsNone(describe_problem({"type": "layout", "children": []}))
        self.assertIn("JSON object", describe_problem([]) or "")
        self.assertIn("children", describe_problem({"type": "layout"}) or "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
