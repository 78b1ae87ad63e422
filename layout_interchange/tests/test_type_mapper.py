"""Tests for the foreign to native type table."""
import unittest

from layout_interchange.model.mapping_tables import FOREIGN_TO_NATIVE_TYPE, NATIVE_TYPES, invert
from layout_interchange.parser.type_mapper import is_wrapper_type, map_element_type


class TypeMapperTest(unittest.TestCase):
    """Lookups are total and land in the native vocabulary."""

    def test_known_types(self) -> None:
        self.assertEqual(map_element_type("headline"), "heading")
        self.assertEqual(map_element_type("icon"), "text")
        self.assertEqual(map_element_type("totop"), "button")
        self.assertEqual(map_element_type("video"), "video")
        self.assertEqual(map_element_type("gallery"), "container")

    def test_unknown_types_fall_back_to_container(self) -> None:
        for foreign in ("", "future_widget", "Headline", "layout"):
            with self.subTest(foreign=foreign):
                self.assertEqual(map_element_type(foreign), "container")

    def test_every_mapping_targets_native_vocabulary(self) -> None:
        self.assertTrue(set(FOREIGN_TO_NATIVE_TYPE.values()) <= NATIVE_TYPES)

    def test_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            FOREIGN_TO_NATIVE_TYPE["headline"] = "text"  # type: ignore[index]

    def test_wrapper_types(self) -> None:
        for wrapper in ("layout", "section", "row", "column"):
            self.assertTrue(is_wrapper_type(wrapper))
        self.assertFalse(is_wrapper_type("grid"))

    def test_invert_keeps_first_key(self) -> None:
        inverted = invert({"a": "1", "b": "1", "c": "2"})
        self.assertEqual(dict(inverted), {"1": "a", "2": "c"})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
