"""
Tests for $extends group inheritance.
"""

import unittest

from conftest import read_fixture

from design_token_preprocessor.errors import CircularReferenceError, InvalidExtendsError, UnresolvedReferenceError
from design_token_preprocessor.reference_resolver import deep_merge, resolve_references


class TestDeepMerge(unittest.TestCase):
    def test_merge_overrides_and_recurses(self):
        base = {"a": 1, "b": {"x": 1}}
        derived = {"$extends": "{base}", "b": {"y": 2}, "c": 3}

        self.assertEqual(deep_merge(base, derived), {"a": 1, "b": {"x": 1, "y": 2}, "c": 3})

    def test_metadata_overrides(self):
        merged = deep_merge({"$type": "color", "$extensions": {"a": 1}}, {"$extensions": {"b": 2}})

        self.assertEqual(merged, {"$type": "color", "$extensions": {"b": 2}})

    def test_tokens_replace_wholesale(self):
        merged = deep_merge(
            {"bg": {"$type": "color", "$value": "#fff", "$description": "old"}},
            {"bg": {"$value": "#000"}},
        )

        self.assertEqual(merged, {"bg": {"$value": "#000"}})

    def test_group_replaced_by_token(self):
        merged = deep_merge({"bg": {"light": {"$value": "#fff"}}}, {"bg": {"$value": "#000"}})

        self.assertEqual(merged, {"bg": {"$value": "#000"}})

    def test_inputs_are_not_modified(self):
        base = {"b": {"x": 1}}
        derived = {"b": {"y": 2}}

        deep_merge(base, derived)

        self.assertEqual(base, {"b": {"x": 1}})
        self.assertEqual(derived, {"b": {"y": 2}})


class TestExtendsResolution(unittest.TestCase):
    def test_extends_merges_base_group(self):
        output = resolve_references(read_fixture("format/valid/group", "extends-basic.json"))

        self.assertEqual(
            output["button-primary"],
            {
                "$type": "color",
                "$description": "Primary button colors",
                "background": {"$value": "#0066cc"},
                "border": {
                    "default": {"$value": "#cccccc"},
                    "focus": {"$value": "#003366"},
                },
                "text": {"$value": "#ffffff"},
            },
        )
        # The base group is untouched
        self.assertNotIn("text", output["button"])

    def test_chained_extends(self):
        output = resolve_references(read_fixture("format/valid/group", "extends-chained.json"))

        self.assertEqual(set(output["large"]), {"$type", "small", "medium", "large"})
        self.assertEqual(output["large"]["$type"], "dimension")
        self.assertNotIn("$extends", output["medium"])
        self.assertNotIn("$extends", output["large"])

    def test_inherited_tokens_are_resolved(self):
        document = {
            "palette": {"$type": "color", "blue": {"$value": "#00f"}},
            "base": {"accent": {"$value": "{palette.blue}"}},
            "derived": {"$extends": "{base}"},
        }

        output = resolve_references(document)

        self.assertEqual(output["derived"]["accent"], {"$value": "#00f", "$type": "color"})

    def test_siblings_may_extend_the_same_group(self):
        document = {
            "base": {"$type": "number", "one": {"$value": 1}},
            "left": {"$extends": "{base}"},
            "right": {"$extends": "{base}", "nested": {"$extends": "{left}"}},
        }

        output = resolve_references(document)

        self.assertEqual(output["left"], output["base"])
        self.assertEqual(output["right"]["nested"], output["base"])

    def test_circular_extends(self):
        with self.assertRaises(CircularReferenceError) as ctx:
            resolve_references(read_fixture("format/invalid/group", "circular-extends.json"))

        self.assertIn("Circular $extends reference detected at path: a", str(ctx.exception))
        self.assertEqual(ctx.exception.chain, ("a", "b", "a"))

    def test_self_extends(self):
        with self.assertRaises(CircularReferenceError):
            resolve_references({"a": {"$extends": "{a}"}})

    def test_extending_own_ancestor(self):
        with self.assertRaises(CircularReferenceError):
            resolve_references({"a": {"inner": {"$extends": "{a}"}}})

    def test_extends_nonexistent(self):
        with self.assertRaisesRegex(UnresolvedReferenceError, "could not be resolved at path: derived"):
            resolve_references(read_fixture("format/invalid/group", "extends-nonexistent.json"))

    def test_extends_token(self):
        with self.assertRaisesRegex(InvalidExtendsError, "points to a token, not a group"):
            resolve_references(read_fixture("format/invalid/group", "extends-token.json"))

    def test_extends_invalid_format(self):
        with self.assertRaisesRegex(InvalidExtendsError, "Invalid \\$extends reference format: base"):
            resolve_references(read_fixture("format/invalid/group", "extends-invalid-format.json"))


if __name__ == "__main__":
    unittest.main()
