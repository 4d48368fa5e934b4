"""
Tests for path navigation helpers.
"""

from design_token_preprocessor.utils import MISSING, navigate_to_path, resolve_inherited_type

DOCUMENT = {
    "$type": "root-type",
    "colors": {
        "$type": "color",
        "brand": {
            "blue": {"$value": "#0066cc"},
            "typed": {"$type": "special", "inner": {"$value": 1}},
        },
        "nothing": None,
    },
    "easing": {"$value": [0.25, 0.1, 0.25, 1]},
}


class TestNavigateToPath:
    def test_empty_path_is_root(self):
        assert navigate_to_path(DOCUMENT, []) is DOCUMENT

    def test_walks_nested_keys(self):
        assert navigate_to_path(DOCUMENT, ["colors", "brand", "blue", "$value"]) == "#0066cc"

    def test_missing_key(self):
        assert navigate_to_path(DOCUMENT, ["colors", "red"]) is MISSING
        assert navigate_to_path(DOCUMENT, ["colors", "red", "deeper"]) is MISSING

    def test_null_is_a_value_not_missing(self):
        assert navigate_to_path(DOCUMENT, ["colors", "nothing"]) is None
        assert navigate_to_path(DOCUMENT, ["colors", "nothing", "x"]) is MISSING

    def test_primitive_intermediate(self):
        assert navigate_to_path(DOCUMENT, ["colors", "brand", "blue", "$value", "length"]) is MISSING

    def test_list_indices(self):
        assert navigate_to_path(DOCUMENT, ["easing", "$value", "0"]) == 0.25
        assert navigate_to_path(DOCUMENT, ["easing", "$value", "3"]) == 1

    def test_invalid_list_indices(self):
        for segment in ["4", "-1", "01", "x", ""]:
            assert navigate_to_path(DOCUMENT, ["easing", "$value", segment]) is MISSING

    def test_missing_is_falsy(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"


class TestResolveInheritedType:
    def test_nearest_ancestor_wins(self):
        assert resolve_inherited_type(DOCUMENT, ["colors", "brand", "blue"]) == "color"
        assert resolve_inherited_type(DOCUMENT, ["colors", "brand", "typed", "inner"]) == "special"

    def test_node_itself_is_not_inspected(self):
        # "typed" declares a $type but only its ancestors count
        assert resolve_inherited_type(DOCUMENT, ["colors", "brand", "typed"]) == "color"

    def test_root_type_is_the_last_resort(self):
        assert resolve_inherited_type(DOCUMENT, ["easing"]) == "root-type"

    def test_no_type_anywhere(self):
        assert resolve_inherited_type({"a": {"b": {"$value": 1}}}, ["a", "b"]) is None
        assert resolve_inherited_type({}, []) is None
