"""
Configuration normalizer tests - canonical shapes, no mutation.
"""

from pathlib import Path

import pytest

from geobind.factory.normalizer import discriminator, normalize


class TestNormalize:

    def test_none_becomes_empty_mapping(self):
        assert normalize(None) == {}

    def test_string_is_name_shorthand(self):
        assert normalize("circle") == {"name": "circle"}

    def test_list_is_fields_shorthand(self):
        fields = [{"name": "a", "type": "String"}]
        assert normalize(fields) == {"fields": fields}

    def test_tuple_is_fields_shorthand(self):
        fields = ({"name": "a", "type": "String"},)
        assert normalize(fields) == {"fields": list(fields)}

    def test_mapping_is_copied(self):
        original = {"type": "Fill", "color": "#ff0000"}
        canonical = normalize(original)
        assert canonical == original
        assert canonical is not original

    def test_caller_value_not_mutated(self):
        original = {"type": "Fill"}
        normalize(original)["color"] = "#000000"
        assert original == {"type": "Fill"}

    def test_list_copied(self):
        fields = [{"name": "a", "type": "String"}]
        normalize(fields)["fields"].append({"name": "b", "type": "String"})
        assert len(fields) == 1

    @pytest.mark.parametrize("value", [6, 0.5, True])
    def test_other_primitives_wrapped(self, value):
        assert normalize(value) == {"value": value}

    def test_bytes_not_treated_as_sequence(self):
        assert normalize(b"abc") == {"value": b"abc"}

    def test_filesystem_path_is_path_shorthand(self):
        assert normalize(Path("data") / "roads.shp") == {"path": str(Path("data") / "roads.shp")}


class TestDiscriminator:

    def test_reads_string_type(self):
        assert discriminator({"type": "Fill"}) == "Fill"

    def test_missing_type(self):
        assert discriminator({"name": "a"}) is None

    def test_non_string_type_ignored(self):
        assert discriminator({"type": 3}) is None

    def test_non_mapping(self):
        assert discriminator("Fill") is None
