"""
Tests for predicate presets (partially applied predicates)
"""

import enum

import pytest
from propcheck import is_required, is_valid, presets, validate


class Role(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class TestLengthPresets:

    def test_min_length_of(self):
        check = presets.min_length_of(3)
        assert check("abc") is True
        assert check("ab") is False
        assert check.__name__ == "min_length_of(3)"

    def test_max_length_of(self):
        check = presets.max_length_of(5)
        assert check("Shawty") is False
        assert check("Ada") is True

    def test_max_length_of_empty_fails(self):
        assert presets.max_length_of(5)("") is False

    def test_length_between(self):
        check = presets.length_between(2, 4)
        assert check("a") is False
        assert check("abc") is True
        assert check("abcde") is False
        assert check.__name__ == "length_between(2, 4)"

    def test_length_between_invalid_bounds(self):
        with pytest.raises(ValueError):
            presets.length_between(5, 1)


class TestEnumSubsetOf:

    def test_enum_class(self):
        check = presets.enum_subset_of(Role)
        assert check(["admin", "user"]) is True
        assert check(["blogger"]) is False
        assert check([]) is True
        assert check.__name__ == "enum_subset_of(Role)"

    def test_mapping(self):
        check = presets.enum_subset_of({"ADMIN": "admin"})
        assert check("admin") is True
        assert check.__name__ == "enum_subset_of(dict)"

    def test_rejects_non_collection_at_declaration(self):
        with pytest.raises(TypeError):
            presets.enum_subset_of(42)


class TestRequiredString:

    def test_chain_contents(self):
        chain = presets.required_string(min_len=2, max_len=10)
        assert chain[0] is is_required
        assert [p.__name__ for p in chain[1:]] == ["min_length_of(2)", "max_length_of(10)"]

    def test_without_bounds(self):
        assert presets.required_string() == [is_required]

    def test_fresh_list_each_call(self):
        assert presets.required_string() is not presets.required_string()

    def test_in_validate(self):
        validators = {
            "name": presets.required_string(min_len=2, max_len=10),
            "roles": [presets.enum_subset_of(Role)],
        }
        assert validate({"name": "Shawty", "roles": ["admin"]}, validators) == {"name": True, "roles": True}
        assert validate({"roles": ["root"]}, validators) == {"name": False, "roles": False}
        assert is_valid({"name": "A", "roles": []}, validators) is False
