#!/usr/bin/env python3

import logging

import pytest

from str_enum.pipeline.analyzer import DeclarationValidator
from str_enum.pipeline.config import CodeGeneratorConfig
from str_enum.pipeline.declaration_ast import DeclarationParser, tokenize
from str_enum.pipeline.errors import SemanticError


def declaration(source):
    return DeclarationParser().parse_declaration(tokenize(source))


def validate(source, **config):
    return DeclarationValidator(CodeGeneratorConfig(**config)).validate(declaration(source))


def violations(source, **config):
    return DeclarationValidator(CodeGeneratorConfig(**config)).check(declaration(source))


def discriminants(source):
    return [(variant.name, variant.discriminant) for variant in validate(source).variants]


class TestDiscriminantResolution:
    """Discriminants are resolved once, in declaration order"""

    def test_positional_numbering_starts_at_zero(self):
        assert discriminants('enum E { A => "a", B => "b", C => "c" }') == [("A", 0), ("B", 1), ("C", 2)]

    def test_explicit_value_restarts_numbering(self):
        assert discriminants('enum E { A => "a", B = 10 => "b", C => "c" }') == [("A", 0), ("B", 10), ("C", 11)]

    def test_positional_value_skips_claimed_values(self):
        assert discriminants('enum E { A = 1 => "a", B = 0 => "b", C => "c" }') == [("A", 1), ("B", 0), ("C", 2)]

    def test_free_variants_avoid_explicit_five(self):
        assert discriminants('enum E { A => "a", B = 5 => "b", C => "c", D => "d" }') == [
            ("A", 0),
            ("B", 5),
            ("C", 6),
            ("D", 7),
        ]

    def test_positional_value_landing_on_later_explicit_five(self):
        found = violations('enum E { A = 3 => "a", B => "b", C => "c", D = 5 => "d" }')
        assert [violation.variants for violation in found] == [("C", "D")]
        assert "discriminant 5 of variant D collides with variant C (assigned by position)" in found[0].message

    def test_suffix_placement_resolves_like_prefix(self):
        assert discriminants('enum E { A => 4, "a", B => "b" }') == discriminants('enum E { A = 4 => "a", B => "b" }')

    def test_explicit_collision_with_positional_value(self):
        found = violations('enum E { A => "a", B => "b", C = 1 => "c" }')
        assert len(found) == 1
        assert found[0].variants == ("B", "C")
        assert "collides with variant B (assigned by position)" in found[0].message

    def test_explicit_collision_with_explicit_value(self):
        found = violations('enum E { A = 7 => "a", B = 7 => "b" }')
        assert [violation.variants for violation in found] == [("A", "B")]
        assert "assigned explicitly" in found[0].message

    def test_repr_range(self):
        found = violations('#[repr(u8)] enum E { A = 255 => "a", B => "b" }')
        assert len(found) == 1
        assert found[0].variants == ("B",)
        assert "does not fit in u8 (0..=255)" in found[0].message

    def test_negative_value_needs_signed_repr(self):
        assert violations('#[repr(i8)] enum E { A = -128 => "a" }') == []
        found = violations('#[repr(u16)] enum E { A = -1 => "a" }')
        assert "does not fit in u16" in found[0].message


class TestStringUniqueness:
    """Every accepted string selects exactly one variant"""

    def test_duplicate_canonical_string_names_both_variants(self):
        found = violations('enum E { A => "x", B => "x" }')
        assert len(found) == 1
        assert found[0].variants == ("A", "B")
        assert 'canonical string "x" is used by variants A and B' in found[0].message

    def test_alternate_shadowing_another_canonical(self):
        found = violations('enum E { A => "a", B => "b" ("a") }')
        assert found[0].variants == ("A", "B")
        assert "A (canonical) and B (alternate)" in found[0].message

    def test_alternate_shared_by_two_variants(self):
        found = violations('enum E { A => "a" ("z"), B => "b" ("z") }')
        assert found[0].variants == ("A", "B")

    def test_repeat_within_one_variant_is_only_a_warning(self, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("str_enum"), "propagate", True)
        with caplog.at_level(logging.WARNING, logger="str_enum"):
            enum_def = validate('enum E { A => "a" ("a", "aa", "aa") }')
        assert enum_def.variants[0].accepted_strings == ("a", "aa")
        assert "lists string 'a' more than once" in caplog.text


class TestNamesAndParseSpace:
    def test_zero_variants_without_parsing_is_valid(self):
        enum_def = validate("enum Empty {}")
        assert enum_def.variants == []
        assert enum_def.all_value_str == ""

    def test_zero_variants_with_error_type(self):
        found = violations("#[error_type(Oops)] enum Empty {}")
        assert len(found) == 1
        assert "has no variants but requests parsing" in found[0].message

    def test_zero_variants_with_serde(self):
        found = violations("enum Empty {}", serde=True)
        assert "through serde" in found[0].message

    def test_duplicate_variant_name(self):
        found = violations('enum E { A => "a", A => "b" }')
        assert any("declared more than once" in violation.message for violation in found)

    @pytest.mark.parametrize("name", ["_hidden", "value", "from_str", "ALL_VARIANTS"])
    def test_reserved_variant_names(self, name):
        found = violations(f'enum E {{ {name} => "x" }}')
        assert "is reserved on generated enums" in found[0].message

    def test_keyword_names_are_rejected(self):
        found = violations('enum class { A => "a" }')
        assert "not a valid Python identifier" in found[0].message

    def test_error_type_must_differ_from_enum(self):
        found = violations('#[error_type(E)] enum E { A => "a" }')
        assert "same name as the enum" in found[0].message


class TestSemanticError:
    def test_all_violations_are_reported_together(self):
        with pytest.raises(SemanticError) as exc_info:
            validate('#[repr(u8)] enum E { A => "x", B => "x", C = 300 => "c" }')
        error = exc_info.value
        assert len(error.violations) == 2
        message = str(error)
        assert message.startswith("2 invalid declaration item(s):")
        assert "A and B" in message
        assert "300" in message

    def test_violations_across_declarations(self):
        module = DeclarationParser().parse(tokenize('enum A { X => "x", Y => "x" } enum B { X => "b", Y => "b" }'))
        with pytest.raises(SemanticError) as exc_info:
            DeclarationValidator().validate_module(module)
        assert len(exc_info.value.violations) == 2

    def test_capabilities_come_from_config(self):
        enum_def = validate('pub enum E { A => "a" }', serde=True, reflect=True)
        assert enum_def.serde and enum_def.reflect
        assert enum_def.exported_names == ["E"]


if __name__ == "__main__":
    pytest.main([__file__])
