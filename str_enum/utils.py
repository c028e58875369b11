"""
Utility functions for the str_enum generator.
"""

import json
import keyword

# Attributes the emitter defines on every generated enum; a variant with one
# of these names would shadow generated behavior.
GENERATED_ATTRIBUTES = frozenset(
    {
        "ALL_VALUES",
        "ALL_VALUE_STR",
        "ALL_VARIANTS",
        "COUNT",
        "NUM_VARIANTS",
        "REPR_BITS",
        "REPR_SIGNED",
        "SERDE_EXPECTED_STR",
        "VARIANT_NAMES",
        "as_str",
        "deserialize",
        "discriminant",
        "from_bytes",
        "from_str",
        "get_bool",
        "get_int",
        "get_str",
        "into_repr",
        "iter",
        "mro",
        "name",
        "serialize",
        "try_from_str",
        "value",
        "variant_name",
    }
)

# Module-level names taken by the emitted imports
RESERVED_MODULE_NAMES = frozenset({"__all__", "_enum", "_runtime", "_dataclasses_json_cfg"})


def is_python_identifier(text: str) -> bool:
    """Check that text can be used as a Python name (not a hard keyword)."""
    return text.isidentifier() and not keyword.iskeyword(text)


def is_enum_reserved_name(text: str) -> bool:
    """Check whether Enum would refuse or hide a member with this name.

    Enum treats _sunder_ and __dunder__ names specially and mangles private
    __names, so members may not start with an underscore.
    """
    return text.startswith("_") or text in GENERATED_ATTRIBUTES


def python_string_literal(text: str) -> str:
    """Render text as a double-quoted Python string literal.

    Examples:
        'abc' -> '"abc"'
        'say "hi"' -> '"say \\"hi\\""'

    Args:
        text: Any string

    Returns:
        Source text that evaluates back to ``text``
    """
    return json.dumps(text, ensure_ascii=False)
