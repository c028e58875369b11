#!/usr/bin/env python3

# Field types must stay real classes for dataclasses_json to find the
# registered encoders, so this module does not use postponed annotations.

import json
from dataclasses import dataclass

import pytest
from dataclasses_json import dataclass_json

from str_enum import expand, runtime
from str_enum.pipeline import CodeGeneratorConfig

SHAPE = """
#[error_type(ParseShapeError)]
pub enum Shape {
    Circle => "circle" ("round"),
    Square => "square",
}
"""

Shape = expand(SHAPE, config=CodeGeneratorConfig(serde=True, add_generation_comment=False))["Shape"]


@dataclass_json
@dataclass
class Drawing:
    name: str
    shape: Shape


class TestSerde:
    """Test cases for the dataclasses_json integration of generated enums"""

    def test_serialize_is_canonical(self):
        assert Shape.Circle.serialize() == "circle"

    def test_deserialize_accepts_alternates(self):
        assert Shape.deserialize("round") is Shape.Circle
        assert Shape.deserialize(Shape.Square) is Shape.Square

    def test_deserialize_error_lists_expected_values(self):
        with pytest.raises(runtime.DeserializeError) as exc_info:
            Shape.deserialize("triangle")
        assert str(exc_info.value) == 'invalid value: string "triangle", expected one of [circle,square]'

    def test_deserialize_rejects_other_types(self):
        with pytest.raises(runtime.DeserializeError) as exc_info:
            Shape.deserialize(3)
        assert "invalid type: int 3" in str(exc_info.value)

    def test_dataclass_round_trip(self):
        drawing = Drawing(name="logo", shape=Shape.Square)
        encoded = drawing.to_json()
        assert json.loads(encoded) == {"name": "logo", "shape": "square"}
        assert Drawing.from_json(encoded) == drawing

    def test_dataclass_decodes_alternate(self):
        drawing = Drawing.from_dict({"name": "sun", "shape": "round"})
        assert drawing.shape is Shape.Circle

    def test_dataclass_rejects_unknown_value(self):
        with pytest.raises(runtime.DeserializeError):
            Drawing.from_dict({"name": "x", "shape": "hexagon"})

    def test_serde_expected_str(self):
        assert Shape.SERDE_EXPECTED_STR == "one of [circle,square]"


if __name__ == "__main__":
    pytest.main([__file__])
