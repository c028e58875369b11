#!/usr/bin/env python3

import pytest

from str_enum.pipeline import CodeGeneratorConfig, OutputConfig, OutputMode


class TestCodeGeneratorConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.serde is False
        assert config.reflect is False
        assert config.add_generation_comment is True
        assert config.output.mode == OutputMode.ERROR_IF_EXISTS
        assert config.output.atomic_write is True

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict(
            {
                "serde": True,
                "reflect": True,
                "use_future_annotations": False,
                "output": {"mode": "force", "atomic_write": False},
                "unknown_option": 1,
            }
        )
        assert config.serde is True
        assert config.reflect is True
        assert config.use_future_annotations is False
        assert config.output.mode == OutputMode.FORCE
        assert config.output.atomic_write is False
        assert config.output.validate_before_write is True
        assert not hasattr(config, "unknown_option")

    def test_round_trip(self):
        config = CodeGeneratorConfig(serde=True, output=OutputConfig(mode=OutputMode.FORCE))
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            CodeGeneratorConfig.from_dict({"output": {"mode": "append"}})


if __name__ == "__main__":
    pytest.main([__file__])
