#!/usr/bin/env python3

import pytest

from str_enum.pipeline import AtomicWriter, CodeGeneratorConfig, OutputConfig, OutputMode, PipelineGenerator
from str_enum.pipeline.errors import OutputError

SOURCE = 'pub enum Answer { Yes => "yes" ("y"), No => "no" ("n") }'


class TestAtomicWriter:
    def test_write_creates_parent_directories(self, tmp_path):
        target = tmp_path / "nested" / "out.py"
        AtomicWriter().write(target, "X = 1\n")
        assert target.read_text() == "X = 1\n"

    def test_invalid_python_is_not_written(self, tmp_path):
        target = tmp_path / "out.py"
        target.write_text("ORIGINAL = True\n")
        with pytest.raises(OutputError):
            AtomicWriter().write(target, "def broken(:\n")
        assert target.read_text() == "ORIGINAL = True\n"
        assert [path.name for path in tmp_path.iterdir()] == ["out.py"]

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "out.py"
        AtomicWriter().write(target, "not python at all (", validate=False)
        assert target.exists()

    def test_write_if_not_exists(self, tmp_path):
        target = tmp_path / "out.py"
        target.write_text("")
        with pytest.raises(FileExistsError):
            AtomicWriter().write_if_not_exists(target, "X = 1\n")


class TestPipelineWrite:
    def test_write_generated_module(self, tmp_path):
        target = tmp_path / "answer.py"
        code = PipelineGenerator(SOURCE).write(target)
        assert target.read_text(encoding="utf-8") == code
        assert "class Answer(_enum.Enum):" in code

    def test_existing_file_needs_force(self, tmp_path):
        target = tmp_path / "answer.py"
        target.write_text("KEEP = 1\n")
        with pytest.raises(FileExistsError):
            PipelineGenerator(SOURCE).write(target)
        assert target.read_text() == "KEEP = 1\n"

        config = CodeGeneratorConfig(output=OutputConfig(mode=OutputMode.FORCE))
        PipelineGenerator(SOURCE, config).write(target)
        assert "class Answer" in target.read_text(encoding="utf-8")

    def test_plain_write(self, tmp_path):
        target = tmp_path / "answer.py"
        config = CodeGeneratorConfig(output=OutputConfig(atomic_write=False))
        PipelineGenerator(SOURCE, config).write(target)
        assert target.exists()

        with pytest.raises(FileExistsError):
            PipelineGenerator(SOURCE, config).write(target)

    def test_error_mode_goes_through_write_if_not_exists(self, tmp_path, monkeypatch):
        calls = []
        original = AtomicWriter.write_if_not_exists

        def recording(self, path, content, validate=True):
            calls.append(path)
            return original(self, path, content, validate)

        monkeypatch.setattr(AtomicWriter, "write_if_not_exists", recording)
        target = tmp_path / "answer.py"
        PipelineGenerator(SOURCE).write(target)
        assert calls == [target]

        config = CodeGeneratorConfig(output=OutputConfig(mode=OutputMode.FORCE))
        PipelineGenerator(SOURCE, config).write(target)
        assert calls == [target]


if __name__ == "__main__":
    pytest.main([__file__])
