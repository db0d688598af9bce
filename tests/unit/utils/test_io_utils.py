#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_io_utils.py
"""Unit tests for reading and writing rendered text."""

from io import BytesIO, StringIO

import pytest

from events2md.exceptions import OutputWriteError
from events2md.utils.io_utils import read_text, write_text


@pytest.mark.unit
class TestWriteText:
    """Tests for writing to paths and streams."""

    def test_path(self, temp_dir):
        path = temp_dir / "out.md"
        write_text("# Café", path)
        assert path.read_text(encoding="utf-8") == "# Café"

    def test_str_path(self, temp_dir):
        path = temp_dir / "out.md"
        write_text("x", str(path))
        assert path.read_text(encoding="utf-8") == "x"

    def test_text_stream(self):
        buffer = StringIO()
        write_text("é", buffer)
        assert buffer.getvalue() == "é"

    def test_binary_stream(self):
        buffer = BytesIO()
        write_text("é", buffer)
        assert buffer.getvalue() == "é".encode("utf-8")

    def test_binary_file(self, temp_dir):
        path = temp_dir / "out.md"
        with open(path, "wb") as f:
            write_text("é", f)
        assert path.read_bytes() == "é".encode("utf-8")

    def test_unwritable_destination(self):
        with pytest.raises(TypeError):
            write_text("x", 42)

    def test_missing_directory(self, temp_dir):
        with pytest.raises(OutputWriteError) as exc_info:
            write_text("x", temp_dir / "missing" / "out.md")
        assert exc_info.value.file_path.endswith("out.md")


@pytest.mark.unit
class TestReadText:
    """Tests for reading sources."""

    def test_path(self, temp_dir):
        path = temp_dir / "in.json"
        path.write_text("{}", encoding="utf-8")
        assert read_text(path) == "{}"

    def test_stream(self):
        assert read_text(StringIO("abc")) == "abc"
