"""Tests for twofy.streams."""

import io

import pytest

from twofy import InputError, OutputError
from twofy.streams import read_input, write_output


class _Terminal(io.BytesIO):
    def isatty(self):
        return True


class _Short(io.BytesIO):
    def write(self, data):
        return super().write(data[:1])


class TestReadInput:
    def test_from_file(self, tmp_path):
        path = tmp_path / "in.yaml"
        path.write_bytes(b"foo: 1\n")
        assert read_input(path) == b"foo: 1\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="cannot read"):
            read_input(tmp_path / "nope.yaml")

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(InputError):
            read_input(tmp_path)

    def test_from_piped_stdin(self):
        assert read_input(stdin=io.BytesIO(b"a: b\n")) == b"a: b\n"

    def test_uses_buffer_of_text_stream(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"x: 1\n"))
        assert read_input(stdin=stdin) == b"x: 1\n"

    def test_terminal_stdin_refused(self):
        with pytest.raises(InputError, match="piped stdin"):
            read_input(stdin=_Terminal(b"never read"))


class TestWriteOutput:
    def test_to_file(self, tmp_path):
        path = tmp_path / "out.json"
        write_output(b"42", path)
        assert path.read_bytes() == b"42"

    def test_empty_content_creates_empty_file(self, tmp_path):
        path = tmp_path / "out.json"
        write_output(b"", path)
        assert path.read_bytes() == b""

    def test_replaces_existing_file(self, tmp_path):
        path = tmp_path / "out.json"
        path.write_bytes(b"old content that is longer")
        write_output(b"new", path)
        assert path.read_bytes() == b"new"
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_failed_replace_keeps_old_file(self, tmp_path, monkeypatch):
        path = tmp_path / "out.json"
        path.write_bytes(b"old")

        def _no_space(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr("twofy.streams.os.replace", _no_space)
        with pytest.raises(OutputError, match="No space left"):
            write_output(b"new", path)
        assert path.read_bytes() == b"old"
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OutputError, match="cannot write"):
            write_output(b"42", tmp_path / "missing-dir" / "out.json")

    def test_to_stdout(self):
        out = io.BytesIO()
        write_output(b"hello", stdout=out)
        assert out.getvalue() == b"hello"

    def test_short_write(self):
        with pytest.raises(OutputError, match="short write"):
            write_output(b"hello", stdout=_Short())
