"""Tests for the access() factory and the end-to-end parse/access/read flow."""

import builtins
import io
import sys

import pytest

from grabinput import parse, parse_default, access, Config
from grabinput.core.model import Text, Stdin, File, NotFoundError, InvalidEncodingError
from grabinput.io import TextHandle, StdinHandle, FileHandle


@pytest.fixture
def io_counter(monkeypatch):
    """Count (and forbid) any filesystem open or stdin lookup."""
    calls = []
    real_open = builtins.open

    def counting_open(*args, **kwargs):
        calls.append(args)
        return real_open(*args, **kwargs)

    class CountingStdin:
        def __getattr__(self, name):
            calls.append(name)
            raise AttributeError(name)

    monkeypatch.setattr(builtins, "open", counting_open)
    monkeypatch.setattr(sys, "stdin", CountingStdin())
    return calls


class TestAccess:
    """Test the access() dispatch."""

    def test_text(self):
        assert isinstance(access(Text("x")), TextHandle)

    def test_stdin(self):
        assert isinstance(access(Stdin()), StdinHandle)

    def test_file(self, tmp_path):
        path = tmp_path / "name.txt"
        path.write_text("Fred")
        handle = access(File(str(path)))
        assert isinstance(handle, FileHandle)
        handle.close()

    def test_unknown_descriptor(self):
        with pytest.raises(TypeError):
            access("@name.txt")

    def test_missing_file_fails_at_access(self, tmp_path):
        """Not found is reported by access(), not by the later read."""
        source = parse_default(f"@{tmp_path / 'nope.txt'}")
        with pytest.raises(NotFoundError):
            access(source)

    def test_stdin_access_does_no_io(self, io_counter):
        access(Stdin())
        assert io_counter == []


class TestRoundTrip:
    """Literal text goes through unchanged and without I/O."""

    @pytest.mark.parametrize("raw", ["John", "", "@", "a@b", "--", " - ", "héllo wörld", "line1\nline2"])
    def test_text_round_trip(self, raw, io_counter):
        source = parse_default(raw)
        assert source == Text(raw)
        assert access(source).read_to_string() == raw
        assert io_counter == []


class TestScenarios:
    """The three ways a user can supply an input."""

    def test_literal(self):
        source = parse_default("John")
        assert source == Text("John")
        assert access(source).read_to_string() == "John"

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"Bob\n")))
        source = parse_default("-")
        assert source == Stdin()
        assert access(source).read_to_string() == "Bob\n"

    def test_file(self, tmp_path, monkeypatch):
        (tmp_path / "name.txt").write_text("Fred")
        monkeypatch.chdir(tmp_path)
        source = parse_default("@name.txt")
        assert source == File("name.txt")
        assert access(source).read_to_string() == "Fred"

    def test_file_invalid_text(self, tmp_path):
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\xc3\x28")
        handle = access(parse_default(f"@{path}"))
        with pytest.raises(InvalidEncodingError):
            handle.read_to_string()
        assert handle.read_to_bytes() == b"\xc3\x28"

    def test_custom_sigils(self, tmp_path, monkeypatch):
        (tmp_path / "name.txt").write_text("Fred")
        monkeypatch.chdir(tmp_path)
        cfg = Config(stdin_marker="<--", file_prefix="...")
        assert access(parse("...name.txt", cfg)).read_to_string() == "Fred"
        assert parse("<--", cfg) == Stdin()
        assert access(parse("-", cfg)).read_to_string() == "-"
