"""Example host CLI for grabinput."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from . import parse
from .core.config import Config, DEFAULT_FILE_PREFIX, DEFAULT_STDIN_MARKER
from .core.model import GrabError, Input
from .core.util import input_asdict
from .io import access

app = typer.Typer(add_completion=False, help="Read one input from text, stdin ('-') or a file ('@path').")

# shared options
StdinMarker = typer.Option(DEFAULT_STDIN_MARKER, "--stdin-marker", help="Argument that means 'read stdin'")
FilePrefix = typer.Option(DEFAULT_FILE_PREFIX, "--file-prefix", help="Prefix that means 'read this file'")
NoStdin = typer.Option(False, "--no-stdin", help="Never read from stdin")
NoFile = typer.Option(False, "--no-file", help="Never read from files")


def build_config(stdin_marker: str, file_prefix: str, no_stdin: bool, no_file: bool) -> Config:
    """Turn the command-line sigil options into a Config."""
    return Config(
        stdin_marker=None if no_stdin else stdin_marker,
        file_prefix=None if no_file else file_prefix,
    )


def _fail(err: Exception):
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def _classify(raw: str, stdin_marker: str, file_prefix: str, no_stdin: bool, no_file: bool) -> Input:
    return parse(raw, build_config(stdin_marker, file_prefix, no_stdin, no_file))


@app.command()
def hello(
    name: str = typer.Argument(..., help="Who to greet: a name, '-' or '@file'"),
    stdin_marker: str = StdinMarker,
    file_prefix: str = FilePrefix,
    no_stdin: bool = NoStdin,
    no_file: bool = NoFile,
):
    """Greet NAME, wherever it comes from."""
    source = _classify(name, stdin_marker, file_prefix, no_stdin, no_file)
    try:
        who = access(source).read_to_string()
    except GrabError as e:
        _fail(e)
    who = who.rstrip("\r\n")
    typer.echo(f"Hello, {who}!")


@app.command()
def show(
    raw: str = typer.Argument(..., help="Argument to classify"),
    stdin_marker: str = StdinMarker,
    file_prefix: str = FilePrefix,
    no_stdin: bool = NoStdin,
    no_file: bool = NoFile,
):
    """Print how RAW is classified, as JSON. Nothing is opened or read."""
    source = _classify(raw, stdin_marker, file_prefix, no_stdin, no_file)
    json.dump(input_asdict(source), sys.stdout, indent=2)
    sys.stdout.write("\n")


@app.command()
def cat(
    raw: str = typer.Argument(..., help="Text, '-' for stdin or '@path' for a file"),
    as_bytes: bool = typer.Option(False, "--bytes", help="Copy raw bytes without decoding"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    stdin_marker: str = StdinMarker,
    file_prefix: str = FilePrefix,
    no_stdin: bool = NoStdin,
    no_file: bool = NoFile,
):
    """Write the content of RAW to stdout."""
    source = _classify(raw, stdin_marker, file_prefix, no_stdin, no_file)
    try:
        with access(source) as handle:
            if as_bytes:
                data = handle.read_to_bytes()
            else:
                data = handle.read_to_string().encode("utf-8", "surrogateescape")
    except GrabError as e:
        _fail(e)

    # open output sink
    try:
        sink = open(output, "wb") if output else sys.stdout.buffer
    except OSError as e:
        _fail(e)
    try:
        sink.write(data)
        sink.flush()
    finally:
        if output:
            sink.close()


if __name__ == "__main__":
    app()
