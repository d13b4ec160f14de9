"""I/O layer for grabinput - turns a source descriptor into a readable handle."""

# Re-export these for import convenience
from .base import Handle, BaseHandle, DEFAULT_ENCODING
from .text import TextHandle, open_text_handle
from .stdin import StdinHandle, open_stdin_handle
from .file import FileHandle, open_file_handle

from ..core.model import File, Input, Stdin, Text


def access(source: Input) -> Handle:
    """Resolve a descriptor into a handle.

    Only file inputs touch the filesystem here; a missing or unreadable file
    raises AccessError now rather than at read time.
    """
    if isinstance(source, Text):
        return open_text_handle(source.value)
    if isinstance(source, Stdin):
        return open_stdin_handle()
    if isinstance(source, File):
        return open_file_handle(source.path)
    raise TypeError(f"Cannot access {source!r}: expected Text, Stdin or File")
