"""Handle over the process's standard input stream."""

import sys

from .base import BaseHandle, DEFAULT_ENCODING


class StdinHandle(BaseHandle):
    """Reads ``sys.stdin`` at read time and never closes it.

    The stream is process-wide and is not rewound: a second stdin handle
    only sees what the first one left behind.
    """

    source = "<stdin>"

    def _read_all(self) -> bytes:
        stream = sys.stdin
        if stream is None:
            raise OSError("standard input is not available")
        try:
            buffer = getattr(stream, "buffer", None)
            if buffer is not None:
                return buffer.read()
            # text-only replacement streams (e.g. io.StringIO)
            return stream.read().encode(DEFAULT_ENCODING, "surrogateescape")
        except ValueError as e:
            # closed or detached stream
            raise OSError(f"standard input is not readable: {e}") from e


def open_stdin_handle() -> StdinHandle:
    return StdinHandle()
