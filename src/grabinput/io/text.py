"""Handle over literal text already owned by the descriptor."""

from .base import BaseHandle, DEFAULT_ENCODING
from ..core.model import HandleConsumedError, InvalidEncodingError


class TextHandle(BaseHandle):
    """Read-only view over a string; performs no I/O.

    Text decoded from undecodable argv bytes carries surrogate escapes.
    ``read_to_bytes`` returns the original bytes, ``read_to_string`` refuses
    it with InvalidEncodingError and leaves the handle unread.
    """

    source = "<text>"

    def __init__(self, value: str):
        super().__init__()
        self._value = value

    def _read_all(self) -> bytes:
        # surrogateescape keeps undecodable argv bytes intact
        return self._value.encode(DEFAULT_ENCODING, "surrogateescape")

    def read_to_string(self, encoding: str = DEFAULT_ENCODING) -> str:
        if self._consumed:
            raise HandleConsumedError(f"handle for {self.source} has already been read")
        try:
            encoded = self._value.encode(encoding)
        except UnicodeEncodeError as e:
            raise InvalidEncodingError(self.source, e, encoding) from e
        self._consumed = True
        self.bytes_read += len(encoded)
        return self._value


def open_text_handle(value: str) -> TextHandle:
    return TextHandle(value)
