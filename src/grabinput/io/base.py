"""Base protocol and shared read logic for input handles."""

from typing import Protocol, runtime_checkable

from ..core.model import HandleConsumedError, InvalidEncodingError, ReadError

DEFAULT_ENCODING = "utf-8"


@runtime_checkable
class Handle(Protocol):
    """Protocol for single-use input handles."""

    source: str         # "<text>", "<stdin>" or the file path
    bytes_read: int     # running total

    def read_to_bytes(self) -> bytes:
        """Materialize the whole input without decoding.
        Consumes the handle; raise ReadError on I/O failure.
        """
        ...

    def read_to_string(self, encoding: str = DEFAULT_ENCODING) -> str:
        """Materialize the whole input as text.
        Consumes the handle; raise InvalidEncodingError if the bytes do not decode.
        """
        ...

    def close(self) -> None:
        ...


class BaseHandle:
    """Single-use read logic shared by the concrete handles.

    Subclasses implement ``_read_all`` and, if they own a resource, ``close``.
    A failed decode leaves the materialized bytes on the handle, so a
    following ``read_to_bytes`` still returns them.
    """

    source = "<input>"

    def __init__(self) -> None:
        self.bytes_read = 0
        self._consumed = False
        self._buffer: bytes | None = None

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _read_all(self) -> bytes:
        raise NotImplementedError

    def _materialize(self) -> bytes:
        if self._consumed:
            raise HandleConsumedError(f"handle for {self.source} has already been read")
        if self._buffer is not None:
            return self._buffer
        try:
            data = self._read_all()
        except OSError as e:
            self._consumed = True
            raise ReadError(self.source, e) from e
        finally:
            self.close()
        self.bytes_read += len(data)
        self._buffer = data
        return data

    def read_to_bytes(self) -> bytes:
        data = self._materialize()
        self._consumed = True
        self._buffer = None
        return data

    def read_to_string(self, encoding: str = DEFAULT_ENCODING) -> str:
        data = self._materialize()
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(self.source, e, encoding) from e
        self._consumed = True
        self._buffer = None
        return text

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "unread"
        return f"<{type(self).__name__} {self.source} {state}>"
