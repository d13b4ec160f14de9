from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class Text:
    value: str

    kind: ClassVar[str] = "text"


@dataclass(frozen=True, slots=True)
class Stdin:
    kind: ClassVar[str] = "stdin"


@dataclass(frozen=True, slots=True)
class File:
    path: str                  # prefix already stripped

    kind: ClassVar[str] = "file"

    def as_path(self) -> Path:
        return Path(self.path)


Input = Union[Text, Stdin, File]


class AccessErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    OTHER = "other"


class ReadErrorKind(str, Enum):
    IO = "io"
    INVALID_ENCODING = "invalid_encoding"


class GrabError(RuntimeError):
    """Base class for every error raised while accessing or reading an input."""
    pass


class AccessError(GrabError):
    """Raised when a file input cannot be opened."""

    kind: ClassVar[AccessErrorKind] = AccessErrorKind.OTHER

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        return f"unable to open {self.path}: {self.cause}"


class NotFoundError(AccessError):
    """Raised when a file input points at a path that does not exist."""

    kind: ClassVar[AccessErrorKind] = AccessErrorKind.NOT_FOUND

    def _message(self) -> str:
        return f"file not found: {self.path}"


class PermissionDeniedError(AccessError):
    """Raised when a file input exists but may not be opened for reading."""

    kind: ClassVar[AccessErrorKind] = AccessErrorKind.PERMISSION_DENIED

    def _message(self) -> str:
        return f"permission denied: {self.path}"


class ReadError(GrabError):
    """Raised when materializing a handle fails."""

    kind: ClassVar[ReadErrorKind] = ReadErrorKind.IO

    def __init__(self, source: str, cause: BaseException | None = None) -> None:
        self.source = source
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        return f"failed to read {self.source}: {self.cause}"


class InvalidEncodingError(ReadError):
    """Raised by read_to_string when the content is not valid text."""

    kind: ClassVar[ReadErrorKind] = ReadErrorKind.INVALID_ENCODING

    def __init__(self, source: str, cause: UnicodeError, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        super().__init__(source, cause)

    def _message(self) -> str:
        return f"{self.source} is not valid {self.encoding} text: {self.cause}"


class HandleConsumedError(RuntimeError):
    """Raised when a handle is read after it has already been consumed."""
    pass
