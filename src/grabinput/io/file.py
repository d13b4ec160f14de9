"""Handle over a local file opened at access time."""

from pathlib import Path
from typing import BinaryIO, Optional, Union

from .base import BaseHandle
from ..core.model import AccessError, HandleConsumedError, NotFoundError, PermissionDeniedError


class FileHandle(BaseHandle):
    """Exclusively owns an open binary file until it is read or closed."""

    def __init__(self, path: Union[Path, str]):
        super().__init__()
        self.source = str(path)
        self._file: Optional[BinaryIO] = _open(self.source)

    def _read_all(self) -> bytes:
        if self._file is None:
            raise HandleConsumedError(f"handle for {self.source} has been closed")
        return self._file.read()

    def close(self):
        """Close the file if it is still open."""
        if self._file is not None:
            self._file.close()
            self._file = None


def _open(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except FileNotFoundError as e:
        raise NotFoundError(path, e) from e
    except PermissionError as e:
        raise PermissionDeniedError(path, e) from e
    except OSError as e:
        raise AccessError(path, e) from e


def open_file_handle(path: Union[Path, str]) -> FileHandle:
    return FileHandle(path)
