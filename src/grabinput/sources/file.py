from __future__ import annotations

from typing import ClassVar

from ..core.config import Config
from ..core.model import File
from ..core.recognizer_base import SourceRecognizer


class FileRecognizer(SourceRecognizer, register=True):
    """Leading file prefix followed by a non-empty path."""

    name: ClassVar = "file"
    priority: ClassVar = 20

    @classmethod
    def recognize(cls, raw: str, config: Config) -> File | None:
        prefix = config.file_prefix
        if prefix is None or not raw.startswith(prefix):
            return None
        path = raw[len(prefix):]
        # the bare prefix is literal text, not an empty path
        if not path:
            return None
        return File(path)
