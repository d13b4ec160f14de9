from __future__ import annotations

from typing import ClassVar

from ..core.config import Config
from ..core.model import Text
from ..core.recognizer_base import SourceRecognizer


class TextRecognizer(SourceRecognizer, register=True):
    """Fallback: the raw string is the content."""

    name: ClassVar = "text"
    priority: ClassVar = 1000

    @classmethod
    def recognize(cls, raw: str, config: Config) -> Text:
        return Text(raw)
