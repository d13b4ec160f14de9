from __future__ import annotations

from typing import ClassVar

from ..core.config import Config
from ..core.model import Stdin
from ..core.recognizer_base import SourceRecognizer


class StdinRecognizer(SourceRecognizer, register=True):
    """Whole-string match against the configured stdin marker."""

    name: ClassVar = "stdin"
    priority: ClassVar = 10         # ahead of the file prefix, so the marker always wins

    @classmethod
    def recognize(cls, raw: str, config: Config) -> Stdin | None:
        if config.stdin_marker is not None and raw == config.stdin_marker:
            return Stdin()
        return None
