from __future__ import annotations
import bisect
from typing import List, Type

from .config import Config
from .model import Input, Text
from .recognizer_base import SourceRecognizer


class RecognizerRegistry:
    def __init__(self) -> None:
        self._recognizers: List[tuple[int, str, Type[SourceRecognizer]]] = []   # sorted by priority

    # called from SourceRecognizer.__init_subclass__
    def register(self, recognizer_cls: Type[SourceRecognizer]) -> None:
        # (priority, name) keeps the order stable between runs
        entry = (recognizer_cls.priority, recognizer_cls.__name__, recognizer_cls)
        if entry not in self._recognizers:
            bisect.insort(self._recognizers, entry)

    def recognizers(self) -> list[Type[SourceRecognizer]]:
        return [r for _, _, r in self._recognizers]

    def classify(self, raw: str, config: Config) -> Input:
        for _, _, recognizer in self._recognizers:
            found = recognizer.recognize(raw, config)
            if found is not None:
                return found
        # anything is valid literal text
        return Text(raw)


# singleton used project-wide
_REGISTRY = RecognizerRegistry()
