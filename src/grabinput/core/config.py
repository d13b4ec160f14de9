from __future__ import annotations
import dataclasses
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Input

DEFAULT_STDIN_MARKER = "-"
DEFAULT_FILE_PREFIX = "@"


@dataclass(frozen=True, slots=True)
class Config:
    """Sigils recognized by the classifier.

    Set a marker to ``None`` to disable recognition of that source; the other
    marker is unaffected. A raw string equal to ``stdin_marker`` is always read
    from stdin, even when it also starts with ``file_prefix``.
    """

    stdin_marker: str | None = DEFAULT_STDIN_MARKER
    file_prefix: str | None = DEFAULT_FILE_PREFIX

    def __post_init__(self) -> None:
        if self.overlapping:
            warnings.warn(
                f"stdin marker {self.stdin_marker!r} also matches file prefix "
                f"{self.file_prefix!r}; it will be read from stdin"
            )

    @property
    def overlapping(self) -> bool:
        """True when the stdin marker would otherwise be taken as a file reference."""
        if self.stdin_marker is None or not self.file_prefix:
            return False
        return len(self.stdin_marker) > len(self.file_prefix) and self.stdin_marker.startswith(self.file_prefix)

    def replace(self, **changes) -> Config:
        return dataclasses.replace(self, **changes)

    def parse(self, raw: str) -> Input:
        from .registry import _REGISTRY
        return _REGISTRY.classify(raw, self)


DEFAULT_CONFIG = Config()
