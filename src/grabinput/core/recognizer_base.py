from abc import ABC, abstractmethod
from typing import ClassVar

from .config import Config
from .model import Input


class SourceRecognizer(ABC):
    # --- required by subclasses ---
    name: ClassVar[str]                     # short label, used in listings
    priority: ClassVar[int] = 100           # lower = examined earlier

    @classmethod
    @abstractmethod
    def recognize(cls, raw: str, config: Config) -> Input | None:
        """Return a descriptor for ``raw``, or None if this source does not apply."""
        ...

    # --- registry hook (opt-in) ---
    def __init_subclass__(cls, register: bool = False, **kw):
        super().__init_subclass__(**kw)
        if register:
            from .registry import _REGISTRY
            _REGISTRY.register(cls)           # noqa: E402
