"""grabinput - accept one CLI input as literal text, stdin or a file."""

import os

from .core.config import Config, DEFAULT_CONFIG                      # re-export
from .core.model import (                                             # re-export
    Input, Text, Stdin, File,
    GrabError, AccessError, NotFoundError, PermissionDeniedError,
    ReadError, InvalidEncodingError, HandleConsumedError,
    AccessErrorKind, ReadErrorKind,
)
from .core.registry import _REGISTRY                                  # singleton
from .io import access, Handle

# Import recognizers to trigger registration
from .sources import stdin, file, text  # noqa: F401


def parse(raw: str, config: Config = DEFAULT_CONFIG) -> Input:
    """Classify a raw argument as stdin, a file reference or literal text. Never fails."""
    return _REGISTRY.classify(raw, config)


def parse_default(raw: str) -> Input:
    """Classify with the default sigils: ``-`` for stdin, ``@path`` for files."""
    return parse(raw, DEFAULT_CONFIG)


def parse_bytes(raw: bytes, config: Config = DEFAULT_CONFIG) -> Input:
    """Classify a raw OS-level argument.

    Undecodable bytes are kept as surrogate escapes, the same way Python
    decodes ``sys.argv``, so this never fails either.
    """
    return parse(os.fsdecode(raw), config)


__all__ = [
    "parse", "parse_default", "parse_bytes", "access",
    "Config", "DEFAULT_CONFIG",
    "Input", "Text", "Stdin", "File", "Handle",
    "GrabError", "AccessError", "NotFoundError", "PermissionDeniedError",
    "ReadError", "InvalidEncodingError", "HandleConsumedError",
    "AccessErrorKind", "ReadErrorKind",
]
