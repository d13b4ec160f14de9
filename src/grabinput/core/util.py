from __future__ import annotations
from typing import Dict, Any

from .model import File, Input, Text


def input_asdict(source: Input) -> Dict[str, Any]:
    """Return a JSON-serialisable dict describing a descriptor."""
    payload: Dict[str, Any] = {"source": source.kind}
    if isinstance(source, Text):
        payload["value"] = source.value
    elif isinstance(source, File):
        payload["path"] = source.path
    return payload
