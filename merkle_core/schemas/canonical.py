"""
Schemas & Canonicalization
File: canonical.py

Purpose: Deterministic JSON rendering of layer tables and tree summaries.
Byte values are rendered as lowercase hex.

All outputs from this module are deterministic across runs.
"""

import json
from typing import Any

from .errors import CanonicalizationException

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Recursively convert a value to JSON-ready primitives.

    Byte strings become hex, tuples become lists and dict keys become
    strings. Only the shapes a tree renders are supported.

    Raises:
        CanonicalizationException: If the value has an unsupported type.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()

    if isinstance(value, (str, int)):
        return value

    if isinstance(value, dict):
        return {
            str(k): canonicalize_value(v, f"{path}.{k}" if path else str(k))
            for k, v in value.items()
        }

    if isinstance(value, (list, tuple)):
        return [
            canonicalize_value(item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Produces compact output (no whitespace) with sorted keys, so the
    same tree always renders to the same string.

    Example:
        >>> dumps_canonical([[b"\\x01", b"\\x02"], [b"\\x03"]])
        '[["01","02"],["03"]]'
    """
    return json.dumps(
        canonicalize_value(obj),
        sort_keys=True,
        separators=CANONICAL_JSON_SEPARATORS,
    )
