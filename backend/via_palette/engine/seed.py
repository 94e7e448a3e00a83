"""Reproducible seeds for otherwise-arbitrary palette choices.

FNV-1a (32-bit) over the UTF-8 bytes of a canonical text form. Identical
answers give identical seeds regardless of key order. This is a mixing hash,
not a cryptographic one: seeds are predictable and must not be used where an
adversary could exploit the choice.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


def fnv1a_32(data: bytes) -> int:
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & _MASK_32
    return h


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(obj, (set, frozenset)):
        return sorted(str(item) for item in obj)
    if isinstance(obj, bytes):
        return obj.hex()
    return str(obj)


def canonical_text(value: Any) -> str:
    """Text form that is stable across key order and formatting."""
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        value = _json_default(value)
    try:
        return json.dumps(
            value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=_json_default
        )
    except (TypeError, ValueError):
        # Mixed-type keys cannot be sorted; circular data cannot be dumped at all
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)
        except (TypeError, ValueError):
            return repr(value)


def hash_seed(value: Any) -> str:
    """Hash any value to a lowercase hex seed (no zero padding)."""
    return format(fnv1a_32(canonical_text(value).encode("utf-8")), "x")
