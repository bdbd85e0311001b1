# anise/core/naif.py
"""
NAIF identity hashes.

A `NaifId` is an opaque integer identity for a body or a reference frame.
It only supports exact equality; there is no arithmetic meaning to it.

Names are mapped onto identities with a stable hash (CRC-32 of the UTF-8
bytes), so the same name gives the same identity across processes,
platforms and Python versions (unlike the builtin `hash()`).
"""

from __future__ import annotations

import zlib

NaifId = int


def validate_name(name: str) -> str:
    """
    Check that `name` is usable as a frame or constants name.

    Names are matched exactly (case-sensitive), so empty names and names
    with surrounding whitespace are rejected instead of being silently
    normalized into something the caller did not type.
    """
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")
    if not name:
        raise ValueError("name must not be empty")
    if name != name.strip():
        raise ValueError(f"name {name!r} has surrounding whitespace")
    return name


def hash_name(name: str) -> NaifId:
    """Stable identity hash of a name (unsigned 32-bit CRC)."""
    return zlib.crc32(validate_name(name).encode("utf-8")) & 0xFFFFFFFF


__all__ = ["NaifId", "validate_name", "hash_name"]
