# anise/core/errors.py
"""
Error hierarchy for ANISE.

Every data-driven failure (missing constants, malformed header bytes,
incompatible file versions) is raised as a subclass of `AniseError` so
callers can catch the whole family at once, or a single kind when they
need to report exactly what went wrong.

Invalid arguments passed by the caller (negative mu, non-finite radii...)
are plain `ValueError`s, like the rest of the configuration validation.
"""

from __future__ import annotations


class AniseError(Exception):
    """Base class of every ANISE failure."""


class NotFound(AniseError):
    """No planetary constants record matches the requested name."""

    def __init__(self, name: str):
        super().__init__(f"no planetary constants named {name!r}")
        self.name = name


class ParameterNotSpecified(AniseError):
    """A constants record exists but a required sub-field is absent."""

    def __init__(self, name: str, parameter: str):
        super().__init__(f"no {parameter} data associated with {name!r}")
        self.name = name
        self.parameter = parameter


class DecodeError(AniseError, ValueError):
    """
    A binary field could not be decoded.

    `offset` is the position in the input buffer where the offending
    field starts (or where the buffer ran out).
    """

    def __init__(self, message: str, offset: int = 0):
        super().__init__(f"{message} (at byte {offset})")
        self.offset = offset


class VersionIncompatible(AniseError):
    """The file was written by a newer major ANISE version than this reader."""

    def __init__(self, found, supported):
        super().__init__(
            f"file written with ANISE {found}, reader supports "
            f"major version {supported.major} ({supported})"
        )
        self.found = found
        self.supported = supported


class DuplicateName(AniseError):
    """A constants name is already registered in the store."""

    def __init__(self, name: str):
        super().__init__(f"planetary constants {name!r} are already registered")
        self.name = name


class HashCollision(AniseError):
    """Two distinct names map onto the same NAIF identity hash."""

    def __init__(self, name: str, other: str, naif_id: int):
        super().__init__(
            f"{name!r} and {other!r} share the identity hash {naif_id}"
        )
        self.name = name
        self.other = other
        self.naif_id = naif_id


__all__ = [
    "AniseError",
    "NotFound",
    "ParameterNotSpecified",
    "DecodeError",
    "VersionIncompatible",
    "DuplicateName",
    "HashCollision",
]
