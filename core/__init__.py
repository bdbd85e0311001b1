"""
Core Types
==========

- NAIF identity hashes and the stable name-hash scheme.
- Planetary constants records and bundled defaults.
- The ANISE error hierarchy.
"""

from .errors import (
    AniseError,
    NotFound,
    ParameterNotSpecified,
    DecodeError,
    VersionIncompatible,
    DuplicateName,
    HashCollision,
)
from .naif import NaifId, hash_name, validate_name
from .bodies import PlanetaryConstants, default_constants

__all__ = [
    # errors
    "AniseError",
    "NotFound",
    "ParameterNotSpecified",
    "DecodeError",
    "VersionIncompatible",
    "DuplicateName",
    "HashCollision",
    # identities
    "NaifId",
    "hash_name",
    "validate_name",
    # constants
    "PlanetaryConstants",
    "default_constants",
]
