"""
ANISE
=====

Reference frames and file metadata for ANISE ephemeris and planetary
constants data.

Subpackages / modules:
- anise.core           : NAIF identity hashes, planetary constants, errors
- anise.shapes         : body ellipsoids
- anise.frames         : Frame -> CelestialFrame -> GeodeticFrame
- anise.structure      : Semver, Epoch and the Metadata file header
- anise.context        : constants store and frame resolution
- anise.config         : runtime configuration
- anise.logging_config : opt-in logging setup
"""

from .core import (
    AniseError,
    NotFound,
    ParameterNotSpecified,
    DecodeError,
    VersionIncompatible,
    DuplicateName,
    HashCollision,
    NaifId,
    hash_name,
    PlanetaryConstants,
)
from .shapes import Ellipsoid
from .frames import Frame, CelestialFrame, GeodeticFrame
from .structure import Semver, ANISE_VERSION, Epoch, Metadata
from .context import Context
from .config import AniseConfig

__all__ = [
    "AniseError",
    "NotFound",
    "ParameterNotSpecified",
    "DecodeError",
    "VersionIncompatible",
    "DuplicateName",
    "HashCollision",
    "NaifId",
    "hash_name",
    "PlanetaryConstants",
    "Ellipsoid",
    "Frame",
    "CelestialFrame",
    "GeodeticFrame",
    "Semver",
    "ANISE_VERSION",
    "Epoch",
    "Metadata",
    "Context",
    "AniseConfig",
]

__version__ = "0.1.0"
