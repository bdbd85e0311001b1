"""
File Structure
==============

Versioned records written at the start of ANISE files:
- Semver  : compatibility version triple
- Epoch   : exact TAI timestamp
- Metadata: the file header (version, creation date, originator, URI)
"""

from .semver import Semver, ANISE_VERSION
from .epoch import Epoch, Clock
from .metadata import Metadata

__all__ = [
    "Semver",
    "ANISE_VERSION",
    "Epoch",
    "Clock",
    "Metadata",
]
