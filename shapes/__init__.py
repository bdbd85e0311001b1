"""
Body Shapes
===========

Currently:
- Tri-axial ellipsoid (sphere and oblate spheroid as special cases).
"""

from .ellipsoid import Ellipsoid

__all__ = [
    "Ellipsoid",
]
