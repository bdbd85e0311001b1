"""
Reference Frames
================

Capability lattice, from least to most specific:

- Frame          : identity only (ephemeris hash, orientation hash)
- CelestialFrame : Frame + gravitational parameter
- GeodeticFrame  : CelestialFrame + shape + rotation rate

Each richer frame embeds the narrower one. Widening needs the extra data
(`from_frame`, `from_celestial_frame`); narrowing (`to_frame`,
`to_celestial_frame`) throws data away and cannot be undone.
"""

from .frame import Frame, FrameLike
from .celestial_frame import CelestialFrame, CelestialFrameLike
from .geodetic_frame import GeodeticFrame, GeodeticFrameLike

__all__ = [
    "Frame",
    "FrameLike",
    "CelestialFrame",
    "CelestialFrameLike",
    "GeodeticFrame",
    "GeodeticFrameLike",
]
