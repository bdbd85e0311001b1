# anise/frames/geodetic_frame.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from anise.core.naif import NaifId
from anise.frames.celestial_frame import CelestialFrame, CelestialFrameLike
from anise.frames.frame import Frame
from anise.shapes.ellipsoid import Ellipsoid


@runtime_checkable
class GeodeticFrameLike(CelestialFrameLike, Protocol):
    """A celestial frame whose shape and rotation rate are defined."""

    def mean_equatorial_radius_km(self) -> float: ...

    def semi_major_radius_km(self) -> float: ...

    def flattening(self) -> float: ...

    def angular_velocity_deg_s(self) -> float: ...


@dataclass(frozen=True)
class GeodeticFrame:
    """
    A CelestialFrame whose equatorial radii, flattening and mean rotation
    rate are defined.

    angular_velocity_deg : mean rotation rate [deg/s], the sign gives the
        direction of rotation.
    """
    celestial_frame: CelestialFrame
    shape: Ellipsoid
    angular_velocity_deg: float

    def __post_init__(self):
        if not isinstance(self.celestial_frame, CelestialFrame):
            raise TypeError("celestial_frame must be a CelestialFrame")
        if not isinstance(self.shape, Ellipsoid):
            raise TypeError("shape must be an Ellipsoid")
        if not math.isfinite(self.angular_velocity_deg):
            raise ValueError("angular velocity must be finite")

    @classmethod
    def from_celestial_frame(
        cls,
        celestial_frame: CelestialFrame,
        shape: Ellipsoid,
        angular_velocity_deg: float,
    ) -> "GeodeticFrame":
        """Widen a celestial frame by supplying its shape and rotation rate."""
        return cls(celestial_frame, shape, angular_velocity_deg)

    # Frame
    def ephemeris_hash(self) -> NaifId:
        return self.celestial_frame.ephemeris_hash()

    def orientation_hash(self) -> NaifId:
        return self.celestial_frame.orientation_hash()

    # CelestialFrame
    def mu_km3_s2(self) -> float:
        return self.celestial_frame.mu_km3_s2()

    # GeodeticFrame
    def mean_equatorial_radius_km(self) -> float:
        return self.shape.mean_equatorial_radius_km()

    def semi_major_radius_km(self) -> float:
        return self.shape.semi_major_equatorial_radius_km

    def flattening(self) -> float:
        return self.shape.flattening()

    def angular_velocity_deg_s(self) -> float:
        return self.angular_velocity_deg

    # Narrowing

    def to_celestial_frame(self) -> CelestialFrame:
        """Lossy: drops the shape and the rotation rate."""
        return self.celestial_frame

    def to_frame(self) -> Frame:
        """
        Lossy: drops mu, shape and rotation rate, keeping only the identity.

        There is no way back; resolve the frame again through a Context to
        get its constants.
        """
        return self.celestial_frame.to_frame()

    def __str__(self) -> str:
        return f"{self.celestial_frame.frame} (μ = {self.mu_km3_s2()} km3/s, {self.shape})"
