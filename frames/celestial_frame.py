# anise/frames/celestial_frame.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from anise.core.naif import NaifId
from anise.frames.frame import Frame, FrameLike


@runtime_checkable
class CelestialFrameLike(FrameLike, Protocol):
    """A frame which also defines a standard gravitational parameter."""

    def mu_km3_s2(self) -> float: ...


@dataclass(frozen=True)
class CelestialFrame:
    """
    A Frame plus the gravitational parameter of its center [km^3/s^2].

    Identity is delegated to the embedded `frame`, never stored twice.
    """
    frame: Frame
    gravitational_parameter_km3_s2: float

    def __post_init__(self):
        if not isinstance(self.frame, Frame):
            raise TypeError(f"frame must be a Frame, got {type(self.frame).__name__}")
        mu = self.gravitational_parameter_km3_s2
        if not math.isfinite(mu) or mu < 0.0:
            raise ValueError(f"mu must be non-negative and finite, got {mu}")

    @classmethod
    def from_frame(cls, frame: Frame, mu_km3_s2: float) -> "CelestialFrame":
        """Widen a bare frame by supplying its gravitational parameter."""
        return cls(frame, mu_km3_s2)

    def ephemeris_hash(self) -> NaifId:
        return self.frame.ephemeris_hash()

    def orientation_hash(self) -> NaifId:
        return self.frame.orientation_hash()

    def mu_km3_s2(self) -> float:
        return self.gravitational_parameter_km3_s2

    def to_frame(self) -> Frame:
        """Lossy: drops the gravitational parameter."""
        return self.frame

    def __str__(self) -> str:
        return f"{self.frame} (μ = {self.mu_km3_s2()} km3/s)"
