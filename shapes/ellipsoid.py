# anise/shapes/ellipsoid.py
"""
Tri-axial ellipsoid shape of a celestial body.

The shape is stored as the two equatorial radii plus the flattening
coefficient, so that a flattening published in a constants catalog is
returned exactly as published (and not re-derived from a polar radius
with a rounding error).

All radii are in kilometers, flattening is unit-less.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Ellipsoid:
    """
    Ellipsoid of a body.

    Parameters
    ----------
    semi_major_equatorial_radius_km : float
        Largest equatorial radius [km].
    semi_minor_equatorial_radius_km : float
        Smallest equatorial radius [km]. Equal to the semi-major radius
        for a spheroid.
    flattening_coeff : float
        Flattening, relative to the mean equatorial radius, in [0, 1).
    """
    semi_major_equatorial_radius_km: float
    semi_minor_equatorial_radius_km: float
    flattening_coeff: float = 0.0

    def __post_init__(self):
        for label, value in (
            ("semi-major equatorial radius", self.semi_major_equatorial_radius_km),
            ("semi-minor equatorial radius", self.semi_minor_equatorial_radius_km),
        ):
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"{label} must be positive and finite, got {value}")
        if self.semi_minor_equatorial_radius_km > self.semi_major_equatorial_radius_km:
            raise ValueError("semi-minor equatorial radius exceeds the semi-major one")
        if not math.isfinite(self.flattening_coeff) or not 0.0 <= self.flattening_coeff < 1.0:
            raise ValueError(f"flattening must be in [0, 1), got {self.flattening_coeff}")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_sphere(cls, radius_km: float) -> "Ellipsoid":
        return cls(radius_km, radius_km, 0.0)

    @classmethod
    def from_spheroid(cls, equatorial_radius_km: float, polar_radius_km: float) -> "Ellipsoid":
        """Oblate spheroid from its equatorial and polar radii [km]."""
        if not math.isfinite(polar_radius_km) or polar_radius_km <= 0.0:
            raise ValueError(f"polar radius must be positive and finite, got {polar_radius_km}")
        flattening = (equatorial_radius_km - polar_radius_km) / equatorial_radius_km
        return cls(equatorial_radius_km, equatorial_radius_km, flattening)

    @classmethod
    def from_flattening(cls, semi_major_radius_km: float, flattening: float) -> "Ellipsoid":
        """Oblate spheroid from its equatorial radius [km] and flattening."""
        return cls(semi_major_radius_km, semi_major_radius_km, flattening)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def mean_equatorial_radius_km(self) -> float:
        return 0.5 * (self.semi_major_equatorial_radius_km + self.semi_minor_equatorial_radius_km)

    def polar_radius_km(self) -> float:
        return self.mean_equatorial_radius_km() * (1.0 - self.flattening_coeff)

    def flattening(self) -> float:
        return self.flattening_coeff

    def is_sphere(self) -> bool:
        return self.is_spheroid() and self.flattening_coeff == 0.0

    def is_spheroid(self) -> bool:
        return self.semi_major_equatorial_radius_km == self.semi_minor_equatorial_radius_km

    def __str__(self) -> str:
        if self.is_sphere():
            return f"radius = {self.semi_major_equatorial_radius_km} km"
        if self.is_spheroid():
            return (
                f"eq. radius = {self.semi_major_equatorial_radius_km} km, "
                f"polar radius = {self.polar_radius_km()} km, f = {self.flattening_coeff}"
            )
        return (
            f"major-eq. radius = {self.semi_major_equatorial_radius_km} km, "
            f"minor-eq. radius = {self.semi_minor_equatorial_radius_km} km, "
            f"polar radius = {self.polar_radius_km()} km, f = {self.flattening_coeff}"
        )


__all__ = ["Ellipsoid"]
