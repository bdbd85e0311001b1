# anise/core/bodies.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from astropy import constants as const
from astropy import units as u

from anise.shapes.ellipsoid import Ellipsoid

MU_UNIT = u.km**3 / u.s**2
ANGULAR_VELOCITY_UNIT = u.deg / u.s


@dataclass(frozen=True)
class PlanetaryConstants:
    """
    Physical constants record of a body, as stored in a `Context`.

    mu_km3_s2 : gravitational parameter [km^3/s^2]
    shape : body ellipsoid, None if the catalog does not provide one
    angular_velocity_deg : mean rotation rate [deg/s], None if unknown
    """
    mu_km3_s2: float
    shape: Optional[Ellipsoid] = None
    angular_velocity_deg: Optional[float] = None

    def __post_init__(self):
        if not math.isfinite(self.mu_km3_s2) or self.mu_km3_s2 < 0.0:
            raise ValueError(f"mu must be non-negative and finite, got {self.mu_km3_s2}")
        if self.angular_velocity_deg is not None and not math.isfinite(self.angular_velocity_deg):
            raise ValueError("angular velocity must be finite")

    @classmethod
    def from_quantities(
        cls,
        mu: u.Quantity,
        semi_major_radius: Optional[u.Quantity] = None,
        flattening: float = 0.0,
        angular_velocity: Optional[u.Quantity] = None,
    ) -> "PlanetaryConstants":
        """
        Build a record from astropy quantities (any compatible units).

        This is the only place where units get converted: everything
        downstream works in km, km^3/s^2 and deg/s.
        """
        shape = None
        if semi_major_radius is not None:
            shape = Ellipsoid.from_flattening(
                float(semi_major_radius.to_value(u.km)), flattening
            )
        rate = None
        if angular_velocity is not None:
            rate = float(angular_velocity.to_value(ANGULAR_VELOCITY_UNIT))
        return cls(
            mu_km3_s2=float(mu.to_value(MU_UNIT)),
            shape=shape,
            angular_velocity_deg=rate,
        )


# Known bodies (IAU 2015 radii and rotation rates)
EARTH = PlanetaryConstants.from_quantities(
    mu=const.GM_earth,
    semi_major_radius=6378.1366 * u.km,
    flattening=0.0033528,
    angular_velocity=360.9856235 * u.deg / u.day,
)

MARS = PlanetaryConstants.from_quantities(
    mu=4.282837e4 * MU_UNIT,
    semi_major_radius=3396.19 * u.km,
    flattening=0.005886,
    angular_velocity=350.89198226 * u.deg / u.day,
)

MOON = PlanetaryConstants.from_quantities(
    mu=4902.800066 * MU_UNIT,
    semi_major_radius=1737.4 * u.km,
    angular_velocity=13.17635815 * u.deg / u.day,
)

SUN = PlanetaryConstants.from_quantities(
    mu=const.GM_sun,
    semi_major_radius=const.R_sun,
    angular_velocity=14.1844 * u.deg / u.day,
)


def default_constants() -> Dict[str, PlanetaryConstants]:
    """Constants bundled with the library, keyed by body name."""
    return {
        "Earth": EARTH,
        "Mars": MARS,
        "Moon": MOON,
        "Sun": SUN,
    }


__all__ = [
    "PlanetaryConstants",
    "EARTH",
    "MARS",
    "MOON",
    "SUN",
    "default_constants",
]
