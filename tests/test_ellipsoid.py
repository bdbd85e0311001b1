"""
Tests for body ellipsoids and planetary constants records.
"""
import pytest
from astropy import units as u

from anise import Ellipsoid, PlanetaryConstants
from anise.core.bodies import default_constants


def test_sphere():
    moon = Ellipsoid.from_sphere(1737.4)

    assert moon.is_sphere()
    assert moon.is_spheroid()
    assert moon.mean_equatorial_radius_km() == 1737.4
    assert moon.polar_radius_km() == 1737.4
    assert moon.flattening() == 0.0
    assert str(moon) == "radius = 1737.4 km"


def test_spheroid_from_radii():
    earth = Ellipsoid.from_spheroid(6378.137, 6356.752)

    assert not earth.is_sphere()
    assert earth.is_spheroid()
    assert earth.flattening() == pytest.approx((6378.137 - 6356.752) / 6378.137)
    assert earth.polar_radius_km() == pytest.approx(6356.752)
    assert "eq. radius = 6378.137 km" in str(earth)


def test_flattening_kept_exactly():
    earth = Ellipsoid.from_flattening(6378.1366, 0.0033528)

    assert earth.flattening() == 0.0033528
    assert earth.semi_major_equatorial_radius_km == 6378.1366


def test_triaxial():
    body = Ellipsoid(10.0, 8.0, 0.1)

    assert not body.is_spheroid()
    assert body.mean_equatorial_radius_km() == 9.0
    assert body.polar_radius_km() == pytest.approx(8.1)
    assert "major-eq. radius = 10.0 km" in str(body)


@pytest.mark.parametrize(
    "args",
    [
        (0.0, 0.0, 0.0),
        (-1.0, -1.0, 0.0),
        (10.0, 12.0, 0.0),
        (10.0, 10.0, 1.0),
        (10.0, 10.0, -0.1),
        (float("nan"), 1.0, 0.0),
    ],
)
def test_invalid_shapes(args):
    with pytest.raises(ValueError):
        Ellipsoid(*args)


def test_constants_from_quantities():
    earth = PlanetaryConstants.from_quantities(
        mu=3.986004418e14 * u.m**3 / u.s**2,
        semi_major_radius=6378137.0 * u.m,
        flattening=1 / 298.257223563,
        angular_velocity=360.0 * u.deg / u.day,
    )

    assert earth.mu_km3_s2 == pytest.approx(398600.4418)
    assert earth.shape.semi_major_equatorial_radius_km == pytest.approx(6378.137)
    assert earth.shape.flattening() == 1 / 298.257223563
    assert earth.angular_velocity_deg == pytest.approx(360.0 / 86400.0)


def test_constants_without_shape():
    mars = PlanetaryConstants.from_quantities(mu=42828.37 * u.km**3 / u.s**2)

    assert mars.shape is None
    assert mars.angular_velocity_deg is None
    assert mars.mu_km3_s2 == pytest.approx(42828.37)


def test_constants_reject_bad_units():
    with pytest.raises(u.UnitConversionError):
        PlanetaryConstants.from_quantities(mu=1.0 * u.km)


def test_constants_reject_negative_mu():
    with pytest.raises(ValueError):
        PlanetaryConstants(mu_km3_s2=-1.0)


def test_default_constants():
    constants = default_constants()

    assert set(constants) == {"Earth", "Mars", "Moon", "Sun"}
    assert all(c.shape is not None for c in constants.values())
    assert all(c.angular_velocity_deg is not None for c in constants.values())
    assert constants["Sun"].mu_km3_s2 == pytest.approx(1.32712440018e11, rel=1e-6)
