"""
Tests for planetary constants stores and frame resolution.
"""
import logging

import pytest

from anise import (
    Context,
    DuplicateName,
    Ellipsoid,
    Frame,
    GeodeticFrame,
    HashCollision,
    NotFound,
    ParameterNotSpecified,
    PlanetaryConstants,
    hash_name,
)


EARTH = PlanetaryConstants(
    mu_km3_s2=398600.4418,
    shape=Ellipsoid.from_flattening(6378.1366, 0.0033528),
    angular_velocity_deg=0.0041780746,
)
MARS_NO_SHAPE = PlanetaryConstants(mu_km3_s2=42828.37, angular_velocity_deg=0.0040612)
MOON = PlanetaryConstants(
    mu_km3_s2=4902.800066,
    shape=Ellipsoid.from_sphere(1737.4),
    angular_velocity_deg=0.000152504,
)


@pytest.fixture
def ctx():
    return Context({"Earth": EARTH, "Mars": MARS_NO_SHAPE, "Moon": MOON})


def test_resolve_geodetic_earth(ctx):
    g = ctx.resolve_geodetic("Earth", "IAU_EARTH")

    assert isinstance(g, GeodeticFrame)
    assert g.mu_km3_s2() == 398600.4418
    assert g.semi_major_radius_km() == 6378.1366
    assert g.mean_equatorial_radius_km() == 6378.1366
    assert g.flattening() == 0.0033528
    assert g.angular_velocity_deg_s() == 0.0041780746
    assert g.ephemeris_hash() == hash_name("Earth")
    assert g.orientation_hash() == hash_name("IAU_EARTH")


def test_resolve_geodetic_missing_shape(ctx):
    with pytest.raises(ParameterNotSpecified) as exc:
        ctx.resolve_geodetic("Mars", "IAU_MARS")

    assert exc.value.name == "Mars"
    assert exc.value.parameter == "shape"
    assert "Mars" in str(exc.value)
    assert "shape" in str(exc.value)


def test_resolve_geodetic_missing_record(ctx):
    with pytest.raises(NotFound) as exc:
        ctx.resolve_geodetic("Pluto", "IAU_PLUTO")

    assert exc.value.name == "Pluto"
    assert "Pluto" in str(exc.value)


def test_resolve_geodetic_missing_rotation_rate():
    ctx = Context({"Vesta": PlanetaryConstants(17.8, Ellipsoid(286.3, 278.6, 0.2))})

    with pytest.raises(ParameterNotSpecified) as exc:
        ctx.resolve_geodetic("Vesta", "IAU_VESTA")

    assert exc.value.name == "Vesta"
    assert exc.value.parameter == "angular_velocity_deg"


def test_resolve_geodetic_from_other_constants(ctx):
    g = ctx.resolve_geodetic_from("LRO", "IAU_MOON", "Moon")

    assert g.ephemeris_hash() == hash_name("LRO")
    assert g.orientation_hash() == hash_name("IAU_MOON")
    assert g.mu_km3_s2() == MOON.mu_km3_s2
    assert g.shape == MOON.shape


def test_resolve_geodetic_from_reports_constants_name(ctx):
    with pytest.raises(NotFound) as exc:
        ctx.resolve_geodetic_from("Earth", "IAU_EARTH", "EarthWGS84")
    assert exc.value.name == "EarthWGS84"


def test_lookup_is_case_sensitive(ctx):
    with pytest.raises(NotFound):
        ctx.resolve_geodetic("earth", "IAU_EARTH")


def test_resolve_celestial_needs_only_mu(ctx):
    c = ctx.resolve_celestial("Mars", "IAU_MARS")

    assert c.mu_km3_s2() == 42828.37
    assert c.to_frame() == Frame.from_names("Mars", "IAU_MARS")


def test_resolve_frame_has_no_lookup(ctx):
    frame = ctx.resolve_frame("Pluto", "IAU_PLUTO")
    assert frame == Frame(hash_name("Pluto"), hash_name("IAU_PLUTO"))


def test_narrowed_frame_matches_resolved_identity(ctx):
    g = ctx.resolve_geodetic("Earth", "IAU_EARTH")
    assert g.to_frame() == ctx.resolve_frame("Earth", "IAU_EARTH")


def test_resolution_logs_missing_name(ctx, caplog):
    with caplog.at_level(logging.ERROR, logger="anise.context"):
        with pytest.raises(NotFound):
            ctx.resolve_geodetic("Pluto", "IAU_PLUTO")
    assert "Pluto" in caplog.text


# --------------------------------------------------------------
# Store
# --------------------------------------------------------------

def test_store_accessors(ctx):
    assert len(ctx) == 3
    assert "Earth" in ctx
    assert "Pluto" not in ctx
    assert ctx.names() == ("Earth", "Mars", "Moon")
    assert ctx.constants("Moon") is MOON


def test_register_returns_new_context(ctx):
    pluto = PlanetaryConstants(869.6, Ellipsoid.from_sphere(1188.3), -0.0006)
    bigger = ctx.register("Pluto", pluto)

    assert "Pluto" in bigger
    assert "Pluto" not in ctx
    assert bigger.resolve_geodetic("Pluto", "IAU_PLUTO").angular_velocity_deg_s() == -0.0006


def test_register_rejects_existing_name(ctx):
    with pytest.raises(DuplicateName) as exc:
        ctx.register("Earth", MOON)
    assert exc.value.name == "Earth"
    assert ctx.constants("Earth") is EARTH


def test_duplicate_pairs_rejected():
    with pytest.raises(DuplicateName):
        Context([("Earth", EARTH), ("Earth", MOON)])


def test_hash_collision_rejected(monkeypatch):
    monkeypatch.setattr("anise.context.hash_name", lambda name: 42)

    with pytest.raises(HashCollision) as exc:
        Context({"Alpha": EARTH, "Beta": MOON})

    assert exc.value.name == "Beta"
    assert exc.value.other == "Alpha"
    assert exc.value.naif_id == 42


@pytest.mark.parametrize("name", ["", " Earth", "Earth\n"])
def test_invalid_names_rejected(name):
    with pytest.raises(ValueError):
        Context({name: EARTH})


def test_wrong_record_type_rejected():
    with pytest.raises(TypeError):
        Context({"Earth": {"mu_km3_s2": 398600.4418}})


def test_default_context():
    ctx = Context.with_defaults()

    g = ctx.resolve_geodetic("Earth", "IAU_EARTH")
    assert g.mu_km3_s2() == pytest.approx(398600.4418)
    assert g.semi_major_radius_km() == 6378.1366
    assert g.flattening() == 0.0033528
    assert g.angular_velocity_deg_s() == pytest.approx(0.0041780746, rel=1e-6)

    assert set(ctx.names()) >= {"Earth", "Mars", "Moon", "Sun"}
