# anise/context.py
"""
ANISE Context
-------------

A `Context` owns an (immutable) store of planetary constants and resolves
frame names into frames carrying those constants.

Resolution
----------
- `resolve_frame`            : names -> Frame (identity only, no lookup)
- `resolve_celestial[_from]` : names -> CelestialFrame (needs mu)
- `resolve_geodetic[_from]`  : names -> GeodeticFrame (needs mu, shape,
                               rotation rate)

The `_from` variants take a separate constants name. The identity of a
frame (which center, which orientation) does not have to match the name of
the constants record: a spacecraft-relative frame can share its parent
body's constants under another name.

Lookups are exact and case-sensitive. The store is built once; `register`
returns a new Context rather than changing this one.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from anise.core.bodies import PlanetaryConstants, default_constants
from anise.core.errors import DuplicateName, HashCollision, NotFound, ParameterNotSpecified
from anise.core.naif import NaifId, hash_name
from anise.frames.celestial_frame import CelestialFrame
from anise.frames.frame import Frame
from anise.frames.geodetic_frame import GeodeticFrame

logger = logging.getLogger(__name__)

ConstantsSource = Union[
    Mapping[str, PlanetaryConstants],
    Iterable[Tuple[str, PlanetaryConstants]],
]


class Context:
    """Planetary constants store and frame resolver."""

    def __init__(self, constants: Optional[ConstantsSource] = None):
        store: Dict[str, PlanetaryConstants] = {}
        ids: Dict[NaifId, str] = {}

        if constants is None:
            items: Iterable[Tuple[str, PlanetaryConstants]] = ()
        elif isinstance(constants, Mapping):
            items = constants.items()
        else:
            items = constants

        for name, record in items:
            naif_id = hash_name(name)
            if name in store:
                raise DuplicateName(name)
            if naif_id in ids:
                raise HashCollision(name, ids[naif_id], naif_id)
            if not isinstance(record, PlanetaryConstants):
                raise TypeError(
                    f"constants for {name!r} must be PlanetaryConstants, "
                    f"got {type(record).__name__}"
                )
            store[name] = record
            ids[naif_id] = name

        self._constants = MappingProxyType(store)
        logger.debug(f"Context loaded with {len(store)} planetary constants record(s)")

    @classmethod
    def with_defaults(cls) -> "Context":
        """Context over the constants bundled with the library."""
        return cls(default_constants())

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    def register(self, name: str, constants: PlanetaryConstants) -> "Context":
        """Return a new Context that also holds `constants` under `name`."""
        return Context(list(self._constants.items()) + [(name, constants)])

    def constants(self, name: str) -> PlanetaryConstants:
        try:
            return self._constants[name]
        except KeyError:
            logger.error(f"No planetary constants named {name!r}")
            raise NotFound(name) from None

    def names(self) -> Tuple[str, ...]:
        return tuple(self._constants)

    def __contains__(self, name: object) -> bool:
        return name in self._constants

    def __len__(self) -> int:
        return len(self._constants)

    def __iter__(self) -> Iterator[str]:
        return iter(self._constants)

    def __repr__(self) -> str:
        return f"Context({', '.join(self._constants) or 'empty'})"

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_frame(self, ephemeris_name: str, orientation_name: str) -> Frame:
        return Frame.from_names(ephemeris_name, orientation_name)

    def resolve_celestial(self, ephemeris_name: str, orientation_name: str) -> CelestialFrame:
        return self.resolve_celestial_from(ephemeris_name, orientation_name, ephemeris_name)

    def resolve_celestial_from(
        self,
        ephemeris_name: str,
        orientation_name: str,
        constants_name: str,
    ) -> CelestialFrame:
        constants = self.constants(constants_name)
        return CelestialFrame(
            Frame.from_names(ephemeris_name, orientation_name),
            constants.mu_km3_s2,
        )

    def resolve_geodetic(self, ephemeris_name: str, orientation_name: str) -> GeodeticFrame:
        """
        Geodetic frame of `ephemeris_name` in `orientation_name`.

        The planetary constants are looked up under `ephemeris_name`; use
        `resolve_geodetic_from` to take them from another record.
        """
        return self.resolve_geodetic_from(ephemeris_name, orientation_name, ephemeris_name)

    def resolve_geodetic_from(
        self,
        ephemeris_name: str,
        orientation_name: str,
        constants_name: str,
    ) -> GeodeticFrame:
        """
        Geodetic frame whose identity comes from the ephemeris and orientation
        names, and whose mu, shape and rotation rate come from the constants
        record named `constants_name`.

        Raises
        ------
        NotFound
            No record named `constants_name`.
        ParameterNotSpecified
            The record has no shape, or no rotation rate.
        """
        constants = self.constants(constants_name)

        if constants.shape is None:
            logger.error(f"No shape data associated with {constants_name!r}")
            raise ParameterNotSpecified(constants_name, "shape")

        if constants.angular_velocity_deg is None:
            logger.error(f"No angular velocity associated with {constants_name!r}")
            raise ParameterNotSpecified(constants_name, "angular_velocity_deg")

        frame = GeodeticFrame(
            celestial_frame=CelestialFrame(
                Frame.from_names(ephemeris_name, orientation_name),
                constants.mu_km3_s2,
            ),
            shape=constants.shape,
            angular_velocity_deg=constants.angular_velocity_deg,
        )
        logger.debug(
            f"Resolved {ephemeris_name}/{orientation_name} "
            f"with constants of {constants_name}: {frame}"
        )
        return frame


__all__ = ["Context"]
