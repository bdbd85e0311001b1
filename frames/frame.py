# anise/frames/frame.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from anise.core.naif import NaifId, hash_name


@runtime_checkable
class FrameLike(Protocol):
    """Anything that carries a frame identity."""

    def ephemeris_hash(self) -> NaifId: ...

    def orientation_hash(self) -> NaifId: ...


@dataclass(frozen=True)
class Frame:
    """
    Bare frame identity: the hash of the ephemeris center and the hash of
    the orientation. Two frames are the same frame iff both hashes match.
    """
    ephemeris_id: NaifId
    orientation_id: NaifId

    @classmethod
    def from_names(cls, ephemeris_name: str, orientation_name: str) -> "Frame":
        return cls(hash_name(ephemeris_name), hash_name(orientation_name))

    def ephemeris_hash(self) -> NaifId:
        return self.ephemeris_id

    def orientation_hash(self) -> NaifId:
        return self.orientation_id

    def __str__(self) -> str:
        return f"Frame #{self.ephemeris_id} (orientation #{self.orientation_id})"
