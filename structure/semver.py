# anise/structure/semver.py
"""Semantic version triple, used to gate file compatibility."""

from __future__ import annotations

from dataclasses import dataclass

from anise.structure import der


@dataclass(frozen=True, order=True)
class Semver:
    major: int
    minor: int
    patch: int

    def __post_init__(self):
        for label, value in (("major", self.major), ("minor", self.minor), ("patch", self.patch)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{label} version must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{label} version must not be negative, got {value}")

    @classmethod
    def parse(cls, text: str) -> "Semver":
        """Parse `"MAJOR.MINOR.PATCH"`."""
        parts = text.strip().split(".")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"invalid semantic version {text!r}")
        return cls(*(int(p) for p in parts))

    def is_compatible_with(self, supported: "Semver") -> bool:
        """True if a reader at `supported` can read data written at this version."""
        return self.major <= supported.major

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    # DER: SEQUENCE { INTEGER major, INTEGER minor, INTEGER patch }

    def _content(self) -> der.Writer:
        inner = der.Writer()
        inner.write_integer(self.major)
        inner.write_integer(self.minor)
        inner.write_integer(self.patch)
        return inner

    def encoded_len(self) -> int:
        return der.tlv_len(len(self._content()))

    def encode(self, writer: der.Writer) -> None:
        writer.write_sequence(self._content())

    @classmethod
    def decode(cls, reader: der.Reader) -> "Semver":
        seq = reader.read_sequence("ANISE version")
        version = cls(
            seq.read_unsigned("major version"),
            seq.read_unsigned("minor version"),
            seq.read_unsigned("patch version"),
        )
        seq.finish("ANISE version")
        return version


ANISE_VERSION = Semver(0, 1, 0)

__all__ = ["Semver", "ANISE_VERSION"]
