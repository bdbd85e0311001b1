# anise/structure/epoch.py
"""
ANISE epochs.

An `Epoch` is a TAI duration since 1900-01-01T00:00:00 TAI, held as an
integer number of centuries plus an integer number of nanoseconds into
that century. Integer storage gives exact equality and a total order,
which floating point Julian dates do not, so a header written and read
back compares equal field for field.

Calendar conversions are delegated to `astropy.time`.

Notes
-----
`Metadata.default()` needs "now". Wall clock reads go through a `Clock`
(any zero-argument callable returning an `Epoch`), which tests replace
with a fixed value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from astropy.time import Time, TimeDelta
from erfa import ErfaError

from anise.core.errors import DecodeError
from anise.structure import der

NANOSECONDS_PER_SECOND = 1_000_000_000
NANOSECONDS_PER_DAY = 86_400 * NANOSECONDS_PER_SECOND
DAYS_PER_CENTURY = 36_525
NANOSECONDS_PER_CENTURY = DAYS_PER_CENTURY * NANOSECONDS_PER_DAY

J1900_TAI = Time("1900-01-01T00:00:00", scale="tai")


@dataclass(frozen=True, order=True)
class Epoch:
    centuries: int
    nanoseconds: int

    def __post_init__(self):
        for label, value in (("centuries", self.centuries), ("nanoseconds", self.nanoseconds)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{label} must be an int, got {value!r}")
        if not 0 <= self.nanoseconds < NANOSECONDS_PER_CENTURY:
            raise ValueError(
                f"nanoseconds must be in [0, {NANOSECONDS_PER_CENTURY}), got {self.nanoseconds}"
            )

    # -------------------------------
    # Constructors
    # -------------------------------

    @classmethod
    def from_total_nanoseconds(cls, total: int) -> "Epoch":
        """Epoch `total` TAI nanoseconds after (or before, if negative) J1900."""
        centuries, nanoseconds = divmod(total, NANOSECONDS_PER_CENTURY)
        return cls(centuries, nanoseconds)

    @classmethod
    def from_tai_seconds(cls, seconds: float) -> "Epoch":
        return cls.from_total_nanoseconds(int(round(seconds * NANOSECONDS_PER_SECOND)))

    @classmethod
    def from_time(cls, t: Time) -> "Epoch":
        """
        Convert an astropy `Time` (any scale) to an Epoch.

        Sub-nanosecond parts are rounded to the nearest nanosecond.
        """
        if not t.isscalar:
            raise ValueError("only scalar Time values can be converted to an Epoch")
        delta = t.tai - J1900_TAI
        days = int(np.rint(delta.jd1))
        fraction = float(delta.jd1 - days) + float(delta.jd2)
        total = days * NANOSECONDS_PER_DAY + int(np.rint(fraction * NANOSECONDS_PER_DAY))
        return cls.from_total_nanoseconds(total)

    @classmethod
    def now(cls) -> "Epoch":
        return cls.from_time(Time.now())

    # -------------------------------
    # Conversions
    # -------------------------------

    def total_nanoseconds(self) -> int:
        return self.centuries * NANOSECONDS_PER_CENTURY + self.nanoseconds

    def to_tai_seconds(self) -> float:
        return self.total_nanoseconds() / NANOSECONDS_PER_SECOND

    def to_time(self) -> Time:
        """This epoch as an astropy `Time` in the TAI scale."""
        days, rem = divmod(self.total_nanoseconds(), NANOSECONDS_PER_DAY)
        delta = TimeDelta(days, rem / NANOSECONDS_PER_DAY, format="jd", scale="tai")
        return J1900_TAI + delta

    def __str__(self) -> str:
        try:
            t = self.to_time()
            t.precision = 9
            return f"{t.isot} TAI"
        except (ErfaError, OverflowError):
            # outside of the calendar range astropy can render
            return f"{self.centuries} centuries + {self.nanoseconds} ns TAI"

    # DER: SEQUENCE { INTEGER centuries, INTEGER nanoseconds }

    def _content(self) -> der.Writer:
        inner = der.Writer()
        inner.write_integer(self.centuries)
        inner.write_integer(self.nanoseconds)
        return inner

    def encoded_len(self) -> int:
        return der.tlv_len(len(self._content()))

    def encode(self, writer: der.Writer) -> None:
        writer.write_sequence(self._content())

    @classmethod
    def decode(cls, reader: der.Reader) -> "Epoch":
        seq = reader.read_sequence("creation date")
        start = seq.position
        centuries = seq.read_integer("centuries")
        nanoseconds = seq.read_unsigned("nanoseconds")
        seq.finish("creation date")
        if nanoseconds >= NANOSECONDS_PER_CENTURY:
            raise DecodeError("nanoseconds exceed one century", start)
        return cls(centuries, nanoseconds)


Clock = Callable[[], Epoch]

__all__ = [
    "Epoch",
    "Clock",
    "J1900_TAI",
    "NANOSECONDS_PER_SECOND",
    "NANOSECONDS_PER_DAY",
    "NANOSECONDS_PER_CENTURY",
]
