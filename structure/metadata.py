# anise/structure/metadata.py
"""
ANISE file metadata header.

The header is the first record of every ANISE file. It is written once
when the file is created and read once when it is opened, before anything
else, to decide whether the rest of the file should even be attempted.

Layout (fixed order, each field a DER element):

1. anise_version  : SEQUENCE of three INTEGERs (major, minor, patch)
2. creation_date  : SEQUENCE { INTEGER centuries, INTEGER nanoseconds }
3. originator     : UTF8String, empty = not set
4. metadata_uri   : UTF8String, empty = not set

There is no partial decoding: one bad field rejects the whole header.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from anise.core.errors import DecodeError, VersionIncompatible
from anise.structure import der
from anise.structure.epoch import Clock, Epoch
from anise.structure.semver import ANISE_VERSION, Semver

if TYPE_CHECKING:
    from anise.config import AniseConfig

logger = logging.getLogger(__name__)

NOT_SET = "(not set)"


@dataclass(frozen=True)
class Metadata:
    """
    anise_version : ANISE version that wrote the file; used to decide whether
        a file is compatible with this library.
    creation_date : when the file was created.
    originator : organization, person and/or tool that produced the file.
    metadata_uri : resource identifier of this file's metadata (FAIR).
    """
    anise_version: Semver = ANISE_VERSION
    creation_date: Epoch = field(default_factory=Epoch.now)
    originator: str = ""
    metadata_uri: str = ""

    def __post_init__(self):
        if not isinstance(self.anise_version, Semver):
            raise TypeError("anise_version must be a Semver")
        if not isinstance(self.creation_date, Epoch):
            raise TypeError("creation_date must be an Epoch")
        # Unset is the empty string, never None
        for label, value in (("originator", self.originator), ("metadata_uri", self.metadata_uri)):
            if not isinstance(value, str):
                raise TypeError(f"{label} must be a str (use '' when not set), got {value!r}")
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError(f"{label} cannot be encoded as UTF-8: {exc.reason}") from exc

    @classmethod
    def default(
        cls,
        config: Optional["AniseConfig"] = None,
        clock: Optional[Clock] = None,
    ) -> "Metadata":
        """
        Header for a file being written now.

        `clock` defaults to the wall clock; `config` supplies the
        originator and metadata URI.
        """
        clock = Epoch.now if clock is None else clock
        if config is None:
            return cls(creation_date=clock())
        return cls(
            creation_date=clock(),
            originator=config.originator,
            metadata_uri=config.metadata_uri,
        )

    # ---------------------------------------------------------------
    # Encoding
    # ---------------------------------------------------------------

    def encoded_len(self) -> int:
        return (
            self.anise_version.encoded_len()
            + self.creation_date.encoded_len()
            + der.tlv_len(len(self.originator.encode("utf-8")))
            + der.tlv_len(len(self.metadata_uri.encode("utf-8")))
        )

    def encode(self) -> bytes:
        writer = der.Writer()
        self.anise_version.encode(writer)
        self.creation_date.encode(writer)
        writer.write_utf8(self.originator)
        writer.write_utf8(self.metadata_uri)
        return writer.getvalue()

    # ---------------------------------------------------------------
    # Decoding
    # ---------------------------------------------------------------

    @classmethod
    def decode(cls, data: der.BytesLike, offset: int = 0) -> Tuple["Metadata", int]:
        """
        Decode the header starting at `offset`.

        Returns the header and the offset of the first byte after it,
        which is where the rest of the file starts.
        """
        reader = der.Reader(data, offset)
        try:
            meta = cls(
                anise_version=Semver.decode(reader),
                creation_date=Epoch.decode(reader),
                originator=reader.read_utf8("originator"),
                metadata_uri=reader.read_utf8("metadata URI"),
            )
        except DecodeError as exc:
            logger.warning(f"Rejecting file header: {exc}")
            raise
        return meta, reader.position

    @classmethod
    def from_bytes(cls, data: der.BytesLike) -> "Metadata":
        """Decode a buffer holding exactly one header and nothing else."""
        meta, end = cls.decode(data)
        if end != len(data):
            raise DecodeError(f"{len(data) - end} trailing byte(s) after metadata", end)
        return meta

    @classmethod
    def decode_header(
        cls,
        data: der.BytesLike,
        offset: int = 0,
        supported: Optional[Semver] = None,
        config: Optional["AniseConfig"] = None,
    ) -> Tuple["Metadata", int]:
        """
        Decode the header and check that this library can read the file.

        `supported` defaults to the configured supported version, then to
        the version of this library.
        """
        if supported is None:
            supported = ANISE_VERSION if config is None else config.supported_version
        meta, end = cls.decode(data, offset)
        meta.check_compatibility(supported)
        return meta, end

    def check_compatibility(self, supported: Semver = ANISE_VERSION) -> "Metadata":
        """Raise `VersionIncompatible` if the file's major version is too recent."""
        if not self.anise_version.is_compatible_with(supported):
            logger.error(
                f"File written with ANISE {self.anise_version} cannot be read "
                f"by a reader supporting {supported}"
            )
            raise VersionIncompatible(self.anise_version, supported)
        return self

    def __str__(self) -> str:
        return "\n".join([
            f"ANISE version {self.anise_version}",
            f"Originator: {self.originator or NOT_SET}",
            f"Creation date: {self.creation_date}",
            f"Metadata URI: {self.metadata_uri or NOT_SET}",
        ])


__all__ = ["Metadata", "NOT_SET"]
