# anise/config.py
"""
Runtime configuration.

`AniseConfig` carries what a file writer stamps into new headers
(originator, metadata URI), the newest file version a reader accepts, and
the log level used by `setup_logging_from_config`. It can be read from environment
variables:

    ANISE_SUPPORTED_VERSION   e.g. "1.0.0"
    ANISE_ORIGINATOR
    ANISE_METADATA_URI
    ANISE_LOG_LEVEL           level name ("DEBUG") or number ("10")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from anise.structure.semver import ANISE_VERSION, Semver

ENV_PREFIX = "ANISE_"


def parse_log_level(value: str) -> int:
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {value!r}")
    return level


@dataclass(frozen=True)
class AniseConfig:
    supported_version: Semver = ANISE_VERSION
    originator: str = ""
    metadata_uri: str = ""
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AniseConfig":
        """Build a config from `environ` (default: `os.environ`), missing keys keep defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        version = env.get(ENV_PREFIX + "SUPPORTED_VERSION")
        level = env.get(ENV_PREFIX + "LOG_LEVEL")
        return cls(
            supported_version=Semver.parse(version) if version else defaults.supported_version,
            originator=env.get(ENV_PREFIX + "ORIGINATOR", defaults.originator),
            metadata_uri=env.get(ENV_PREFIX + "METADATA_URI", defaults.metadata_uri),
            log_level=parse_log_level(level) if level else defaults.log_level,
        )


__all__ = ["AniseConfig", "parse_log_level"]
