"""Handler constants and environment-driven settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

# Path prefixes where installed commands live, tested in this order
EXECUTABLE_DIRECTORIES: tuple[str, ...] = (
    "/usr/local/bin",
    "/usr/local/sbin",
)

MANIFEST_SUFFIX = ".filelist"

# Candidates must score strictly above this to be suggested
FUZZY_MATCH_THRESHOLD = 0.7

PACKAGE_SOURCE = "Chromebrew"
INSTALL_COMMAND = "crew install"

USAGE_EXIT_CODE = 1

LOG_LEVEL_ENV = "COMMAND_NOT_FOUND_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Runtime settings that do not affect matching."""

    # None leaves logging unconfigured
    log_level: int | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Returns:
            Settings instance
        """
        raw = os.getenv(LOG_LEVEL_ENV, "").strip()
        if not raw:
            return cls()

        level = logging.getLevelName(raw.upper())
        if not isinstance(level, int):
            # Unknown names come back as "Level X"
            return cls()

        return cls(log_level=level)
