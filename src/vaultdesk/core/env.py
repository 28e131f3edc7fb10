"""Helpers for environment flags shared across the app."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

APP_VERSION = "1.7.0"


class HostOS(Enum):
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"


def detect_host_os(platform: str | None = None) -> HostOS:
    """Map a ``sys.platform`` value onto one of the supported host families.

    Anything that is neither Windows nor macOS is treated as Linux, which is
    also what mount backends fall back to on other unixes.
    """

    name = (platform if platform is not None else sys.platform).lower()
    if name.startswith("win") or name == "cygwin":
        return HostOS.WINDOWS
    if name == "darwin":
        return HostOS.MAC
    return HostOS.LINUX


def _host_os_from_env() -> HostOS:
    override = os.environ.get("VAULTDESK_HOST_OS", "").strip().lower()
    if override:
        try:
            return HostOS(override)
        except ValueError:
            logger.warning("Unknown VAULTDESK_HOST_OS %r, detecting host instead", override)
    return detect_host_os()


@dataclass(frozen=True)
class Environment:
    """Facts about the running application that the settings codec needs."""

    app_version: str = APP_VERSION
    build_number: str | None = None
    host_os: HostOS = field(default_factory=detect_host_os)

    @classmethod
    def from_env(cls) -> "Environment":
        """Build an environment honoring ``VAULTDESK_*`` overrides."""

        version = os.environ.get("VAULTDESK_APP_VERSION", "").strip() or APP_VERSION
        build = os.environ.get("VAULTDESK_BUILD_NUMBER", "").strip() or None
        return cls(app_version=version, build_number=build, host_os=_host_os_from_env())

    @property
    def written_by_version(self) -> str:
        if self.build_number:
            return f"{self.app_version}-{self.build_number}"
        return self.app_version
