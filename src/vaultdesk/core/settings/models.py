"""Settings data models."""

from __future__ import annotations

import base64
import re
import secrets
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vaultdesk.core.env import HostOS, detect_host_os

from . import defaults
from .types import NodeOrientation, UiTheme, WhenUnlocked

_MOUNT_NAME_FORBIDDEN = re.compile(r"[^\w\s.\-]")


def generate_vault_id() -> str:
    """Return a random 12 character url-safe identifier."""

    return base64.urlsafe_b64encode(secrets.token_bytes(9)).decode("ascii")


def normalize_mount_name(display_name: str) -> str:
    normalized = _MOUNT_NAME_FORBIDDEN.sub("_", display_name).strip()
    return normalized or "_"


@dataclass
class VaultSettings:
    """Per-vault settings stored inside :class:`Settings`."""

    id: str = field(default_factory=generate_vault_id)
    path: Optional[Path] = None
    display_name: str = ""
    unlock_after_startup: bool = defaults.DEFAULT_UNLOCK_AFTER_STARTUP
    reveal_after_mount: bool = defaults.DEFAULT_REVEAL_AFTER_MOUNT
    uses_read_only_mode: bool = defaults.DEFAULT_USES_READONLY_MODE
    mount_flags: str = defaults.DEFAULT_MOUNT_FLAGS
    max_cleartext_filename_length: int = defaults.DEFAULT_MAX_CLEARTEXT_FILENAME_LENGTH
    action_after_unlock: WhenUnlocked = defaults.DEFAULT_ACTION_AFTER_UNLOCK
    auto_lock_when_idle: bool = defaults.DEFAULT_AUTO_LOCK_WHEN_IDLE
    auto_lock_idle_seconds: int = defaults.DEFAULT_AUTO_LOCK_IDLE_SECONDS
    mount_point: Optional[str] = None

    @property
    def mount_name(self) -> str:
        return normalize_mount_name(self.display_name)


def _detected_keychain_provider() -> str:
    return defaults.default_keychain_provider(detect_host_os())


@dataclass
class Settings:
    """Application-wide settings.

    Each attribute is independently defaulted, so a fresh instance is always
    usable before any document has been read.
    """

    directories: List[VaultSettings] = field(default_factory=list)
    asked_for_update_check: bool = defaults.DEFAULT_ASKED_FOR_UPDATE_CHECK
    auto_close_vaults: bool = defaults.DEFAULT_AUTO_CLOSE_VAULTS
    check_for_updates: bool = defaults.DEFAULT_CHECK_FOR_UPDATES
    debug_mode: bool = defaults.DEFAULT_DEBUG_MODE
    display_configuration: str = defaults.DEFAULT_DISPLAY_CONFIGURATION
    keychain_provider: str = field(default_factory=_detected_keychain_provider)
    language: Optional[str] = None
    license_key: Optional[str] = None
    mount_service: Optional[str] = None
    num_tray_notifications: int = defaults.DEFAULT_NUM_TRAY_NOTIFICATIONS
    port: int = defaults.DEFAULT_PORT
    show_minimize_button: bool = defaults.DEFAULT_SHOW_MINIMIZE_BUTTON
    show_tray_icon: bool = defaults.DEFAULT_SHOW_TRAY_ICON
    start_hidden: bool = defaults.DEFAULT_START_HIDDEN
    theme: UiTheme = defaults.DEFAULT_THEME
    ui_orientation: NodeOrientation = defaults.DEFAULT_USER_INTERFACE_ORIENTATION
    use_keychain: bool = defaults.DEFAULT_USE_KEYCHAIN
    window_height: int = defaults.DEFAULT_WINDOW_GEOMETRY
    window_width: int = defaults.DEFAULT_WINDOW_GEOMETRY
    window_x_position: int = defaults.DEFAULT_WINDOW_GEOMETRY
    window_y_position: int = defaults.DEFAULT_WINDOW_GEOMETRY

    @classmethod
    def create(cls, host_os: HostOS) -> "Settings":
        return cls(keychain_provider=defaults.default_keychain_provider(host_os))
