"""Default settings values."""

from __future__ import annotations

from typing import Dict

from vaultdesk.core.env import HostOS

from .types import NodeOrientation, UiTheme, WhenUnlocked

DEFAULT_ASKED_FOR_UPDATE_CHECK = False
DEFAULT_AUTO_CLOSE_VAULTS = False
DEFAULT_CHECK_FOR_UPDATES = False
DEFAULT_DEBUG_MODE = False
DEFAULT_DISPLAY_CONFIGURATION = ""
DEFAULT_NUM_TRAY_NOTIFICATIONS = 3
DEFAULT_PORT = 42427
DEFAULT_SHOW_MINIMIZE_BUTTON = False
DEFAULT_SHOW_TRAY_ICON = False
DEFAULT_START_HIDDEN = False
DEFAULT_THEME = UiTheme.LIGHT
DEFAULT_USER_INTERFACE_ORIENTATION = NodeOrientation.LEFT_TO_RIGHT
DEFAULT_USE_KEYCHAIN = True
DEFAULT_WINDOW_GEOMETRY = 0

DEFAULT_KEYCHAIN_PROVIDERS: Dict[HostOS, str] = {
    HostOS.WINDOWS: "org.cryptomator.windows.keychain.WindowsProtectedKeychainAccess",
    HostOS.MAC: "org.cryptomator.macos.keychain.MacSystemKeychainAccess",
    HostOS.LINUX: "org.cryptomator.linux.keychain.SecretServiceKeychainAccess",
}

# per vault
DEFAULT_UNLOCK_AFTER_STARTUP = False
DEFAULT_REVEAL_AFTER_MOUNT = True
DEFAULT_USES_READONLY_MODE = False
DEFAULT_MOUNT_FLAGS = ""
UNLIMITED_FILENAME_LENGTH = -1
DEFAULT_MAX_CLEARTEXT_FILENAME_LENGTH = UNLIMITED_FILENAME_LENGTH
DEFAULT_ACTION_AFTER_UNLOCK = WhenUnlocked.ASK
DEFAULT_AUTO_LOCK_WHEN_IDLE = False
DEFAULT_AUTO_LOCK_IDLE_SECONDS = 30 * 60


def default_keychain_provider(host_os: HostOS) -> str:
    return DEFAULT_KEYCHAIN_PROVIDERS.get(host_os, DEFAULT_KEYCHAIN_PROVIDERS[HostOS.LINUX])
