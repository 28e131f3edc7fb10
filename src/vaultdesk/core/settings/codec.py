"""Versioned settings document codec.

Encoding writes every field in a fixed order and stamps the document with the
application version. Decoding accepts fields in any order, skips what it does
not know, replaces malformed values with defaults and finally migrates fields
left behind by 1.6.x releases.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from vaultdesk.core.env import Environment

from . import document
from .defaults import DEFAULT_THEME, DEFAULT_USER_INTERFACE_ORIENTATION
from .errors import SettingsFormatError
from .legacy import convert_legacy_volume_impl
from .models import Settings, VaultSettings
from .parsing import parse_enum, read_bool, read_int, read_str
from .types import NodeOrientation, UiTheme
from .vault_codec import VaultSettingsCodec

_BOOL_FIELDS = {
    "askedForUpdateCheck": "asked_for_update_check",
    "autoCloseVaults": "auto_close_vaults",
    "checkForUpdatesEnabled": "check_for_updates",
    "debugMode": "debug_mode",
    "showMinimizeButton": "show_minimize_button",
    "showTrayIcon": "show_tray_icon",
    "startHidden": "start_hidden",
    "useKeychain": "use_keychain",
}
_INT_FIELDS = {
    "numTrayNotifications": "num_tray_notifications",
    "port": "port",
    "windowHeight": "window_height",
    "windowWidth": "window_width",
    "windowXPosition": "window_x_position",
    "windowYPosition": "window_y_position",
}
_STR_FIELDS = {
    "displayConfiguration": "display_configuration",
    "keychainProvider": "keychain_provider",
    "language": "language",
    "licenseKey": "license_key",
}

LEGACY_VOLUME_IMPL_FIELD = "preferredVolumeImpl"


class SettingsCodec:
    """Convert :class:`Settings` to and from settings documents."""

    def __init__(
        self,
        environment: Optional[Environment] = None,
        logger: Optional[logging.Logger] = None,
        vault_codec: Optional[VaultSettingsCodec] = None,
    ) -> None:
        self._env = environment or Environment.from_env()
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._vault_codec = vault_codec or VaultSettingsCodec(logger=self._logger)

    @property
    def environment(self) -> Environment:
        return self._env

    def encode(self, settings: Settings) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "writtenByVersion": self._env.written_by_version,
            "directories": [self._vault_codec.encode(vault) for vault in settings.directories],
            "askedForUpdateCheck": settings.asked_for_update_check,
            "autoCloseVaults": settings.auto_close_vaults,
            "checkForUpdatesEnabled": settings.check_for_updates,
            "debugMode": settings.debug_mode,
            "displayConfiguration": settings.display_configuration,
            "keychainProvider": settings.keychain_provider,
            "language": settings.language,
            "licenseKey": settings.license_key,
            "mountService": settings.mount_service,
            "numTrayNotifications": settings.num_tray_notifications,
            "port": settings.port,
            "showMinimizeButton": settings.show_minimize_button,
            "showTrayIcon": settings.show_tray_icon,
            "startHidden": settings.start_hidden,
            "theme": settings.theme.name,
            "uiOrientation": settings.ui_orientation.name,
            "useKeychain": settings.use_keychain,
            "windowHeight": settings.window_height,
            "windowWidth": settings.window_width,
            "windowXPosition": settings.window_x_position,
            "windowYPosition": settings.window_y_position,
        }
        return {key: value for key, value in payload.items() if value is not None}

    def decode(self, doc: Any, settings: Optional[Settings] = None) -> Settings:
        """Decode ``doc`` into ``settings`` (a fresh default instance if omitted).

        Vault entries are appended to ``settings.directories``; existing
        entries are kept. Structural errors are raised before ``settings`` is
        touched.
        """

        if not isinstance(doc, Mapping):
            raise SettingsFormatError(f"Settings document must be an object, got {type(doc).__name__}")
        vaults = self._decode_directories(doc["directories"]) if "directories" in doc else []
        if settings is None:
            settings = Settings.create(self._env.host_os)

        volume_impl: Any = None
        for name, value in doc.items():
            if name in _BOOL_FIELDS:
                attr = _BOOL_FIELDS[name]
                setattr(settings, attr, read_bool(value, getattr(settings, attr), field=name, logger=self._logger))
            elif name in _INT_FIELDS:
                attr = _INT_FIELDS[name]
                setattr(settings, attr, read_int(value, getattr(settings, attr), field=name, logger=self._logger))
            elif name in _STR_FIELDS:
                attr = _STR_FIELDS[name]
                setattr(settings, attr, read_str(value, getattr(settings, attr), field=name, logger=self._logger))
            elif name == "mountService":
                settings.mount_service = read_str(
                    value, settings.mount_service, field=name, logger=self._logger, strict=True
                )
            elif name in ("writtenByVersion", "directories"):
                continue
            elif name == "theme":
                settings.theme = parse_enum(UiTheme, value, DEFAULT_THEME, field="ui theme", logger=self._logger)
            elif name == "uiOrientation":
                settings.ui_orientation = parse_enum(
                    NodeOrientation,
                    value,
                    DEFAULT_USER_INTERFACE_ORIENTATION,
                    field="ui orientation",
                    logger=self._logger,
                )
            elif name == LEGACY_VOLUME_IMPL_FIELD:
                volume_impl = read_str(value, None, field=name, logger=self._logger)
            else:
                self._logger.warning("Unsupported setting found in document: %s", name)

        settings.directories.extend(vaults)
        if volume_impl is not None:
            settings.mount_service = convert_legacy_volume_impl(volume_impl, self._env.host_os)
            self._logger.info(
                "Migrated legacy %s=%s to mount service %s",
                LEGACY_VOLUME_IMPL_FIELD,
                volume_impl,
                settings.mount_service,
            )
        return settings

    def _decode_directories(self, value: Any) -> List[VaultSettings]:
        if not isinstance(value, list):
            raise SettingsFormatError(f"'directories' must be an array, got {type(value).__name__}")
        return [self._vault_codec.decode(entry) for entry in value]

    def to_text(self, settings: Settings, fmt: str = document.JSON) -> str:
        return document.dumps(self.encode(settings), fmt)

    def from_text(self, text: str, fmt: str = document.JSON, settings: Optional[Settings] = None) -> Settings:
        return self.decode(document.loads(text, fmt), settings)
