"""Encoding/decoding of single vault entries inside a settings document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .defaults import DEFAULT_ACTION_AFTER_UNLOCK
from .errors import SettingsFormatError
from .legacy import legacy_mount_point
from .models import VaultSettings
from .parsing import parse_enum, read_bool, read_int, read_str
from .types import WhenUnlocked

_BOOL_FIELDS = {
    "unlockAfterStartup": "unlock_after_startup",
    "revealAfterMount": "reveal_after_mount",
    "usesReadOnlyMode": "uses_read_only_mode",
    "autoLockWhenIdle": "auto_lock_when_idle",
}
_INT_FIELDS = {
    "maxCleartextFilenameLength": "max_cleartext_filename_length",
    "autoLockIdleSeconds": "auto_lock_idle_seconds",
}
_STR_FIELDS = {
    "displayName": "display_name",
    "mountFlags": "mount_flags",
    "mountPoint": "mount_point",
}
# written before 1.7, read only
_LEGACY_FIELDS = ("mountName", "winDriveLetter", "useCustomMountPath", "customMountPath", "individualMountPath")


class VaultSettingsCodec:
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def encode(self, vault: VaultSettings) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": vault.id,
            "path": str(vault.path) if vault.path is not None else None,
            "displayName": vault.display_name,
            "unlockAfterStartup": vault.unlock_after_startup,
            "revealAfterMount": vault.reveal_after_mount,
            "usesReadOnlyMode": vault.uses_read_only_mode,
            "mountFlags": vault.mount_flags,
            "maxCleartextFilenameLength": vault.max_cleartext_filename_length,
            "actionAfterUnlock": vault.action_after_unlock.name,
            "autoLockWhenIdle": vault.auto_lock_when_idle,
            "autoLockIdleSeconds": vault.auto_lock_idle_seconds,
            "mountPoint": vault.mount_point,
        }
        return {key: value for key, value in payload.items() if value is not None}

    def decode(self, entry: Any) -> VaultSettings:
        if not isinstance(entry, Mapping):
            raise SettingsFormatError(f"Vault entry must be an object, got {type(entry).__name__}")

        vault = VaultSettings()
        legacy: Dict[str, Any] = {}
        for name, value in entry.items():
            if name in _BOOL_FIELDS:
                attr = _BOOL_FIELDS[name]
                setattr(vault, attr, read_bool(value, getattr(vault, attr), field=name, logger=self._logger))
            elif name in _INT_FIELDS:
                attr = _INT_FIELDS[name]
                setattr(vault, attr, read_int(value, getattr(vault, attr), field=name, logger=self._logger))
            elif name in _STR_FIELDS:
                attr = _STR_FIELDS[name]
                setattr(vault, attr, read_str(value, getattr(vault, attr), field=name, logger=self._logger))
            elif name == "id":
                vault.id = read_str(value, vault.id, field=name, logger=self._logger)
            elif name == "path":
                raw = read_str(value, None, field=name, logger=self._logger)
                vault.path = Path(raw) if raw else None
            elif name == "actionAfterUnlock":
                vault.action_after_unlock = parse_enum(
                    WhenUnlocked,
                    value,
                    DEFAULT_ACTION_AFTER_UNLOCK,
                    field="action after unlock",
                    logger=self._logger,
                )
            elif name in _LEGACY_FIELDS:
                legacy[name] = value
            else:
                self._logger.warning("Unsupported vault setting found in document: %s", name)

        if "displayName" not in entry:
            mount_name = legacy.get("mountName")
            if isinstance(mount_name, str) and mount_name:
                vault.display_name = mount_name
            elif vault.path is not None:
                vault.display_name = vault.path.name
        if "mountPoint" not in entry:
            custom_path = legacy.get("customMountPath", legacy.get("individualMountPath"))
            drive_letter = legacy.get("winDriveLetter")
            vault.mount_point = legacy_mount_point(
                legacy.get("useCustomMountPath") is True,
                custom_path if isinstance(custom_path, str) else None,
                drive_letter if isinstance(drive_letter, str) else None,
            )
        return vault
