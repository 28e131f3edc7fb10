"""Application settings package.

The public API is available as `vaultdesk.core.settings` while the
implementation is split into focused modules.
"""

from __future__ import annotations

from .codec import SettingsCodec
from .document import JSON, YAML
from .errors import SettingsFormatError
from .models import Settings, VaultSettings
from .types import NodeOrientation, UiTheme, WhenUnlocked
from .vault_codec import VaultSettingsCodec

__all__ = [
    "JSON",
    "NodeOrientation",
    "Settings",
    "SettingsCodec",
    "SettingsFormatError",
    "UiTheme",
    "VaultSettings",
    "VaultSettingsCodec",
    "WhenUnlocked",
    "YAML",
]
