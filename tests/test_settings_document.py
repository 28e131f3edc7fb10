from __future__ import annotations

import json
from pathlib import Path

import pytest

from vaultdesk.core.env import Environment, HostOS
from vaultdesk.core.settings import JSON, YAML, Settings, SettingsCodec, SettingsFormatError, UiTheme, VaultSettings
from vaultdesk.core.settings.document import dumps, loads


def _codec() -> SettingsCodec:
    return SettingsCodec(Environment(app_version="1.7.0", build_number="88", host_os=HostOS.WINDOWS))


def _settings() -> Settings:
    return Settings(
        directories=[VaultSettings(id="abcdefghijkl", path=Path("C:/Vaults/Taxes"), display_name="Taxes")],
        theme=UiTheme.AUTOMATIC,
        license_key="KEY",
        port=4040,
    )


@pytest.mark.parametrize("fmt", [JSON, YAML])
def test_text_roundtrip(fmt: str) -> None:
    codec = _codec()

    text = codec.to_text(_settings(), fmt)

    assert codec.from_text(text, fmt) == _settings()


def test_json_text_keeps_field_order() -> None:
    text = _codec().to_text(_settings(), JSON)

    payload = json.loads(text)
    assert list(payload)[:2] == ["writtenByVersion", "directories"]
    assert payload["writtenByVersion"] == "1.7.0-88"
    assert text.startswith('{\n  "writtenByVersion"')


def test_yaml_text_keeps_field_order() -> None:
    lines = _codec().to_text(_settings(), YAML).splitlines()

    assert lines[0].startswith("writtenByVersion:")
    assert lines[1] == "directories:"


def test_reads_document_from_older_release(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "directories": [{"id": "oldVault0001", "path": "/srv/old", "mountName": "Old", "winDriveLetter": "V"}],
                "preferredVolumeImpl": "FUSE",
                "theme": "dark",
                "numTrayNotifications": 5,
            }
        ),
        encoding="utf-8",
    )

    settings = _codec().from_text(path.read_text(encoding="utf-8"))

    assert settings.mount_service == "org.cryptomator.frontend.fuse.mount.WinFspNetworkMountProvider"
    assert settings.theme is UiTheme.DARK
    assert settings.num_tray_notifications == 5
    assert settings.directories[0].display_name == "Old"
    assert settings.directories[0].mount_point == "V:\\"


def test_empty_yaml_document_yields_defaults() -> None:
    assert _codec().from_text("", YAML).port == Settings().port


@pytest.mark.parametrize(
    ("text", "fmt"),
    [
        ("{not json", JSON),
        ("[1, 2, 3]", JSON),
        ("", JSON),
        ("- a\n- b\n", YAML),
        ("key: [unterminated", YAML),
    ],
)
def test_malformed_text_is_a_format_error(text: str, fmt: str) -> None:
    with pytest.raises(SettingsFormatError):
        loads(text, fmt)


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        dumps({}, "toml")


def test_yml_alias_is_accepted() -> None:
    assert loads(dumps({"port": 1}, "yml"), "YML") == {"port": 1}
