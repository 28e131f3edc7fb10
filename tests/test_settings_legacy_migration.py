"""Documents written by 1.6.x still load with a sensible mount service."""

from __future__ import annotations

import pytest

from vaultdesk.core.env import Environment, HostOS
from vaultdesk.core.settings import SettingsCodec
from vaultdesk.core.settings.legacy import (
    DOKANY_MOUNT_PROVIDER,
    convert_legacy_volume_impl,
    legacy_mount_point,
)


def _decode(doc: dict, host_os: HostOS):
    return SettingsCodec(Environment(host_os=host_os)).decode(doc)


@pytest.mark.parametrize("host_os", list(HostOS))
def test_dokany_maps_to_dokany_provider_on_every_host(host_os: HostOS) -> None:
    settings = _decode({"preferredVolumeImpl": "Dokany"}, host_os)

    assert settings.mount_service == DOKANY_MOUNT_PROVIDER


@pytest.mark.parametrize(
    ("host_os", "expected"),
    [
        (HostOS.WINDOWS, "org.cryptomator.frontend.fuse.mount.WinFspNetworkMountProvider"),
        (HostOS.MAC, "org.cryptomator.frontend.fuse.mount.MacFuseMountProvider"),
        (HostOS.LINUX, "org.cryptomator.frontend.fuse.mount.LinuxFuseMountProvider"),
    ],
)
def test_fuse_maps_per_host(host_os: HostOS, expected: str) -> None:
    assert _decode({"preferredVolumeImpl": "FUSE"}, host_os).mount_service == expected


@pytest.mark.parametrize(
    ("host_os", "expected"),
    [
        (HostOS.WINDOWS, "org.cryptomator.frontend.webdav.mount.WindowsMounter"),
        (HostOS.MAC, "org.cryptomator.frontend.webdav.mount.MacAppleScriptMounter"),
        (HostOS.LINUX, "org.cryptomator.frontend.webdav.mount.LinuxGioMounter"),
    ],
)
def test_other_values_map_to_webdav_per_host(host_os: HostOS, expected: str) -> None:
    assert _decode({"preferredVolumeImpl": "WebDAV"}, host_os).mount_service == expected
    assert convert_legacy_volume_impl("", host_os) == expected


def test_legacy_field_wins_over_mount_service_regardless_of_order() -> None:
    before = _decode({"preferredVolumeImpl": "Dokany", "mountService": "org.example.Other"}, HostOS.LINUX)
    after = _decode({"mountService": "org.example.Other", "preferredVolumeImpl": "Dokany"}, HostOS.LINUX)

    assert before.mount_service == after.mount_service == DOKANY_MOUNT_PROVIDER


def test_missing_legacy_field_leaves_mount_service_untouched() -> None:
    assert _decode({"mountService": "org.example.Other"}, HostOS.MAC).mount_service == "org.example.Other"
    assert _decode({}, HostOS.MAC).mount_service is None


def test_numeric_legacy_value_is_read_as_text() -> None:
    assert _decode({"preferredVolumeImpl": 1}, HostOS.LINUX).mount_service == (
        "org.cryptomator.frontend.webdav.mount.LinuxGioMounter"
    )


def test_non_scalar_legacy_value_is_ignored() -> None:
    assert _decode({"preferredVolumeImpl": ["FUSE"]}, HostOS.WINDOWS).mount_service is None


def test_legacy_field_is_never_written_back() -> None:
    codec = SettingsCodec(Environment(host_os=HostOS.LINUX))
    settings = codec.decode({"preferredVolumeImpl": "FUSE"})

    doc = codec.encode(settings)

    assert "preferredVolumeImpl" not in doc
    assert doc["mountService"] == "org.cryptomator.frontend.fuse.mount.LinuxFuseMountProvider"


def test_legacy_mount_point_rules() -> None:
    assert legacy_mount_point(True, "/media/vault", "X") == "/media/vault"
    assert legacy_mount_point(False, "/media/vault", "X") == "X:\\"
    assert legacy_mount_point(False, None, "Y:") == "Y:\\"
    assert legacy_mount_point(True, None, None) is None
