"""Conversion rules for fields written by 1.6.x releases."""

from __future__ import annotations

from vaultdesk.core.env import HostOS

DOKANY_MOUNT_PROVIDER = "org.cryptomator.frontend.dokany.mount.DokanyMountProvider"

FUSE_MOUNT_PROVIDERS = {
    HostOS.WINDOWS: "org.cryptomator.frontend.fuse.mount.WinFspNetworkMountProvider",
    HostOS.MAC: "org.cryptomator.frontend.fuse.mount.MacFuseMountProvider",
    HostOS.LINUX: "org.cryptomator.frontend.fuse.mount.LinuxFuseMountProvider",
}

WEBDAV_MOUNTERS = {
    HostOS.WINDOWS: "org.cryptomator.frontend.webdav.mount.WindowsMounter",
    HostOS.MAC: "org.cryptomator.frontend.webdav.mount.MacAppleScriptMounter",
    HostOS.LINUX: "org.cryptomator.frontend.webdav.mount.LinuxGioMounter",
}


def convert_legacy_volume_impl(volume_impl: str, host_os: HostOS) -> str:
    """Map a ``preferredVolumeImpl`` value onto a current mount service id.

    ``Dokany`` is host independent; ``FUSE`` and everything else (WebDAV was
    the fallback technology) resolve per host.
    """

    if volume_impl == "Dokany":
        return DOKANY_MOUNT_PROVIDER
    if volume_impl == "FUSE":
        return FUSE_MOUNT_PROVIDERS.get(host_os, FUSE_MOUNT_PROVIDERS[HostOS.LINUX])
    return WEBDAV_MOUNTERS.get(host_os, WEBDAV_MOUNTERS[HostOS.LINUX])


def legacy_mount_point(
    use_custom_mount_path: bool,
    custom_mount_path: str | None,
    win_drive_letter: str | None,
) -> str | None:
    """Fold the pre-1.7 mount location fields into a single mount point."""

    if use_custom_mount_path and custom_mount_path:
        return custom_mount_path
    if win_drive_letter:
        return f"{win_drive_letter.rstrip(':')}:\\"
    return None
