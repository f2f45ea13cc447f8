"""
Per-platform lookup of the raw machine identifier.

Every supported OS family maps to an ordered tuple of sources. The first
source that yields a value wins; later sources are independent fallbacks.
When all of them fail, the error of the last attempted source is raised.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Callable, Dict, Optional, Tuple

from .config import ReaderConfig, load_config
from .errors import MachineIDError, NotFoundError, UnsupportedPlatformError
from .sources import CommandSource, FileSource, RegistrySource, first_line, property_parser

logger = logging.getLogger("nativeid.platforms")

HOSTID_PATH = "/etc/hostid"
SMBIOS_UUID_COMMAND = ("kenv", "-q", "smbios.system.uuid")

DBUS_MACHINE_ID_PATH = "/var/lib/dbus/machine-id"
SYSTEMD_MACHINE_ID_PATH = "/etc/machine-id"

IOREG_COMMAND = ("ioreg", "-rd1", "-c", "IOPlatformExpertDevice")
IOREG_UUID_PROPERTY = "IOPlatformUUID"

CRYPTOGRAPHY_KEY = r"SOFTWARE\Microsoft\Cryptography"
MACHINE_GUID_VALUE = "MachineGuid"


class Platform(enum.Enum):
    BSD = "bsd"
    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"


_BSD_PREFIXES = ("freebsd", "openbsd", "netbsd", "dragonfly")


def detect_platform(name: Optional[str] = None) -> Platform:
    """Map a ``sys.platform`` style name (default: the running host) to a Platform."""
    system = (sys.platform if name is None else name).lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system == "darwin":
        return Platform.DARWIN
    if system in ("win32", "cygwin", "msys"):
        return Platform.WINDOWS
    if system.startswith(_BSD_PREFIXES):
        return Platform.BSD
    raise UnsupportedPlatformError(f"Unsupported platform: {system!r}")


def _bsd_sources(config: ReaderConfig):
    return (
        FileSource(HOSTID_PATH),
        CommandSource(SMBIOS_UUID_COMMAND, first_line),
    )


def _linux_sources(config: ReaderConfig):
    if config.override_path:
        return (FileSource(config.override_path, strict=True),)
    return (
        FileSource(DBUS_MACHINE_ID_PATH),
        FileSource(SYSTEMD_MACHINE_ID_PATH),
    )


def _darwin_sources(config: ReaderConfig):
    return (CommandSource(IOREG_COMMAND, property_parser(IOREG_UUID_PROPERTY)),)


def _windows_sources(config: ReaderConfig):
    return (RegistrySource(CRYPTOGRAPHY_KEY, MACHINE_GUID_VALUE),)


_SOURCES: Dict[Platform, Callable[[ReaderConfig], Tuple]] = {
    Platform.BSD: _bsd_sources,
    Platform.LINUX: _linux_sources,
    Platform.DARWIN: _darwin_sources,
    Platform.WINDOWS: _windows_sources,
}


def sources_for(platform: Platform, config: Optional[ReaderConfig] = None) -> Tuple:
    """Return the ordered sources consulted on ``platform``."""
    return _SOURCES[platform](config or load_config())


def read_raw_id(
    platform: Optional[Platform] = None,
    config: Optional[ReaderConfig] = None,
) -> str:
    """
    Read the raw machine identifier of the host.

    Raises NotFoundError, SourceIOError or UnsupportedPlatformError. The
    configuration is loaded on every call unless one is supplied.
    """
    if platform is None:
        platform = detect_platform()
    if config is None:
        config = load_config()

    last_error: Optional[MachineIDError] = None
    for source in sources_for(platform, config):
        try:
            value = source.read()
        except MachineIDError as exc:
            logger.debug("Lookup via %s failed: %s", source.describe(), exc)
            last_error = exc
            continue
        logger.debug("Machine id read from %s", source.describe())
        return value

    if last_error is None:
        raise NotFoundError(f"No identifier source defined for {platform.value}")
    raise last_error


__all__ = [
    "Platform",
    "detect_platform",
    "read_raw_id",
    "sources_for",
]
