"""Read the OS-native machine identifier and derive app-scoped ids from it."""
from .config import ConfigError, ReaderConfig, load_config, load_log_level
from .errors import MachineIDError, NotFoundError, SourceIOError, UnsupportedPlatformError
from .machine import machine_id, protected_id
from .platforms import Platform, detect_platform, read_raw_id
from .protector import protect
from .version import APP_VERSION as __version__

__all__ = [
    "ConfigError",
    "MachineIDError",
    "NotFoundError",
    "Platform",
    "ReaderConfig",
    "SourceIOError",
    "UnsupportedPlatformError",
    "detect_platform",
    "load_config",
    "load_log_level",
    "machine_id",
    "protect",
    "protected_id",
    "read_raw_id",
]
