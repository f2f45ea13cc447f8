"""Error types raised while looking up the machine identifier."""


class MachineIDError(Exception):
    """Base exception for machine identifier lookups."""


class NotFoundError(MachineIDError):
    """Raised when no source produced an identifier."""


class SourceIOError(MachineIDError, OSError):
    """Raised when a source exists but could not be read."""


class UnsupportedPlatformError(MachineIDError):
    """Raised when the host operating system is not recognized."""


__all__ = [
    "MachineIDError",
    "NotFoundError",
    "SourceIOError",
    "UnsupportedPlatformError",
]
