"""Version information for nativeid."""

APP_NAME = "nativeid"
APP_VERSION = "1.0.0"

__all__ = ["APP_NAME", "APP_VERSION"]
