"""
Individual places the machine identifier can be read from.

Each source performs exactly one read attempt and either returns a
normalized, non-empty identifier or raises one of the errors from
:mod:`nativeid.errors`. Sources never fall back on their own; ordering is
the job of :mod:`nativeid.platforms`.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .errors import NotFoundError, SourceIOError, UnsupportedPlatformError

logger = logging.getLogger("nativeid.sources")

_QUOTE_CHARS = '{}"'


def strip_whitespace(value: str) -> str:
    """Trim surrounding whitespace and newline characters."""
    return value.strip()


def strip_quoted(value: str) -> str:
    """Trim whitespace plus surrounding braces and double quotes."""
    return value.strip().strip(_QUOTE_CHARS).strip()


def first_line(output: str) -> Optional[str]:
    for line in output.splitlines():
        if line.strip():
            return line
    return None


def property_parser(name: str) -> Callable[[str], Optional[str]]:
    """
    Build a parser that extracts ``"name" = "value"`` from ioreg style output.
    """
    marker = f'"{name}"'

    def parse(output: str) -> Optional[str]:
        for line in output.splitlines():
            if marker not in line:
                continue
            _, sep, value = line.partition("=")
            if sep:
                return value
        return None

    return parse


def _load_winreg():
    import winreg

    return winreg


@dataclass(frozen=True)
class FileSource:
    """A small text file holding the identifier, such as ``/etc/machine-id``."""

    path: str
    # A strict source reports a missing file as unreadable instead of absent.
    strict: bool = False

    def describe(self) -> str:
        return f"file {self.path}"

    def read(self) -> str:
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except FileNotFoundError as exc:
            if self.strict:
                raise SourceIOError(f"Cannot read {self.describe()}: {exc}") from exc
            raise NotFoundError(f"No {self.describe()}") from exc
        except OSError as exc:
            raise SourceIOError(f"Cannot read {self.describe()}: {exc}") from exc

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SourceIOError(f"Corrupt {self.describe()}: not valid UTF-8") from exc

        value = strip_whitespace(text)
        if not value:
            raise NotFoundError(f"Empty {self.describe()}")
        return value


@dataclass(frozen=True)
class CommandSource:
    """A property lookup performed by running a system tool."""

    args: Sequence[str]
    parser: Callable[[str], Optional[str]] = first_line

    def describe(self) -> str:
        return "command " + " ".join(self.args)

    def _run(self) -> subprocess.CompletedProcess:
        logger.debug("Running %s", self.describe())
        return subprocess.run(
            list(self.args),
            capture_output=True,
            text=True,
            check=False,
        )

    def read(self) -> str:
        try:
            result = self._run()
        except FileNotFoundError as exc:
            raise NotFoundError(f"No {self.args[0]} tool for {self.describe()}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceIOError(f"Cannot run {self.describe()}: {exc}") from exc

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise NotFoundError(
                f"{self.describe()} exited with status {result.returncode}"
                + (f": {stderr}" if stderr else "")
            )

        raw = self.parser(result.stdout or "")
        value = strip_quoted(raw) if raw is not None else ""
        if not value:
            raise NotFoundError(f"No identifier in output of {self.describe()}")
        return value


@dataclass(frozen=True)
class RegistrySource:
    """A string value stored in the Windows registry."""

    key: str
    value_name: str
    hive: str = "HKEY_LOCAL_MACHINE"

    def describe(self) -> str:
        return f"registry value {self.hive}\\{self.key}\\{self.value_name}"

    def read(self) -> str:
        try:
            winreg = _load_winreg()
        except ImportError as exc:
            raise UnsupportedPlatformError(
                f"The Windows registry is not available on this host ({self.describe()})"
            ) from exc

        access = winreg.KEY_READ | winreg.KEY_WOW64_64KEY
        try:
            with winreg.OpenKey(getattr(winreg, self.hive), self.key, 0, access) as handle:
                value, _kind = winreg.QueryValueEx(handle, self.value_name)
        except FileNotFoundError as exc:
            raise NotFoundError(f"No {self.describe()}") from exc
        except OSError as exc:
            raise SourceIOError(f"Cannot read {self.describe()}: {exc}") from exc

        if not isinstance(value, str):
            raise SourceIOError(
                f"Unexpected {type(value).__name__} data in {self.describe()}"
            )

        value = strip_quoted(value)
        if not value:
            raise NotFoundError(f"Empty {self.describe()}")
        return value


__all__ = [
    "CommandSource",
    "FileSource",
    "RegistrySource",
    "first_line",
    "property_parser",
    "strip_quoted",
    "strip_whitespace",
]
