import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import nativeid
from nativeid import machine, platforms
from nativeid.errors import NotFoundError, SourceIOError, UnsupportedPlatformError


def test_machine_id_uses_platform_reader(monkeypatch):
    monkeypatch.setattr(machine, "read_raw_id", lambda: "6f3c9d1b4a2e48f7b0c5d8e9a1f2b3c4")
    assert nativeid.machine_id() == "6f3c9d1b4a2e48f7b0c5d8e9a1f2b3c4"


def test_protected_id_composes_reader_and_protector(monkeypatch):
    monkeypatch.setattr(machine, "read_raw_id", lambda: "6f3c9d1b4a2e48f7b0c5d8e9a1f2b3c4")
    assert nativeid.protected_id("myAppName") == (
        "e2a5448bfcf8546a02802285f3b90fc2b128b61f96274e4fe1d7f685d7579835"
    )


@pytest.mark.parametrize(
    "error",
    [
        NotFoundError("No file /etc/machine-id"),
        SourceIOError("Cannot read file /etc/machine-id"),
        UnsupportedPlatformError("Unsupported platform: 'aix'"),
    ],
)
def test_protected_id_propagates_errors_without_hashing(monkeypatch, error):
    def failing_reader():
        raise error

    def unexpected_protect(app_tag, raw_id):
        raise AssertionError("protect must not run when the lookup fails")

    monkeypatch.setattr(machine, "read_raw_id", failing_reader)
    monkeypatch.setattr(machine, "protect", unexpected_protect)

    with pytest.raises(type(error)) as excinfo:
        nativeid.protected_id("myAppName")
    assert excinfo.value is error


def test_linux_override_end_to_end(monkeypatch, tmp_path):
    monkeypatch.setattr(platforms.sys, "platform", "linux")
    override = tmp_path / "machine-id"
    override.write_bytes(b"abc-123\n")
    monkeypatch.setenv("NATIVEID_PATH", str(override))

    assert nativeid.machine_id() == "abc-123"
    assert nativeid.protected_id("myAppName") == (
        "8d28adf5ce90f8514098edd9c3968bcd09a000832313e50ef8ce1f40e83af7fd"
    )
