import pathlib
import re
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nativeid.protector import protect

RAW_ID = "6f3c9d1b4a2e48f7b0c5d8e9a1f2b3c4"
HEX_64 = re.compile(r"[0-9a-f]{64}")


def test_known_fixture():
    assert protect("myAppName", RAW_ID) == (
        "e2a5448bfcf8546a02802285f3b90fc2b128b61f96274e4fe1d7f685d7579835"
    )


def test_keyed_by_raw_id():
    assert protect("myAppName", "abc-123") == (
        "8d28adf5ce90f8514098edd9c3968bcd09a000832313e50ef8ce1f40e83af7fd"
    )
    assert protect("", "abc-123") == (
        "01bc3c25fc14b7505a1ec08f7d7e54b10f98a8a9f715fbce129e122a5351e5cf"
    )


def test_deterministic_lowercase_hex():
    first = protect("myAppName", RAW_ID)
    assert first == protect("myAppName", RAW_ID)
    assert HEX_64.fullmatch(first)


def test_app_tags_give_unrelated_ids():
    assert protect("app-one", RAW_ID) != protect("app-two", RAW_ID)


def test_machines_give_different_ids():
    assert protect("myAppName", RAW_ID) != protect("myAppName", RAW_ID.upper())


def test_unicode_inputs():
    assert HEX_64.fullmatch(protect("appli-é", "ÿ-machine"))
