"""Application-scoped, one-way derivation of the machine identifier."""

from __future__ import annotations

import hashlib
import hmac


def protect(app_tag: str, raw_id: str) -> str:
    """
    Return HMAC-SHA256 of ``app_tag`` keyed by ``raw_id``, as 64 lowercase hex chars.

    Keying by the machine id keeps the result machine-specific while separate
    app tags produce unrelated values.
    """
    mac = hmac.new(raw_id.encode("utf-8"), app_tag.encode("utf-8"), hashlib.sha256)
    return mac.hexdigest()


__all__ = ["protect"]
