"""Generation of text primary keys for notification and profile records."""

from __future__ import annotations

import secrets
import string
import time

_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 9


def generate_record_id(prefix: str) -> str:
    """Return ``<prefix>_<epoch ms>_<random base36 suffix>``.

    Identifiers are collision resistant in practice but not guaranteed unique.
    """

    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{prefix}_{millis}_{suffix}"


__all__ = ["generate_record_id"]
