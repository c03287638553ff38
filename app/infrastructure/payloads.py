"""Text encoding of the structured ``data`` payload stored with each notification."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


def dump_payload(data: dict[str, Any] | None) -> str:
    """Serialize ``data`` to JSON text.

    ``datetime``/``date`` values become ISO strings and enum members their
    values. Raises ``TypeError`` for anything else JSON cannot represent.
    """

    return json.dumps(_normalize_values(data if data is not None else {}), ensure_ascii=False)


def load_payload(raw: str | None) -> dict[str, Any] | None:
    """Parse stored payload text.

    Empty text, malformed JSON and JSON that is not an object all yield ``None``.
    """

    if raw in (None, ""):
        return None
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Discarding malformed notification payload: %.80s", raw)
        return None
    if not isinstance(parsed, dict):
        logger.warning("Discarding non-object notification payload: %.80s", raw)
        return None
    return parsed


def _normalize_values(value: Any) -> Any:
    """Convert ``datetime`` and enum instances nested inside ``value``."""

    if isinstance(value, dict):
        return {key: _normalize_values(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_values(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


__all__ = ["dump_payload", "load_payload"]
