"""
core/data/inventory/serialize.py - JSON text encoding of aggregation results

Compact output with datetimes as ISO 8601 strings. Record field order is
fixed by the record types, so identical provider responses always encode
to identical text.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from core.exceptions import SerializationError


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(payload: Any, kind: str = "result") -> str:
    """Encode a payload as compact JSON text

    Args:
        payload: list/dict produced by AggregationResult.to_payload()
        kind: Label used in the error message

    Raises:
        SerializationError: Payload holds a value JSON cannot encode
    """
    try:
        return json.dumps(payload, default=_json_default, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(kind, cause=e) from e
