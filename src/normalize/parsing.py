from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Iterable, Mapping

import pandas as pd


def pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def coerce_float(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        return float(value)
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(numeric):
        return default
    return numeric


def coerce_optional_float(value: Any) -> float | None:
    numeric = coerce_float(value, default=math.nan)
    if math.isnan(numeric):
        return None
    return numeric


def coerce_int(value: Any, default: int = 0) -> int:
    numeric = coerce_float(value, default=math.nan)
    if not math.isfinite(numeric):
        return default
    return int(numeric)


def coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def normalize_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def as_text_list(value: Any) -> list[str]:
    values: list[str] = []
    for item in as_list(value):
        text = normalize_text(item)
        if text:
            values.append(text)
    return values


def coerce_date(value: Any) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    timestamp = pd.to_datetime(value, errors="coerce")
    if pd.isna(timestamp):
        return None
    return timestamp.date()
