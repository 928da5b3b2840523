from __future__ import annotations

import math


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))


def js_round(value: float) -> float:
    """Round half up, so -2.5 becomes -2 and 2.5 becomes 3."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def round_to(value: float, digits: int = 2) -> float:
    if not math.isfinite(value):
        return value
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def annuity_present_value(payment: float, rate: float, years: int) -> float:
    if rate == 0.0:
        return payment * years
    return payment * (1.0 - math.pow(1.0 + rate, -years)) / rate


def format_percentage(value: float, digits: int = 1) -> str:
    if not math.isfinite(value):
        return "N/A"
    return f"{value:.{digits}f}%"


def format_currency(value: float) -> str:
    if not math.isfinite(value):
        return "N/A"
    if value < 0:
        return f"-${abs(value):,.0f}"
    return f"${value:,.0f}"
