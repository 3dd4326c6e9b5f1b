"""
Utility functions for the application.
"""
from typing import Any, Dict, Tuple
from datetime import date


def format_message(message: str, **data: Any) -> Dict[str, Any]:
    """Format API response carrying a human-readable message."""
    response = {"message": message}
    response.update(data)
    return response


def month_start(day: date) -> date:
    """First day of the calendar month containing ``day``."""
    return day.replace(day=1)


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Return (year, month) moved by ``offset`` calendar months."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_range(year: int, month: int) -> Tuple[date, date]:
    """Half-open [start, end) date range covering one calendar month."""
    next_year, next_month = shift_month(year, month, 1)
    return date(year, month, 1), date(next_year, next_month, 1)
