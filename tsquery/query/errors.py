# =============================================================================
# File:        tsquery/query/errors.py
# Purpose:     Izuzeci query sloja (builder konfiguracija, time vrednosti)
# Created:     2025-08-18
# =============================================================================

from __future__ import annotations
from typing import Any


class QueryError(Exception):
    """Bazna greška query sloja."""
    pass


class ConfigError(QueryError):
    """Builder nije ispravno podešen (series, executor, tag vrednosti)."""
    pass


class UnsupportedTimeValueError(QueryError):
    """before/after dobio vrednost tipa koji ne znamo da renderujemo."""

    def __init__(self, value: Any):
        super().__init__(f"unsupported time value type: {type(value).__name__}")
        self.value = value


class UnsafeValueError(QueryError):
    """Strict režim: vrednost sadrži navodnik koji bi prekinuo klauzulu."""

    def __init__(self, value: Any, quote: str):
        super().__init__(f"value contains {quote} quote: {value!r}")
        self.value = value
        self.quote = quote
