# =============================================================================
# File:        tsquery/query/time_value.py
# Purpose:     Vrednosti za before/after granice: klasifikacija + render
#              - str       -> RawLiteral  (time < '...')
#              - datetime  -> Instant     (time < 123ms)
#              - int/float -> serijski datum (dani od 0000-01-00), lokalna zona
# Created:     2025-08-18
# Updated:     2025-08-20 (zaokruživanje ms, serijski datum van opsega)
# =============================================================================

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from tsquery.managers.log_manager import LogManager

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# serijski dan 367 == 0001-01-01 (ordinal 1 u Python-u)
SERIAL_DAY_OFFSET = 366

OPERATORS = ("<", "<=", ">", ">=")


@dataclass(frozen=True)
class RawLiteral:
    text: str


@dataclass(frozen=True)
class Instant:
    millis: int


@dataclass(frozen=True)
class UnsupportedType:
    value: Any


TimeValue = Union[RawLiteral, Instant, UnsupportedType]


def epoch_millis(dt: datetime) -> int:
    """Milisekunde od 1970-01-01 UTC; naivan datetime se čita kao UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - EPOCH
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    # pola milisekunde se zaokružuje od nule
    if micros >= 0:
        return (micros + 500) // 1000
    return -((-micros + 500) // 1000)


def serial_to_datetime(days: float) -> datetime:
    """Serijski datum (dani, bez zone) -> datetime u lokalnoj zoni hosta."""
    whole = math.floor(days)
    naive = datetime.fromordinal(int(whole) - SERIAL_DAY_OFFSET) + timedelta(days=days - whole)
    return naive.astimezone()


def classify(value: Any) -> Optional[TimeValue]:
    """None znači 'obriši granicu'."""
    if value is None or (isinstance(value, str) and value == ""):
        return None
    if isinstance(value, str):
        return RawLiteral(value)
    if isinstance(value, datetime):
        return Instant(epoch_millis(value))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            return UnsupportedType(value)
        try:
            local = serial_to_datetime(float(value))
        except (ValueError, OverflowError):
            return UnsupportedType(value)
        LogManager.warning("timezone not specified, assuming local")
        return Instant(epoch_millis(local))
    return UnsupportedType(value)


def render(op: str, tv: TimeValue) -> str:
    if op not in OPERATORS:
        raise ValueError(f"unknown time operator: {op}")
    if isinstance(tv, RawLiteral):
        return f"time {op} '{tv.text}'"
    if isinstance(tv, Instant):
        return f"time {op} {tv.millis}ms"
    raise TypeError(f"cannot render {tv!r}")
