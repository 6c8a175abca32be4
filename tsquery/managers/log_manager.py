# ============================================================================
# File:       tsquery/managers/log_manager.py
# Purpose:    LogManager — klasni API iznad LogHandler-a (memorija + fajl)
# Created:    2025-08-18
# Updated:    2025-08-25 (ograničena memorija: LOG_MEMORY_LIMIT)
# ============================================================================

from collections import deque
from typing import Deque, Optional, Tuple

from tsquery.config.env import DEFAULT_LOG_MEMORY_LIMIT, EnvLoader
from tsquery.handlers.log_handler import LogHandler


class LogManager:
    _log_entries: Deque[Tuple[str, str]] = deque(maxlen=DEFAULT_LOG_MEMORY_LIMIT)

    @classmethod
    def initialize(cls):
        cls._log_entries = deque(maxlen=EnvLoader.log_memory_limit())

    @classmethod
    def create(cls, level: str, message: str):
        """
        Centralni ulaz za log: pamti (LEVEL, poruka) u memoriji i prosleđuje LogHandler-u.
        U memoriji ostaje samo poslednjih LOG_MEMORY_LIMIT unosa.
        Nepoznat nivo ide direktno kroz _write.
        """
        level_upper = (level or "INFO").upper()
        cls._log_entries.append((level_upper, message))

        method = getattr(LogHandler, level_upper.lower(), None)
        if callable(method):
            method(message)
        else:
            LogHandler._write(level_upper, message)

    @classmethod
    def read(cls, level: Optional[str] = None, last_only: bool = False):
        entries = list(cls._log_entries)
        if level:
            entries = [e for e in entries if e[0] == level.upper()]
        if last_only:
            return entries[-1] if entries else None
        return entries

    @classmethod
    def delete(cls, index: int = None):
        if index is None:
            cls._log_entries.clear()
        elif 0 <= index < len(cls._log_entries):
            del cls._log_entries[index]

    # === Prečice ===

    @classmethod
    def info(cls, message: str):
        cls.create("INFO", message)

    @classmethod
    def warning(cls, message: str):
        cls.create("WARNING", message)

    @classmethod
    def error(cls, message: str):
        cls.create("ERROR", message)
