# ========================================================================
# File:       tsquery/managers/error_manager.py
# Purpose:    Evidencija grešaka + logovanje (izuzetak uvek ide dalje pozivaocu)
# Created:    2025-08-18
# Updated:    2025-08-25 (ograničena memorija, create nikad ne baca)
# ========================================================================

from collections import deque

from tsquery.config.env import DEFAULT_LOG_MEMORY_LIMIT, EnvLoader
from tsquery.handlers.error_handler import ErrorHandler
from tsquery.managers.log_manager import LogManager


class ErrorManager:
    _errors = deque(maxlen=DEFAULT_LOG_MEMORY_LIMIT)
    _dev_mode = None  # None -> APP_DEBUG iz .env

    @classmethod
    def initialize(cls, dev_mode: bool = None):
        cls._errors = deque(maxlen=EnvLoader.log_memory_limit())
        cls._dev_mode = dev_mode

    @classmethod
    def dev_mode(cls) -> bool:
        if cls._dev_mode is None:
            return EnvLoader.debug_mode()
        return cls._dev_mode

    @classmethod
    def create(cls, error: Exception):
        """Evidentira grešku. Sopstveni kvar samo ispiše, pozivalac re-raise-uje original."""
        cls._errors.append(error)
        try:
            formatted = ErrorHandler.format_error(error)
            trace = ErrorHandler.get_traceback(error)

            if cls.dev_mode():
                print(f"[ERROR]: {formatted}\n{trace}")

            LogManager.error(f"{formatted}\n{trace}".rstrip())
        except Exception as e:
            print(f"❌ ErrorManager nije zabeležio {type(error).__name__}: {type(e).__name__}")

    @classmethod
    def read(cls, last_only: bool = True):
        if last_only:
            return cls._errors[-1] if cls._errors else None
        return list(cls._errors)

    @classmethod
    def delete(cls, index: int = None):
        if index is None:
            cls._errors.clear()
        elif 0 <= index < len(cls._errors):
            del cls._errors[index]
