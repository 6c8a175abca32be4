# ========================================================================
# File:       tsquery/handlers/error_handler.py
# Purpose:    Formatiranje grešaka (tip, poruka, traceback) za ErrorManager
# Created:    2025-08-18
# ========================================================================

import traceback


class ErrorHandler:
    @staticmethod
    def format_error(error: Exception) -> str:
        return f"{type(error).__name__}: {error}"

    @staticmethod
    def get_traceback(error: Exception) -> str:
        """Traceback vezan za sam izuzetak (radi i van except bloka)."""
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
