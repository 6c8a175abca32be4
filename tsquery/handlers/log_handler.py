# ============================================================================
# File:       tsquery/handlers/log_handler.py
# Purpose:    Upis log linija u fajl po nivou (INFO, WARNING, ERROR)
# Created:    2025-08-18
# ============================================================================

import os
from datetime import datetime
from tsquery.config.env import EnvLoader


class LogHandler:
    # None -> putanja se čita iz .env (LOG_FILE_PATH) pri svakom upisu
    log_file_path: str | None = None

    @classmethod
    def target(cls) -> str:
        return cls.log_file_path or EnvLoader.log_file_path()

    @classmethod
    def _write(cls, level: str, message: str) -> None:
        path = cls.target()
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            with open(path, "a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(f"[{level.upper()}] {timestamp} - {message}\n")
        except Exception as e:
            print(f"❌ Neuspelo logovanje u {path}: {e}")

    @classmethod
    def info(cls, message: str) -> None:
        cls._write("INFO", message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._write("WARNING", message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._write("ERROR", message)
