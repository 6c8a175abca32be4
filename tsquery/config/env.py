# ========================================================================
# File:       tsquery/config/env.py
# Purpose:    Učitavanje .env fajla i pristup varijablama (LOG_*, QUERY_*)
# Created:    2025-08-18
# Updated:    2025-08-21 (get_bool, debug_info)
# ========================================================================

import os
from pathlib import Path
from dotenv import load_dotenv

DEFAULT_LOG_FILE = "tsquery/data/logs/app.log"  # relativno na radni dir procesa
DEFAULT_LOG_MEMORY_LIMIT = 1000

class EnvLoader:
    """
    Loader koji:
    - pronađe .env u root-u projekta (ili u paketu kao fallback),
    - učita ga samo jednom (idempotentno),
    - ne pregazi ono što je već u os.environ (testovi, CI).
    """
    _loaded = False
    _loaded_path: Path | None = None

    @staticmethod
    def _find_env_path() -> Path | None:
        here = Path(__file__).resolve()
        candidates = [
            here.parents[2] / ".env",  # <repo>/.env
            here.parents[1] / ".env",  # <repo>/tsquery/.env
            here.parent / ".env",      # pored env.py
        ]
        for p in candidates:
            if p.exists():
                return p
        return None

    @classmethod
    def load(cls, force: bool = False) -> None:
        if cls._loaded and not force:
            return
        env_path = cls._find_env_path()
        if env_path:
            load_dotenv(dotenv_path=env_path, override=False)
            cls._loaded_path = env_path
        else:
            cls._loaded_path = None
        cls._loaded = True

    @classmethod
    def get(cls, key: str, default=None):
        if not cls._loaded:
            cls.load()
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        val = cls.get(key, None)
        if val is None:
            return default
        return str(val).strip().lower() in ("1", "true", "yes", "y", "on")

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        val = cls.get(key, None)
        try:
            return int(str(val).strip()) if val is not None else default
        except ValueError:
            return default

    # --- Imenovani ključevi projekta ---
    @classmethod
    def log_memory_limit(cls) -> int:
        """Koliko poslednjih log/error unosa ostaje u memoriji (min 1)."""
        return max(1, cls.get_int("LOG_MEMORY_LIMIT", DEFAULT_LOG_MEMORY_LIMIT))

    @classmethod
    def log_file_path(cls) -> str:
        return cls.get("LOG_FILE_PATH", DEFAULT_LOG_FILE) or DEFAULT_LOG_FILE

    @classmethod
    def debug_mode(cls) -> bool:
        return cls.get_bool("APP_DEBUG", False)

    @classmethod
    def strict_queries(cls) -> bool:
        """QUERY_STRICT=true -> QueryBuilder odbija navodnike u tag/time vrednostima."""
        return cls.get_bool("QUERY_STRICT", False)

    @classmethod
    def debug_info(cls) -> dict:
        """Gde je učitan .env (ako jeste) + efektivne vrednosti."""
        return {
            "loaded": cls._loaded,
            "env_path": str(cls._loaded_path) if cls._loaded_path else None,
            "log_file_path": cls.log_file_path(),
            "log_memory_limit": cls.log_memory_limit(),
            "debug": cls.debug_mode(),
            "strict": cls.strict_queries(),
        }
