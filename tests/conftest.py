import sys
from pathlib import Path
import pytest

# Omogući import projekta kad se testovi pokreću iz bilo kog radnog dir-a
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tsquery.config.env import EnvLoader
from tsquery.handlers.log_handler import LogHandler
from tsquery.managers.error_manager import ErrorManager
from tsquery.managers.log_manager import LogManager
from tsquery.query.base_executor import BaseQueryExecutor


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    - .env se učita pre testa, pa se QUERY_STRICT/APP_DEBUG uklone (default ponašanje).
    - Log ide u tmp fajl, memorija LogManager/ErrorManager je prazna.
    """
    EnvLoader.load()
    monkeypatch.delenv("QUERY_STRICT", raising=False)
    monkeypatch.delenv("APP_DEBUG", raising=False)
    monkeypatch.delenv("LOG_MEMORY_LIMIT", raising=False)
    log_path = tmp_path / "logs" / "app.log"
    monkeypatch.setattr(LogHandler, "log_file_path", str(log_path))
    LogManager.initialize()
    ErrorManager.initialize(dev_mode=False)
    yield log_path
    LogManager.initialize()
    ErrorManager.initialize()


class RecordingExecutor(BaseQueryExecutor):
    """Pamti upite i vraća unapred zadat rezultat (ili baca zadati izuzetak)."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.queries = []

    def run_query(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_executor():
    def _maker(result=None, error=None):
        return RecordingExecutor(result=result, error=error)
    return _maker
