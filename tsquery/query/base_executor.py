# =============================================================================
# File:        tsquery/query/base_executor.py
# Purpose:     Ugovor za executor koji QueryBuilder.execute() poziva
# Created:     2025-08-18
# =============================================================================
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any


class BaseQueryExecutor(ABC):
    """
    Sve što QueryBuilder traži od klijenta baze: run_query(query) -> rezultat.
    Builder ne otvara, ne zatvara i ne ponavlja pozive; to je posao klijenta.
    """

    @abstractmethod
    def run_query(self, query: str) -> Any:
        """Izvrši sirov upit nad bazom i vrati rezultat (parsiran ili sirov)."""

    def close(self) -> None:
        """Opciono: zatvaranje konekcije."""
        return None
