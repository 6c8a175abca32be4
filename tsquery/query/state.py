# =============================================================================
# File:        tsquery/query/state.py
# Purpose:     QueryState — stanje koje QueryBuilder puni, redosled klauzula
# Created:     2025-08-18
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, List, Optional


def _round_half_away(n) -> int:
    """2.5 -> 3, -2.5 -> -3; int ostaje netaknut."""
    if isinstance(n, int):
        return n
    value = Decimal(str(n)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(value)


@dataclass
class QueryState:
    series: List[str] = field(default_factory=list)
    fields: List[str] = field(default_factory=lambda: ["*"])
    tag_clauses: List[str] = field(default_factory=list)  # već renderovane, samo append
    where: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None

    def set_series(self, names: List[str]) -> "QueryState":
        self.series = list(names)
        return self

    def set_fields(self, names: List[str]) -> "QueryState":
        self.fields = list(names) if names else ["*"]
        return self

    def add_tag_clause(self, clause: str) -> "QueryState":
        self.tag_clauses.append(clause)
        return self

    def set_where(self, expression: Optional[str]) -> "QueryState":
        self.where = expression or None
        return self

    def set_before(self, clause: Optional[str]) -> "QueryState":
        self.before = clause
        return self

    def set_after(self, clause: Optional[str]) -> "QueryState":
        self.after = clause
        return self

    def set_limit(self, n: Optional[float]) -> "QueryState":
        self.limit = None if n is None else _round_half_away(n)
        return self

    def clauses(self) -> Iterator[str]:
        """Tagovi, pa where, pa before, pa after (bez praznih)."""
        for clause in [*self.tag_clauses, self.where, self.before, self.after]:
            if clause:
                yield clause

    def effective_limit(self) -> Optional[int]:
        if self.limit is not None and self.limit > 0:
            return self.limit
        return None
