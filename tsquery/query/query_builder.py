# =============================================================================
# File:        tsquery/query/query_builder.py
# Purpose:     Fluent QueryBuilder iznad QueryState-a
#              SELECT <fields> FROM <series> [WHERE a AND b ...] [LIMIT n]
# Created:     2025-08-18
# Updated:     2025-08-21 (strict režim, add_tags kwargs)
# =============================================================================

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tsquery.config.env import EnvLoader
from tsquery.managers.error_manager import ErrorManager
from tsquery.managers.log_manager import LogManager
from tsquery.query import time_value
from tsquery.query.errors import ConfigError, UnsafeValueError, UnsupportedTimeValueError
from tsquery.query.state import QueryState


def _names(args: Sequence[Any]) -> List[str]:
    # ("a", "b") | (["a", "b"],) | ("a",)
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return [str(a) for a in args[0]]
    return [str(a) for a in args]


class QueryBuilder:
    def __init__(self, *series: Any, executor: Any = None, strict: Optional[bool] = None):
        self._q = QueryState()
        self._executor = None
        self._strict = EnvLoader.strict_queries() if strict is None else bool(strict)
        # prazna lista je dozvoljena ovde, greška tek u build()
        self._q.set_series(_names(series))
        if executor is not None:
            self.with_executor(executor)

    @property
    def strict(self) -> bool:
        return self._strict

    # ---------- Executor ----------
    def with_executor(self, executor: Any) -> "QueryBuilder":
        if executor is not None and not callable(getattr(executor, "run_query", None)):
            raise ConfigError("invalid executor")
        self._executor = executor
        return self

    # ---------- Series / fields ----------
    def with_series(self, *names: Any) -> "QueryBuilder":
        series = _names(names)
        if not series:
            if not self._q.series:
                raise ConfigError("empty series")
            LogManager.warning("[QueryBuilder] with_series() bez imena, zadržavam prethodne series")
            return self
        self._q.set_series(series)
        return self

    def with_fields(self, *names: Any) -> "QueryBuilder":
        """Bez argumenata vraća podrazumevano ['*']."""
        self._q.set_fields(_names(names))
        return self

    # ---------- Tagovi ----------
    def add_tag(self, key: str, values: Any) -> "QueryBuilder":
        self._check_quote(key, '"')
        if isinstance(values, (list, tuple)):
            if not values:
                raise ConfigError("empty tag values")
            terms = [self._tag_term(key, v) for v in values]
            clause = "(" + " OR ".join(terms) + ")"
        else:
            clause = self._tag_term(key, values)
        self._q.add_tag_clause(clause)
        return self

    def add_tags(self, mapping: Optional[Dict[str, Any]] = None, **tags: Any) -> "QueryBuilder":
        for source in (mapping or {}, tags):
            for key, values in source.items():
                self.add_tag(key, values)
        return self

    def _tag_term(self, key: str, value: Any) -> str:
        value = str(value)
        self._check_quote(value, "'")
        return f"\"{key}\"='{value}'"

    # ---------- Where ----------
    def with_where(self, expression: Optional[str]) -> "QueryBuilder":
        self._q.set_where(expression)
        return self

    # ---------- Vremenske granice ----------
    def before(self, value: Any) -> "QueryBuilder":
        self._q.set_before(self._time_clause("<", value))
        return self

    def before_or_equal(self, value: Any) -> "QueryBuilder":
        self._q.set_before(self._time_clause("<=", value))
        return self

    def after(self, value: Any) -> "QueryBuilder":
        self._q.set_after(self._time_clause(">", value))
        return self

    def after_or_equal(self, value: Any) -> "QueryBuilder":
        self._q.set_after(self._time_clause(">=", value))
        return self

    def _time_clause(self, op: str, value: Any) -> Optional[str]:
        tv = time_value.classify(value)
        if tv is None:
            return None
        if isinstance(tv, time_value.UnsupportedType):
            raise UnsupportedTimeValueError(tv.value)
        if isinstance(tv, time_value.RawLiteral):
            self._check_quote(tv.text, "'")
        return time_value.render(op, tv)

    # ---------- Limit ----------
    def with_limit(self, n: Optional[int]) -> "QueryBuilder":
        self._q.set_limit(n)
        return self

    # ---------- Build / execute ----------
    def build(self) -> str:
        if not self._q.series:
            raise ConfigError("series not defined")

        query = f"SELECT {','.join(self._q.fields)} FROM {','.join(self._q.series)}"

        condition = " AND ".join(self._q.clauses())
        if condition:
            query += f" WHERE {condition}"

        limit = self._q.effective_limit()
        if limit is not None:
            query += f" LIMIT {limit}"

        LogManager.info(f"[QueryBuilder] build -> {query}")
        return query

    def execute(self) -> Tuple[Any, str]:
        query = self.build()
        if self._executor is None:
            raise ConfigError("executor not defined")
        try:
            result = self._executor.run_query(query)
        except Exception as e:
            ErrorManager.create(e)
            raise
        return result, query

    # ---------- Strict ----------
    def _check_quote(self, value: str, quote: str) -> None:
        if self._strict and quote in str(value):
            raise UnsafeValueError(value, quote)
