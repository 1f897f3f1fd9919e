"""Fluent construction of ``SELECT`` statements."""

from __future__ import annotations

from typing import Annotated, Self

from pydantic import Field

from creational.domain import TemplateModel
from creational.exceptions import InvalidArgumentError

Count = Annotated[int, Field(ge=0)]

_DIRECTIONS = frozenset({"ASC", "DESC"})


def _require_text(value: str, what: str) -> str:
    stripped = value.strip()
    if not stripped:
        msg = f"{what} must not be empty"
        raise InvalidArgumentError(msg)
    return stripped


def _require_count(value: int, what: str) -> int:
    if value < 0:
        msg = f"{what} must be non-negative, got {value}"
        raise InvalidArgumentError(msg)
    return value


class SQLQuery(TemplateModel):
    columns: list[str] = Field(default_factory=lambda: ["*"], min_length=1)
    table: str = Field(min_length=1)
    joins: list[str] = Field(default_factory=list)
    where: list[str] = Field(default_factory=list)
    group_by: list[str] = Field(default_factory=list)
    having: list[str] = Field(default_factory=list)
    order_by: list[str] = Field(default_factory=list)
    limit: Count | None = None
    offset: Count | None = None

    def to_sql(self) -> str:
        """Render the statement on a single line."""

        parts = [f"SELECT {', '.join(self.columns)}", f"FROM {self.table}", *self.joins]
        if self.where:
            parts.append("WHERE " + " AND ".join(self.where))
        if self.group_by:
            parts.append("GROUP BY " + ", ".join(self.group_by))
        if self.having:
            parts.append("HAVING " + " AND ".join(self.having))
        if self.order_by:
            parts.append("ORDER BY " + ", ".join(self.order_by))
        if self.limit is not None:
            parts.append(f"LIMIT {self.limit}")
        if self.offset is not None:
            parts.append(f"OFFSET {self.offset}")
        return " ".join(parts)


class SQLQueryBuilder:
    """Accumulates clauses until :meth:`build`.

    A successful ``build`` resets the builder. A failed one keeps the
    accumulated clauses so the caller can supply what is missing.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._columns: list[str] = []
        self._table = ""
        self._joins: list[str] = []
        self._where: list[str] = []
        self._group_by: list[str] = []
        self._having: list[str] = []
        self._order_by: list[str] = []
        self._limit: int | None = None
        self._offset: int | None = None

    def select(self, *columns: str) -> Self:
        self._columns = [_require_text(column, "Column") for column in columns]
        return self

    def from_(self, table: str) -> Self:
        self._table = _require_text(table, "Table")
        return self

    def join(self, table: str, condition: str) -> Self:
        table = _require_text(table, "Join table")
        self._joins.append(f"JOIN {table} ON {_require_text(condition, 'Join condition')}")
        return self

    def left_join(self, table: str, condition: str) -> Self:
        table = _require_text(table, "Join table")
        self._joins.append(f"LEFT JOIN {table} ON {_require_text(condition, 'Join condition')}")
        return self

    def where(self, condition: str) -> Self:
        self._where.append(_require_text(condition, "Condition"))
        return self

    def group_by(self, *columns: str) -> Self:
        self._group_by = [_require_text(column, "Column") for column in columns]
        return self

    def having(self, condition: str) -> Self:
        self._having.append(_require_text(condition, "Condition"))
        return self

    def order_by(self, column: str, direction: str = "ASC") -> Self:
        normalized = direction.strip().upper()
        if normalized not in _DIRECTIONS:
            msg = f"Sort direction must be ASC or DESC, got {direction!r}"
            raise InvalidArgumentError(msg)
        self._order_by.append(f"{_require_text(column, 'Column')} {normalized}")
        return self

    def limit(self, count: int) -> Self:
        self._limit = _require_count(count, "Limit")
        return self

    def offset(self, count: int) -> Self:
        self._offset = _require_count(count, "Offset")
        return self

    def build(self) -> SQLQuery:
        if not self._table:
            msg = "A FROM table is required"
            raise InvalidArgumentError(msg)
        query = SQLQuery(
            columns=self._columns or ["*"],
            table=self._table,
            joins=self._joins,
            where=self._where,
            group_by=self._group_by,
            having=self._having,
            order_by=self._order_by,
            limit=self._limit,
            offset=self._offset,
        )
        self._reset()
        return query


__all__ = ["SQLQuery", "SQLQueryBuilder"]
