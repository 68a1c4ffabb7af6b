from collections.abc import Mapping, Sequence
from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.base import RecordStore, Row
from app.database.connection import get_connection
from app.database.exceptions import RecordNotFoundError, StoreError


def _adapt(value: Any) -> Any:
    if isinstance(value, dict):
        return Jsonb(value)
    return value


def _columns(columns: Sequence[str] | None) -> sql.Composable:
    if not columns:
        return sql.SQL("*")
    return sql.SQL(", ").join(sql.Identifier(col) for col in columns)


def _where(filters: Mapping[str, Any]) -> tuple[sql.Composable, list[Any]]:
    if not filters:
        return sql.SQL(""), []
    clause = sql.SQL(" WHERE ") + sql.SQL(" AND ").join(
        sql.SQL("{} = %s").format(sql.Identifier(col)) for col in filters
    )
    return clause, [_adapt(value) for value in filters.values()]


class PostgresRecordStore(RecordStore):
    """RecordStore over the shared psycopg connection pool.

    Identifiers are quoted with psycopg.sql, values are always bound as
    parameters. Each call runs in its own transaction.
    """

    def insert(self, table: str, fields: Mapping[str, Any]) -> Row:
        if not fields:
            raise ValueError("insert requires at least one field")
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING *").format(
            table=sql.Identifier(table),
            columns=sql.SQL(", ").join(sql.Identifier(col) for col in fields),
            values=sql.SQL(", ").join([sql.Placeholder()] * len(fields)),
        )
        params = [_adapt(value) for value in fields.values()]
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(query, params)
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise StoreError(f"Insert into {table} failed: {exc}") from exc

        if row is None:
            raise StoreError(f"Insert into {table} returned no row")
        return row

    def update(self, table: str, record_id: str, fields: Mapping[str, Any]) -> None:
        if not fields:
            return
        query = sql.SQL("UPDATE {table} SET {assignments} WHERE id = %s").format(
            table=sql.Identifier(table),
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = %s").format(sql.Identifier(col)) for col in fields
            ),
        )
        params = [_adapt(value) for value in fields.values()] + [record_id]
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    if cur.rowcount == 0:
                        raise RecordNotFoundError(f"Record {record_id} not found in {table}")
                conn.commit()
        except psycopg.Error as exc:
            raise StoreError(f"Update of {table} failed: {exc}") from exc

    def delete(self, table: str, record_id: str) -> None:
        query = sql.SQL("DELETE FROM {table} WHERE id = %s").format(
            table=sql.Identifier(table)
        )
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, (record_id,))
                    if cur.rowcount == 0:
                        raise RecordNotFoundError(f"Record {record_id} not found in {table}")
                conn.commit()
        except psycopg.Error as exc:
            raise StoreError(f"Delete from {table} failed: {exc}") from exc

    def delete_where(self, table: str, filters: Mapping[str, Any]) -> int:
        where, params = _where(filters)
        query = sql.SQL("DELETE FROM {table}").format(table=sql.Identifier(table)) + where
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    deleted = cur.rowcount
                conn.commit()
        except psycopg.Error as exc:
            raise StoreError(f"Delete from {table} failed: {exc}") from exc
        return deleted

    def select_one(
        self,
        table: str,
        filters: Mapping[str, Any],
        columns: Sequence[str] | None = None,
    ) -> Row | None:
        where, params = _where(filters)
        query = (
            sql.SQL("SELECT {columns} FROM {table}").format(
                columns=_columns(columns), table=sql.Identifier(table)
            )
            + where
            + sql.SQL(" LIMIT 1")
        )
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(query, params)
                    return cur.fetchone()
        except psycopg.Error as exc:
            raise StoreError(f"Select from {table} failed: {exc}") from exc

    def select_many(
        self,
        table: str,
        filters: Mapping[str, Any],
        order_by: str | None = None,
        descending: bool = True,
        columns: Sequence[str] | None = None,
    ) -> list[Row]:
        where, params = _where(filters)
        query = (
            sql.SQL("SELECT {columns} FROM {table}").format(
                columns=_columns(columns), table=sql.Identifier(table)
            )
            + where
        )
        if order_by is not None:
            query += sql.SQL(" ORDER BY {column} {direction}").format(
                column=sql.Identifier(order_by),
                direction=sql.SQL("DESC" if descending else "ASC"),
            )
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(query, params)
                    return cur.fetchall()
        except psycopg.Error as exc:
            raise StoreError(f"Select from {table} failed: {exc}") from exc
