"""Database repository for user account data."""

from __future__ import annotations

from typing import Any, Final, Protocol

from psycopg import sql
from psycopg.rows import tuple_row
from psycopg_pool import ConnectionPool

from .domain.account import Account, UserType

_COLUMNS: Final[tuple[str, ...]] = (
    "id",
    "email",
    "first_name",
    "last_name",
    "password",
    "phone_number",
    "is_active",
    "user_type",
    "attempts_left",
    "time_left",
    "created_at",
    "updated_at",
)
_WRITABLE_COLUMNS: Final[tuple[str, ...]] = _COLUMNS[:-2]
_LOOKUP_COLUMNS: Final[frozenset[str]] = frozenset({"id", "email"})


class UserRepository(Protocol):
    """Persistence port consumed by :class:`~user_service.domain.service.UserService`."""

    def find_one(self, criteria: dict[str, str]) -> Account | None:
        ...

    def save(self, account: Account) -> Account:
        ...


class PostgresUserRepository:
    """Postgres-backed user persistence; each call borrows one pooled connection."""

    def __init__(self, pool: ConnectionPool) -> None:
        """Store the connection pool used for all database interactions."""
        self._pool = pool

    def find_one(self, criteria: dict[str, str]) -> Account | None:
        """Return the first user matching every criterion or ``None``."""
        if not criteria:
            raise ValueError("lookup criteria must not be empty")
        unknown = set(criteria) - _LOOKUP_COLUMNS
        if unknown:
            raise ValueError(f"unsupported lookup columns: {sorted(unknown)}")

        clauses = [
            sql.SQL("{} = {}").format(sql.Identifier(column), sql.Placeholder())
            for column in criteria
        ]
        query = sql.SQL("SELECT {columns} FROM users WHERE {where} LIMIT 1").format(
            columns=sql.SQL(", ").join(map(sql.Identifier, _COLUMNS)),
            where=sql.SQL(" AND ").join(clauses),
        )
        with self._pool.connection() as conn:
            with conn.cursor(row_factory=tuple_row) as cur:
                cur.execute(query, list(criteria.values()))
                row = cur.fetchone()
                if not row:
                    return None
        return self._map_record(row)

    def save(self, account: Account) -> Account:
        """Insert or update the account keyed on ``id`` and return the stored row."""
        assignments = [
            sql.SQL("{col} = EXCLUDED.{col}").format(col=sql.Identifier(column))
            for column in _WRITABLE_COLUMNS
            if column != "id"
        ]
        query = sql.SQL(
            """
            INSERT INTO users ({insert_columns}, created_at, updated_at)
            VALUES ({placeholders}, NOW(), NOW())
            ON CONFLICT (id) DO UPDATE SET {assignments}, updated_at = NOW()
            RETURNING {columns}
            """
        ).format(
            insert_columns=sql.SQL(", ").join(map(sql.Identifier, _WRITABLE_COLUMNS)),
            placeholders=sql.SQL(", ").join(sql.Placeholder() * len(_WRITABLE_COLUMNS)),
            assignments=sql.SQL(", ").join(assignments),
            columns=sql.SQL(", ").join(map(sql.Identifier, _COLUMNS)),
        )
        with self._pool.connection() as conn:
            with conn.cursor(row_factory=tuple_row) as cur:
                cur.execute(query, self._to_params(account))
                row = cur.fetchone()
                conn.commit()
        return self._map_record(row)

    def _to_params(self, account: Account) -> list[Any]:
        params: list[Any] = []
        for column in _WRITABLE_COLUMNS:
            value = getattr(account, column)
            params.append(value.value if isinstance(value, UserType) else value)
        return params

    def _map_record(self, row: tuple) -> Account:
        """Convert a raw database tuple into the domain ``Account`` dataclass."""
        values = dict(zip(_COLUMNS, row))
        values["user_type"] = UserType(values["user_type"])
        return Account(**values)
