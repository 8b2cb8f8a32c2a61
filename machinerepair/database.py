"""Storage of users, machines, services and orders in an SQLite database."""

from __future__ import annotations

import datetime
import sqlite3
from typing import Iterable

from .config import Settings
from .machine import Machine
from .user import User, hash_password, str_by_role


class DatabaseError(RuntimeError):
    """Raised when the database cannot be opened or its schema cannot be built."""


_TABLES: tuple[tuple[str, str, str], ...] = (
    (
        "users",
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            name TEXT NOT NULL,
            login TEXT UNIQUE NOT NULL,
            password TEXT NOT NULL,
            role TEXT NOT NULL CHECK (role IN ('Client', 'Worker', 'Admin'))
        )
        """,
        "Failed to create users table request",
    ),
    (
        "machine_types",
        """
        CREATE TABLE IF NOT EXISTS machine_types (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            name TEXT UNIQUE NOT NULL
        )
        """,
        "Failed to create machine_types table request",
    ),
    (
        "machine_brands",
        """
        CREATE TABLE IF NOT EXISTS machine_brands (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            name TEXT UNIQUE NOT NULL
        )
        """,
        "Failed to create machine_brands table request",
    ),
    (
        "machine_marks",
        """
        CREATE TABLE IF NOT EXISTS machine_marks (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            type INTEGER NOT NULL REFERENCES machine_types(id),
            brand INTEGER NOT NULL REFERENCES machine_brands(id),
            UNIQUE(type, brand)
        )
        """,
        "Failed to create machine_marks table request",
    ),
    (
        "machines",
        """
        CREATE TABLE IF NOT EXISTS machines (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            name TEXT NOT NULL,
            owner INTEGER NOT NULL REFERENCES users(id),
            mark INTEGER NOT NULL REFERENCES machine_marks(id),
            UNIQUE(owner, name)
        )
        """,
        "Failed to create machines table request",
    ),
    (
        "services",
        """
        CREATE TABLE IF NOT EXISTS services (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            name TEXT UNIQUE NOT NULL,
            duration_months SMALLINT NOT NULL DEFAULT 0,
            duration_days SMALLINT NOT NULL DEFAULT 0,
            duration_hours SMALLINT NOT NULL DEFAULT 0,
            duration_minutes SMALLINT NOT NULL DEFAULT 0,
            price NUMERIC(9, 2) NOT NULL
        )
        """,
        "Failed to create services table request",
    ),
    (
        "services_marks",
        """
        CREATE TABLE IF NOT EXISTS services_marks (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            service INTEGER NOT NULL REFERENCES services(id),
            mark INTEGER NOT NULL REFERENCES machine_marks(id),
            duration_months SMALLINT,
            duration_days SMALLINT,
            duration_hours SMALLINT,
            duration_minutes SMALLINT,
            price NUMERIC(9, 2),
            UNIQUE(service, mark)
        )
        """,
        "Failed to create services_marks table request",
    ),
    (
        "orders",
        """
        CREATE TABLE IF NOT EXISTS orders (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
            date_start DATE NOT NULL DEFAULT CURRENT_DATE,
            date_end DATE DEFAULT NULL,
            complete BOOLEAN NOT NULL DEFAULT 0,
            description TEXT DEFAULT NULL,
            customer INTEGER NOT NULL REFERENCES users(id),
            executor INTEGER DEFAULT NULL REFERENCES users(id),
            machine INTEGER NOT NULL REFERENCES machines(id),
            service INTEGER NOT NULL REFERENCES services(id)
        )
        """,
        "Failed to create orders table request",
    ),
)

_ORDERS_UNIQUE_INDEX = """
    CREATE UNIQUE INDEX IF NOT EXISTS orders_unique_index
        ON orders (customer, machine, service)
        WHERE complete = 0
"""

# Children before parents, so foreign keys never block the removal.
_REMOVAL_ORDER = (
    "orders",
    "services_marks",
    "services",
    "machines",
    "machine_marks",
    "machine_types",
    "machine_brands",
    "users",
)


class Database:
    """An open connection to the repair-shop database."""

    def __init__(self, path: str = ":memory:", settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        try:
            self.connection = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError("Couldn't open the DB") from exc
        self.connection.row_factory = sqlite3.Row
        self.connection.execute("PRAGMA foreign_keys = ON")

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Close the connection."""
        self.connection.close()

    def _run(self, sql: str, params: Iterable = ()) -> bool:
        try:
            self.connection.execute(sql, tuple(params))
        except sqlite3.Error:
            return False
        return True

    def create_tables(self) -> None:
        """Create every table that does not exist yet."""
        for _name, sql, message in _TABLES:
            if not self._run(sql):
                raise DatabaseError(message)
        if not self._run(_ORDERS_UNIQUE_INDEX):
            raise DatabaseError("Failed to create orders table request")

    def create_order(
        self,
        customer_id: int,
        machine_id: int,
        service_id: int,
        date_start: datetime.date | None = None,
    ) -> bool:
        """Insert an order; return whether it was accepted."""
        if date_start is None:
            date_start = datetime.date.today()
        return self._run(
            "INSERT INTO orders(date_start, customer, machine, service) VALUES (?, ?, ?, ?)",
            (date_start.isoformat(), customer_id, machine_id, service_id),
        )

    def create_machine(self, machine: Machine, owner_id: int, mark_id: int) -> bool:
        """Insert a machine for an owner; return whether it was accepted."""
        return self._run(
            "INSERT INTO machines(name, owner, mark) VALUES (?, ?, ?)",
            (machine.name, owner_id, mark_id),
        )

    def create_user(self, user: User) -> bool:
        """Insert a user with a hashed password; return whether it was accepted."""
        return self._run(
            "INSERT INTO users(name, login, password, role) VALUES (?, ?, ?, ?)",
            (
                user.name,
                user.login,
                hash_password(user.password, self.settings.password_salt),
                str_by_role(user.role),
            ),
        )

    def create_machine_mark(self, type_id: int, brand_id: int) -> bool:
        """Insert a type/brand pairing; return whether it was accepted."""
        return self._run(
            "INSERT INTO machine_marks(type, brand) VALUES (?, ?)",
            (type_id, brand_id),
        )

    def delete_user(self, user_id: int) -> bool:
        """Delete a user; return whether the statement succeeded."""
        return self._run("DELETE FROM users WHERE id = ?", (user_id,))

    def clear_tables(self) -> bool:
        """Delete all rows from every table; return whether every delete succeeded."""
        results = [self._run(f"DELETE FROM {table}") for table in _REMOVAL_ORDER]
        return all(results)

    def drop_tables(self) -> bool:
        """Drop every table; return whether every drop succeeded."""
        results = [self._run(f"DROP TABLE {table}") for table in _REMOVAL_ORDER]
        return all(results)