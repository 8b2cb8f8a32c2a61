"""Read access to users, machines, services and orders."""

from __future__ import annotations

import datetime
import sqlite3
from typing import Iterable

from .database import Database, DatabaseError
from .machine import Machine, MachineBrand, MachineMark, MachineType
from .order import Order
from .service import Duration, Service
from .user import User, role_by_str

_SERVICE_COLUMNS = """
    SELECT
        services.id AS id,
        services.name AS name,
        COALESCE(services_marks.duration_months, services.duration_months) AS duration_months,
        COALESCE(services_marks.duration_days, services.duration_days) AS duration_days,
        COALESCE(services_marks.duration_hours, services.duration_hours) AS duration_hours,
        COALESCE(services_marks.duration_minutes, services.duration_minutes) AS duration_minutes,
        COALESCE(services_marks.price, services.price) AS price
    FROM services
    INNER JOIN services_marks ON services.id = services_marks.service
    WHERE services_marks.mark = (SELECT mark FROM machines WHERE machines.id = ?)
"""


def _parse_date(value) -> datetime.date | None:
    if value is None:
        return None
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value)[:10])


def _service_from_row(row: sqlite3.Row) -> Service:
    duration = Duration(
        int(row["duration_months"] or 0),
        int(row["duration_days"] or 0),
        int(row["duration_hours"] or 0),
        int(row["duration_minutes"] or 0),
    )
    return Service(row["name"], duration, float(row["price"] or 0), row["id"])


def _user_from_row(row: sqlite3.Row) -> User:
    return User(
        row["name"], row["login"], row["password"], role_by_str(row["role"]), row["id"]
    )


class Queries:
    """Lookups over a :class:`Database`; missing rows come back as ``None``."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def _rows(self, sql: str, params: Iterable = (), error: str = "") -> list[sqlite3.Row]:
        try:
            return self.database.connection.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(error) from exc

    def _row(self, sql: str, params: Iterable = (), error: str = "") -> sqlite3.Row | None:
        rows = self._rows(sql, params, error)
        return rows[0] if rows else None

    def get_client_orders_count(self, user_id: int) -> int:
        """Return how many orders the client has placed."""
        row = self._row(
            "SELECT COUNT(*) AS count_orders FROM orders WHERE customer = ?",
            (user_id,),
            "Failed to select user's orders count",
        )
        return int(row["count_orders"])

    def get_worker_orders_count(self, worker_id: int) -> int:
        """Return how many unfinished orders the worker is carrying out."""
        row = self._row(
            "SELECT COUNT(*) AS count_orders FROM orders WHERE executor = ? AND complete = 0",
            (worker_id,),
            "Failed to select user's orders count",
        )
        return int(row["count_orders"])

    def get_last_repair_date(self, machine_id: int) -> datetime.date | None:
        """Return the end date of the machine's latest completed order."""
        row = self._row(
            "SELECT date_end FROM orders WHERE machine = ? AND complete = 1 "
            "ORDER BY date_end DESC LIMIT 1",
            (machine_id,),
            "Failed to select machine's date of last repair",
        )
        return None if row is None else _parse_date(row["date_end"])

    def get_user_by_login(self, login: str) -> User | None:
        row = self._row(
            "SELECT * FROM users WHERE login = ?", (login,), "Failed to select user request"
        )
        return None if row is None else _user_from_row(row)

    def get_user_by_id(self, user_id: int) -> User | None:
        row = self._row(
            "SELECT * FROM users WHERE id = ?", (user_id,), "Failed to select user request"
        )
        return None if row is None else _user_from_row(row)

    def get_machine_brand(self, brand_id: int) -> MachineBrand | None:
        row = self._row(
            "SELECT * FROM machine_brands WHERE id = ?",
            (brand_id,),
            "Failed to select mark request",
        )
        return None if row is None else MachineBrand(row["name"], row["id"])

    def get_machine_type(self, type_id: int) -> MachineType | None:
        row = self._row(
            "SELECT * FROM machine_types WHERE id = ?",
            (type_id,),
            "Failed to select mark request",
        )
        return None if row is None else MachineType(row["name"], row["id"])

    def _mark(self, type_id: int, brand_id: int, mark_id: int) -> MachineMark:
        machine_type = self.get_machine_type(type_id)
        brand = self.get_machine_brand(brand_id)
        if machine_type is None or brand is None:
            raise DatabaseError("Failed to select mark request")
        return MachineMark(machine_type, brand, mark_id)

    def get_machine_mark(self, mark_id: int) -> MachineMark | None:
        row = self._row(
            "SELECT * FROM machine_marks WHERE id = ?",
            (mark_id,),
            "Failed to select mark request",
        )
        if row is None:
            return None
        return self._mark(row["type"], row["brand"], row["id"])

    def find_machine_mark(self, type_id: int, brand_id: int) -> MachineMark | None:
        """Return the mark pairing the given type and brand, if it exists."""
        row = self._row(
            "SELECT * FROM machine_marks WHERE brand = ? AND type = ?",
            (brand_id, type_id),
            "Failed to select mark request",
        )
        if row is None:
            return None
        return self._mark(type_id, brand_id, row["id"])

    def get_machine(self, machine_id: int) -> Machine | None:
        row = self._row(
            "SELECT * FROM machines WHERE id = ?",
            (machine_id,),
            "Failed to select machine request",
        )
        if row is None:
            return None
        owner = self.get_user_by_id(row["owner"])
        mark = self.get_machine_mark(row["mark"])
        return Machine(row["name"], owner, mark, row["id"])

    def get_machine_by_order(self, order_id: int) -> Machine | None:
        row = self._row(
            "SELECT machine FROM orders WHERE id = ?",
            (order_id,),
            "Failed to select machine request",
        )
        return None if row is None else self.get_machine(row["machine"])

    def get_service(self, machine_id: int, service_id: int) -> Service | None:
        """Return the service as offered for the machine's mark, with mark overrides."""
        row = self._row(
            _SERVICE_COLUMNS + " AND services_marks.service = ?",
            (machine_id, service_id),
            "Failed to select service request",
        )
        return None if row is None else _service_from_row(row)

    def get_order(self, order_id: int) -> Order | None:
        row = self._row(
            "SELECT * FROM orders WHERE id = ?", (order_id,), "Failed to select order request"
        )
        if row is None:
            return None
        order = Order(
            _parse_date(row["date_start"]),
            customer=self.get_user_by_id(row["customer"]),
            machine=self.get_machine(row["machine"]),
            service=self.get_service(row["machine"], row["service"]),
            id=row["id"],
        )
        if row["complete"]:
            order.complete = True
            order.date_end = _parse_date(row["date_end"])
            order.description = row["description"] or ""
        if row["executor"] is not None:
            order.executor = self.get_user_by_id(row["executor"])
        return order

    def get_machines(self, owner_id: int) -> list[Machine]:
        rows = self._rows(
            "SELECT * FROM machines WHERE owner = ?",
            (owner_id,),
            "Failed to select machines request",
        )
        owner = self.get_user_by_id(owner_id)
        return [
            Machine(row["name"], owner, self.get_machine_mark(row["mark"]), row["id"])
            for row in rows
        ]

    def get_services(self, machine_id: int) -> list[Service]:
        rows = self._rows(
            _SERVICE_COLUMNS, (machine_id,), "Failed to select services request"
        )
        return [_service_from_row(row) for row in rows]

    def get_machine_types(self) -> list[MachineType]:
        rows = self._rows("SELECT * FROM machine_types", (), "Failed to select services request")
        return [MachineType(row["name"], row["id"]) for row in rows]

    def get_machine_brands(self, type_id: int) -> list[MachineBrand]:
        """Return the brands that have a mark of the given type."""
        rows = self._rows(
            """
            SELECT machine_brands.id AS id, machine_brands.name AS name
            FROM machine_marks
            JOIN machine_brands ON machine_marks.brand = machine_brands.id
            WHERE machine_marks.type = ?
            """,
            (type_id,),
            "Failed to select brands request",
        )
        return [MachineBrand(row["name"], row["id"]) for row in rows]

    def get_users(self) -> list[User]:
        rows = self._rows("SELECT * FROM users", (), "Failed to select users request")
        return [_user_from_row(row) for row in rows]

    def _open_orders(self, rows: list[sqlite3.Row]) -> list[Order]:
        return [
            Order(
                _parse_date(row["date_start"]),
                customer=self.get_user_by_id(row["customer"]),
                machine=self.get_machine(row["machine"]),
                service=self.get_service(row["machine"], row["service"]),
                id=row["id"],
            )
            for row in rows
        ]

    def get_available_orders(self) -> list[Order]:
        """Return unfinished orders that no worker has taken yet."""
        rows = self._rows(
            "SELECT id, customer, machine, service, date_start FROM orders "
            "WHERE executor IS NULL AND complete = 0",
            (),
            "Failed to select aviable orders request",
        )
        return self._open_orders(rows)

    def get_active_orders(self, user_id: int) -> list[Order]:
        """Return unfinished orders the worker is carrying out."""
        rows = self._rows(
            "SELECT id, customer, machine, service, date_start FROM orders "
            "WHERE executor = ? AND complete = 0",
            (user_id,),
            "Failed to select active orders",
        )
        return self._open_orders(rows)

    def get_machine_orders(self, machine_id: int) -> list[Order]:
        """Return every order placed for the machine."""
        rows = self._rows(
            "SELECT id FROM orders WHERE machine = ?",
            (machine_id,),
            "Failed to select active orders",
        )
        return [self.get_order(row["id"]) for row in rows]