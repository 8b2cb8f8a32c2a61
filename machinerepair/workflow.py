"""Client and worker actions: registering machines and closing orders."""

from __future__ import annotations

from .database import Database, DatabaseError
from .machine import Machine
from .queries import Queries
from .user import ValidationError


def _simplified(text: str) -> str:
    return " ".join(text.split())


def validate_machine_name(name: str) -> None:
    if len(name) <= 3:
        raise ValidationError("Название станка должно быть больше 3 символов")


def validate_description(description: str) -> None:
    """Check the description a worker leaves when completing an order."""
    if description != _simplified(description):
        raise ValidationError("Описание содержит лишние пробелы")
    if len(description) <= 10:
        raise ValidationError("Описание слишком короткое")


def add_machine(
    database: Database,
    queries: Queries,
    owner_id: int,
    name: str,
    type_id: int,
    brand_id: int,
) -> Machine:
    """Register a machine for a client, creating its mark if needed."""
    name = _simplified(name)
    validate_machine_name(name)
    mark = queries.find_machine_mark(type_id, brand_id)
    if mark is None:
        database.create_machine_mark(type_id, brand_id)
        mark = queries.find_machine_mark(type_id, brand_id)
    if mark is None or not database.create_machine(Machine(name), owner_id, mark.id):
        raise DatabaseError(
            "Не удалось выполнить операцию, возможные причины:\n"
            "1) Проблемы с базой данных \n"
            "2) Станок с таким именем уже есть"
        )
    return next(m for m in queries.get_machines(owner_id) if m.name == name)