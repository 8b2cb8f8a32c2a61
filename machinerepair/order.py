"""Repair orders placed by clients and carried out by workers."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from .machine import Machine
from .service import Service
from .user import User

_DISPLAY_ERROR = "Не получилось отобразить данные заказа"
_DATE_FORMAT = "%d.%m.%Y"


@dataclass
class Order:
    """A request to perform a service on a machine; ``id`` is set once stored."""

    date_start: datetime.date | None
    customer: User | None = None
    machine: Machine | None = None
    service: Service | None = None
    complete: bool = False
    date_end: datetime.date | None = None
    description: str = ""
    executor: User | None = None
    id: int | None = None

    def str_values(
        self,
        machine_type: bool = True,
        machine_brand: bool = True,
        service_name: bool = True,
        date_start: bool = True,
        date_end: bool = True,
        status: bool = True,
    ) -> list[str]:
        """Return the selected fields as display strings."""
        machine_missing = self.machine is None or self.machine.mark is None
        if (
            ((machine_type or machine_brand) and machine_missing)
            or (service_name and self.service is None)
            or (date_start and self.date_start is None)
        ):
            raise ValueError(_DISPLAY_ERROR)

        values = []
        if machine_type:
            values.append(self.machine.mark.type.name)
        if machine_brand:
            values.append(self.machine.mark.brand.name)
        if service_name:
            values.append(self.service.name)
        if date_start:
            values.append(self.date_start.strftime(_DATE_FORMAT))
        if date_end:
            values.append(self.str_date_end())
        if status:
            values.append(self.str_status())
        return values

    def str_status(self) -> str:
        """Return the human-readable state of the order."""
        if self.complete:
            return "Выполнен"
        if self.executor is not None:
            return "Выполняется"
        return "Поиск исполнителя"

    def str_date_end(self) -> str:
        """Return the completion date, or a note that the order is still open."""
        if self.complete:
            if self.date_end is None:
                raise ValueError(_DISPLAY_ERROR)
            return self.date_end.strftime(_DATE_FORMAT)
        return "Еще не завершен"