"""Machines, their types, brands and marks."""

from __future__ import annotations

from dataclasses import dataclass

from .user import User

_DISPLAY_ERROR = "Не получилось отобразить данные о станке"


@dataclass
class MachineType:
    """A kind of machine; ``id`` is set once stored."""

    name: str
    id: int | None = None


@dataclass
class MachineBrand:
    """A machine manufacturer; ``id`` is set once stored."""

    name: str
    id: int | None = None


@dataclass
class MachineMark:
    """A pairing of machine type and brand; ``id`` is set once stored."""

    type: MachineType
    brand: MachineBrand
    id: int | None = None


@dataclass
class Machine:
    """A client's machine; ``id`` is set once stored."""

    name: str
    owner: User | None = None
    mark: MachineMark | None = None
    id: int | None = None

    def str_values(
        self,
        name: bool = True,
        machine_type: bool = True,
        machine_brand: bool = True,
    ) -> list[str]:
        """Return the selected fields as display strings."""
        if (machine_type or machine_brand) and self.mark is None:
            raise ValueError(_DISPLAY_ERROR)
        values = []
        if name:
            values.append(self.name)
        if machine_type:
            values.append(self.mark.type.name)
        if machine_brand:
            values.append(self.mark.brand.name)
        return values