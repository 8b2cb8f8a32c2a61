import pytest

from machinerepair.machine import Machine, MachineBrand, MachineMark, MachineType
from machinerepair.user import User, UserRole


def _mark():
    return MachineMark(MachineType("Lathe", id=1), MachineBrand("Acme", id=2), id=3)


def test_str_values_all_fields_in_order():
    machine = Machine("Main lathe", mark=_mark())
    assert machine.str_values() == ["Main lathe", "Lathe", "Acme"]


def test_str_values_selected_fields():
    machine = Machine("Main lathe", mark=_mark())
    assert machine.str_values(name=False) == ["Lathe", "Acme"]
    assert machine.str_values(machine_type=False) == ["Main lathe", "Acme"]
    assert machine.str_values(machine_brand=False) == ["Main lathe", "Lathe"]


def test_str_values_name_only_without_mark():
    machine = Machine("Press")
    assert machine.str_values(machine_type=False, machine_brand=False) == ["Press"]


@pytest.mark.parametrize(
    "flags",
    [{}, {"machine_brand": False}, {"machine_type": False}],
)
def test_str_values_without_mark_raises(flags):
    machine = Machine("Press")
    with pytest.raises(ValueError, match="Не получилось отобразить данные о станке"):
        machine.str_values(**flags)


def test_machine_keeps_owner_and_ids():
    owner = User("Evgeniy", "evgeni", "password", UserRole.CLIENT, id=7)
    machine = Machine("Drill", owner=owner, mark=_mark(), id=11)
    assert machine.owner.login == "evgeni"
    assert machine.mark.id == 3
    assert machine.id == 11