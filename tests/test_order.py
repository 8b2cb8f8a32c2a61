import datetime

import pytest

from machinerepair.machine import Machine, MachineBrand, MachineMark, MachineType
from machinerepair.order import Order
from machinerepair.service import Duration, Service
from machinerepair.user import User, UserRole


def _machine():
    return Machine("Main lathe", mark=MachineMark(MachineType("Lathe"), MachineBrand("Acme")))


def _order(**kwargs):
    return Order(
        datetime.date(2024, 3, 15),
        customer=User("Client", "client", "password", UserRole.CLIENT),
        machine=_machine(),
        service=Service("Oiling", Duration(hours=2), 100.0),
        **kwargs,
    )


def _worker():
    return User("Worker", "worker", "password", UserRole.WORKER)


def test_status_searching_for_executor():
    assert _order().str_status() == "Поиск исполнителя"


def test_status_in_progress():
    assert _order(executor=_worker()).str_status() == "Выполняется"


def test_status_complete():
    order = _order(executor=_worker(), complete=True, date_end=datetime.date(2024, 3, 20))
    assert order.str_status() == "Выполнен"


def test_date_end_open_order():
    assert _order().str_date_end() == "Еще не завершен"


def test_date_end_complete_order():
    order = _order(complete=True, date_end=datetime.date(2024, 3, 20))
    assert order.str_date_end() == "20.03.2024"


def test_date_end_complete_without_date_raises():
    with pytest.raises(ValueError, match="Не получилось отобразить данные заказа"):
        _order(complete=True).str_date_end()


def test_str_values_all_fields():
    assert _order().str_values() == [
        "Lathe",
        "Acme",
        "Oiling",
        "15.03.2024",
        "Еще не завершен",
        "Поиск исполнителя",
    ]


def test_str_values_list_columns():
    values = _order().str_values(True, True, True, False, False, False)
    assert values == ["Lathe", "Acme", "Oiling"]


def test_str_values_without_machine_columns_ignores_missing_machine():
    order = Order(datetime.date(2024, 3, 15), service=Service("Oiling"))
    assert order.str_values(False, False) == [
        "Oiling",
        "15.03.2024",
        "Еще не завершен",
        "Поиск исполнителя",
    ]


@pytest.mark.parametrize(
    "order",
    [
        Order(datetime.date(2024, 3, 15), service=Service("Oiling")),
        Order(datetime.date(2024, 3, 15), machine=Machine("Bare"), service=Service("Oiling")),
        Order(datetime.date(2024, 3, 15), machine=_machine()),
        Order(None, machine=_machine(), service=Service("Oiling")),
    ],
)
def test_str_values_missing_data_raises(order):
    with pytest.raises(ValueError, match="Не получилось отобразить данные заказа"):
        order.str_values()


def test_str_values_complete_without_end_date_raises():
    with pytest.raises(ValueError):
        _order(complete=True).str_values()