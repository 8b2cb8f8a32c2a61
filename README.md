# machinerepair

`machinerepair` is a library for the records of a machine repair shop. It has three kinds of user:

- **Clients** register their machines and order repair services for them.
- **Workers** take open orders and complete them.
- **Admins** manage the user accounts.

All data is kept in an SQLite database through the standard library's `sqlite3`. The package has no dependencies of its own.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Modules

- `machinerepair.config` holds `Settings`, a frozen dataclass. It has the fields `hostname`, `dbname`, `username`, `password`, `port` and `password_salt`. Only `password_salt` is used by the package, when it hashes passwords. The other fields are stored and nothing more.
- `machinerepair.user` holds the following:
  - `User`, a dataclass with `name`, `login`, `password`, `role` and an optional `id`. Its method `str_values` returns the chosen fields as display strings, and `validate` checks every field.
  - `UserRole`, an enum with the members `CLIENT`, `WORKER`, `ADMIN` and `NONE`.
  - The converters `role_by_str`, which is case-insensitive and returns `UserRole.NONE` for an unknown name, and `str_by_role`.
  - `get_user_roles`, which returns the roles that can be assigned to a user.
  - The validators `validate_name`, `validate_login`, `validate_password` and `validate_role`. They raise `ValidationError`, a subclass of `ValueError`.
  - `hash_password(password, salt)`, which returns a salted SHA-256 hash in hex.
  - `generate_password()`, which returns 32 random characters.
- `machinerepair.service` holds `Duration` and `Service`.
  - `Duration` allows at most 11 months, 30 days, 24 hours and 60 minutes, and raises `ValueError` otherwise. It prints in Russian with the correct plural forms, for example `"1 месяц 2 дня"`. A duration of zero prints as `"Моментально"`.
  - `Service` holds a name, a `Duration`, a price and an optional `id`.
- `machinerepair.text` holds `translit`, which replaces lower-case Cyrillic letters with Latin spellings.
- `machinerepair.machine` holds the dataclasses `MachineType`, `MachineBrand`, `MachineMark` and `Machine`. `Machine.str_values` returns the machine's name, type and brand as display strings.
- `machinerepair.order` holds `Order`. It has three methods:
  - `str_values` returns a table row.
  - `str_status` returns one of "Выполнен", "Выполняется" or "Поиск исполнителя".
  - `str_date_end` returns the end date as `dd.mm.yyyy`, or "Еще не завершен" if the order is still open.
  - All three raise `ValueError` when data they need is missing.
- `machinerepair.relationship` holds `Relationship`, a reference that is resolved lazily by an initializer and then cached. It raises `InitializerIsEmpty` when it holds neither a value nor an initializer.
- `machinerepair.database` holds `Database`, a context manager around an SQLite connection. It has the following methods:
  - `create_tables` builds the schema. It raises `DatabaseError` on failure.
  - `create_user` stores a hashed password. `create_machine`, `create_machine_mark` and `create_order` insert the other records.
  - `delete_user`, `clear_tables` and `drop_tables` remove data.
  - The insert and delete methods return `True` or `False` rather than raising.
- `machinerepair.queries` holds `Queries`, which covers every read operation.
  - Users are read with `get_user_by_id`, `get_user_by_login` and `get_users`.
  - Machines, types, brands and marks are read with `get_machine`, `get_machines`, `get_machine_by_order`, `get_machine_types`, `get_machine_brands`, `get_machine_mark` and `find_machine_mark`.
  - Services are read with `get_service` and `get_services`. Per-mark overrides of duration and price take precedence.
  - Orders are read with `get_order`, `get_available_orders`, `get_active_orders` and `get_machine_orders`.
  - Counts and dates come from `get_client_orders_count`, `get_worker_orders_count` and `get_last_repair_date`.
  - A missing row comes back as `None`.
- `machinerepair.permissions` holds `PermissionController` and `OrderExecutorPermission`, and both raise `PermissionDenied`.
  - `PermissionController` checks that a user exists and has a given role.
  - `OrderExecutorPermission` also checks that the worker is the executor of a given order.
- `machinerepair.accounts` holds the account functions:
  - `check_auth` raises `AuthenticationError` on a wrong login or password.
  - `generate_login` builds a transliterated login and appends a number if the login is taken.
  - `validate_new_user` and `prepare_user` check a new account. `prepare_user` also fills in a missing login or password.
  - `validate_user_changes` and `check_changes` handle edits.
- `machinerepair.workflow` holds the following:
  - `add_machine` registers a client's machine and creates its mark if needed.
  - `validate_machine_name` and `validate_description` check input. The description is the text a worker leaves when completing an order.

## Example

```python
from machinerepair.accounts import check_auth
from machinerepair.config import Settings
from machinerepair.database import Database
from machinerepair.queries import Queries
from machinerepair.user import User, UserRole

password = "password"
with Database(":memory:", Settings()) as database:
    database.create_tables()
    database.create_user(User("Evgeniy", "evgeniy", password, UserRole.CLIENT))
    queries = Queries(database)
    user = check_auth(queries, "evgeniy", password)
    print(user.role)  # UserRole.CLIENT
```

## What the package does not do

- It has no user interface and no command-line program. It is a library only.
- It has no functions that update stored records. You cannot change a user's name, login, role or password, assign an executor to an order, or mark an order complete. `validate_user_changes`, `check_changes` and `validate_description` only check the input for such changes.
- It does not dump or load database backups, and it does not connect to any database server. `Database` opens an SQLite file, or an in-memory database by default.

## Running the tests

```
pytest
```