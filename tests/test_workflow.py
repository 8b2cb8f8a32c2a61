import pytest

from machinerepair.database import Database, DatabaseError
from machinerepair.queries import Queries
from machinerepair.user import User, UserRole, ValidationError
from machinerepair.workflow import add_machine, validate_description, validate_machine_name


@pytest.fixture
def shop():
    database = Database()
    database.create_tables()
    password = "password"
    database.create_user(User("Client Person", "client_one", password, UserRole.CLIENT))
    conn = database.connection
    conn.execute("INSERT INTO machine_types(name) VALUES ('Lathe')")
    conn.execute("INSERT INTO machine_brands(name) VALUES ('Acme')")
    queries = Queries(database)
    yield database, queries, queries.get_user_by_login("client_one").id
    database.close()


def _mark_count(database):
    return database.connection.execute("SELECT COUNT(*) FROM machine_marks").fetchone()[0]


@pytest.mark.parametrize("name", ["", "abc", "ab"])
def test_short_machine_name_rejected(name):
    with pytest.raises(ValidationError):
        validate_machine_name(name)


@pytest.mark.parametrize(
    "description",
    [" leading space text", "double  space here", "short", "0123456789"],
)
def test_bad_description_rejected(description):
    with pytest.raises(ValidationError):
        validate_description(description)


def test_add_machine_creates_mark(shop):
    database, queries, owner_id = shop
    assert _mark_count(database) == 0
    machine = add_machine(database, queries, owner_id, "Main lathe", 1, 1)
    assert _mark_count(database) == 1
    assert machine.name == "Main lathe"
    assert machine.mark.type.name == "Lathe"
    assert machine.mark.brand.name == "Acme"
    assert machine.owner.id == owner_id


def test_add_machine_reuses_mark(shop):
    database, queries, owner_id = shop
    first = add_machine(database, queries, owner_id, "First lathe", 1, 1)
    second = add_machine(database, queries, owner_id, "Second lathe", 1, 1)
    assert _mark_count(database) == 1
    assert first.mark.id == second.mark.id
    assert [m.name for m in queries.get_machines(owner_id)] == ["First lathe", "Second lathe"]


def test_add_machine_simplifies_name(shop):
    database, queries, owner_id = shop
    machine = add_machine(database, queries, owner_id, "  Lathe   One ", 1, 1)
    assert machine.name == "Lathe One"


def test_add_machine_duplicate_name_fails(shop):
    database, queries, owner_id = shop
    add_machine(database, queries, owner_id, "Main lathe", 1, 1)
    with pytest.raises(DatabaseError):
        add_machine(database, queries, owner_id, "Main lathe", 1, 1)
    assert len(queries.get_machines(owner_id)) == 1


def test_add_machine_short_name_fails(shop):
    database, queries, owner_id = shop
    with pytest.raises(ValidationError):
        add_machine(database, queries, owner_id, "  ab  ", 1, 1)
    assert queries.get_machines(owner_id) == []


def test_add_machine_unknown_type_fails(shop):
    database, queries, owner_id = shop
    with pytest.raises(DatabaseError):
        add_machine(database, queries, owner_id, "Main lathe", 42, 1)
    assert _mark_count(database) == 0