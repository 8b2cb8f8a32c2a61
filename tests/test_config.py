import dataclasses

import pytest

from machinerepair.config import Settings


def test_default_port_is_postgres_standard():
    assert Settings().port == 5432


def test_explicit_values_are_kept():
    settings = Settings(hostname="db.example.com", dbname="shop", port=6000, password_salt="secret")
    assert settings.hostname == "db.example.com"
    assert settings.dbname == "shop"
    assert settings.port == 6000
    assert settings.password_salt == "secret"


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.port = 1
    assert settings.port == 5432


def test_replace_round_trip():
    original = Settings(password_salt="secret")
    changed = dataclasses.replace(original, port=7000)
    assert changed.port == 7000
    assert changed.password_salt == original.password_salt
    assert dataclasses.replace(changed, port=original.port) == original