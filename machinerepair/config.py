"""Connection and security settings for the repair-shop database."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Database connection parameters and the salt used for password hashes."""

    hostname: str = "localhost"
    dbname: str = "machines"
    username: str = ""
    password: str = ""
    port: int = 5432
    password_salt: str = ""