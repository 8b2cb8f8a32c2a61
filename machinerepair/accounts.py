"""Signing in and preparing user accounts."""

from __future__ import annotations

import itertools

from .queries import Queries
from .text import translit
from .user import (
    User,
    UserRole,
    ValidationError,
    generate_password,
    hash_password,
    role_by_str,
    validate_login,
    validate_name,
    validate_password,
    validate_role,
)


class AuthenticationError(Exception):
    """Raised when a login and password do not match a stored user."""


def _simplified(text: str) -> str:
    return " ".join(text.split())


def _as_role(role: UserRole | str) -> UserRole:
    return role_by_str(role) if isinstance(role, str) else role


def check_auth(queries: Queries, login: str, password: str) -> User:
    """Return the user whose login and password match, or raise AuthenticationError."""
    user = queries.get_user_by_login(login)
    salt = queries.database.settings.password_salt
    if user is not None and user.password == hash_password(password, salt):
        return user
    raise AuthenticationError("Incorrect login or password")


def generate_login(queries: Queries, name: str) -> str:
    """Build an unused login from a user's name."""
    validate_name(name)
    base = translit(name.replace(" ", "_").lower())
    if queries.get_user_by_login(base) is None:
        return base
    return next(
        candidate
        for candidate in (f"{base}{index}" for index in itertools.count(1))
        if queries.get_user_by_login(candidate) is None
    )


def validate_new_user(name: str, login: str, password: str, role: UserRole | str) -> None:
    """Check the fields of a new user; an empty login or password is allowed."""
    validate_name(name)
    if login:
        validate_login(login)
    if password:
        validate_password(password)
    validate_role(role)


def prepare_user(
    queries: Queries, name: str, login: str, password: str, role: UserRole | str
) -> User:
    """Return a new user, generating the login and password when left empty."""
    name = _simplified(name)
    login = _simplified(login)
    password = _simplified(password)
    if not name:
        raise ValidationError("Введите имя")
    validate_new_user(name, login, password, role)
    if not login:
        login = generate_login(queries, name)
    if not password:
        password = generate_password()
    return User(name, login, password, _as_role(role))


def validate_user_changes(
    user: User, name: str, login: str, password: str, role: UserRole | str
) -> None:
    """Check only the fields that differ from the stored user, and any new password."""
    role = _as_role(role)
    if name != user.name:
        validate_name(name)
    if login != user.login:
        validate_login(login)
    if role is not user.role:
        validate_role(role)
    if password:
        validate_password(password)


def check_changes(
    user: User, name: str, login: str, password: str, role: UserRole | str
) -> bool:
    """Return whether the given values would change the user."""
    return not (
        name == user.name
        and login == user.login
        and _as_role(role) is user.role
        and not password
    )