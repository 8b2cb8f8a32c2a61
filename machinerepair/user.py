"""Users, their roles and the rules their fields must follow."""

from __future__ import annotations

import enum
import hashlib
import secrets
from dataclasses import dataclass


class ValidationError(ValueError):
    """Raised when a user field does not satisfy its rules."""


class UserRole(enum.Enum):
    CLIENT = "Client"
    WORKER = "Worker"
    ADMIN = "Admin"
    NONE = "None"


_NAME_CHARACTERS = frozenset(
    "йцукенгшщзфывапролджэячсмитьбюёЙЦУКЕНГШЩЗФЫВАПРОЛДЖЭЯЧСМИТЬБЮ"
    "qwertyuiopasdfghjklzxcvbnmQWERTYUIOPASDFGHJKLZXCVBNM "
)
_LOGIN_CHARACTERS = frozenset(
    "0123456789qwertyuiopasdfghjklzxcvbnmQWERTYUIOPASDFGHJKLZXCVBNM_"
)
_RANDOM_SYMBOLS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "!@#$%^&*()-_=+[]{}|;:,.<>?/"
)
_GENERATED_LENGTH = 32
_MIN_LENGTH = 6


def _simplified(text: str) -> str:
    return " ".join(text.split())


def role_by_str(role: str) -> UserRole:
    """Return the role named by ``role`` (case-insensitive), or ``UserRole.NONE``."""
    lowered = role.lower()
    for candidate in (UserRole.ADMIN, UserRole.CLIENT, UserRole.WORKER):
        if candidate.value.lower() == lowered:
            return candidate
    return UserRole.NONE


def str_by_role(role: UserRole) -> str:
    """Return the display name of ``role``."""
    return role.value


def get_user_roles() -> list[tuple[str, UserRole]]:
    """Return the roles that can be assigned to a user, in display order."""
    return [
        ("Admin", UserRole.ADMIN),
        ("Worker", UserRole.WORKER),
        ("Client", UserRole.CLIENT),
    ]


def hash_password(password: str, salt: str) -> str:
    """Return the salted SHA-256 hash of ``password`` as a hex string."""
    return hashlib.sha256((password + salt).encode("utf-8")).hexdigest()


def generate_password() -> str:
    """Return a new random password."""
    return "".join(
        secrets.choice(_RANDOM_SYMBOLS) for _ in range(_GENERATED_LENGTH)
    )


def validate_name(name: str) -> None:
    if name != _simplified(name):
        raise ValidationError("the name contains extra spaces")
    if len(name) < _MIN_LENGTH:
        raise ValidationError("the name is too short (need >= 6 chars)")
    if any(ch not in _NAME_CHARACTERS for ch in name):
        raise ValidationError("You can only use letters and spaces")


def validate_login(login: str) -> None:
    if len(login) < _MIN_LENGTH:
        raise ValidationError("the login is too short (need >= 6 chars)")
    if any(ch not in _LOGIN_CHARACTERS for ch in login):
        raise ValidationError("You can only use Latin letters and underscore")


def validate_password(password: str) -> None:
    if len(password) < _MIN_LENGTH:
        raise ValidationError("the password is too short (need >= 6 chars)")


def validate_role(role: UserRole | str) -> None:
    if isinstance(role, str):
        role = role_by_str(role)
    if role is UserRole.NONE:
        raise ValidationError("Unknown role")


@dataclass
class User:
    """A user account; ``id`` is set once the user is stored."""

    name: str
    login: str
    password: str
    role: UserRole
    id: int | None = None

    def str_values(
        self,
        name: bool = True,
        login: bool = True,
        password: bool = False,
        role: bool = True,
    ) -> list[str]:
        """Return the selected fields as display strings."""
        values = []
        if name:
            values.append(self.name)
        if login:
            values.append(self.login)
        if password:
            values.append(self.password)
        if role:
            values.append(str_by_role(self.role))
        return values

    def validate(self) -> None:
        """Check every field, raising ValidationError on the first bad one."""
        validate_name(self.name)
        validate_login(self.login)
        validate_password(self.password)
        validate_role(self.role)