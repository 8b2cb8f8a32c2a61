"""Checks that a user may perform an action."""

from __future__ import annotations

from .database import DatabaseError
from .queries import Queries
from .user import UserRole

_DENIED = "У вас недостаточно прав для этого действия!"


class PermissionDenied(PermissionError):
    """Raised when a user lacks the rights for an action."""


class PermissionController:
    """Grants access only to an existing user holding the required role."""

    def __init__(self, queries: Queries, role: UserRole, user_id: int) -> None:
        self.queries = queries
        self.role = role
        self.user_id = user_id
        # Only the role is checked on construction; subclasses extend confirm().
        PermissionController.confirm(self)

    def confirm(self) -> None:
        """Raise PermissionDenied unless the user exists and has the role."""
        try:
            user = self.queries.get_user_by_id(self.user_id)
        except DatabaseError:
            user = None
        if user is None or user.role is not self.role:
            raise PermissionDenied(_DENIED)


class OrderExecutorPermission(PermissionController):
    """Grants access to the worker who is carrying out a given order."""

    def __init__(self, queries: Queries, user_id: int, order_id: int) -> None:
        self.order_id = order_id
        super().__init__(queries, UserRole.WORKER, user_id)

    def confirm(self) -> None:
        """Raise PermissionDenied unless the user is a worker executing the order."""
        super().confirm()
        try:
            order = self.queries.get_order(self.order_id)
        except DatabaseError:
            order = None
        if order is None or order.executor is None:
            raise PermissionDenied(_DENIED)
        executor = self.queries.get_user_by_login(order.executor.login)
        if executor is None or executor.id != self.user_id:
            raise PermissionDenied(_DENIED)