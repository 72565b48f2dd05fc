"""
Errors raised by the user store.

Each error carries the HTTP status code it maps to, so the application
can turn any store error that escapes an endpoint into a response
without a per‑endpoint ``try`` block.
"""

from fastapi import status


class UserStoreError(Exception):
    """Base class for user store errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(UserStoreError):
    """No user with the given id exists."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserConflictError(UserStoreError):
    """Another user already has the given name."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, name: str) -> None:
        super().__init__(f"User with name '{name}' already exists")
        self.name = name
