"""
Pydantic models for user data.

A user is just an ``id`` and a ``name``.  The id is assigned by the
store, so the request schemas carry only the name; an ``id`` sent by a
client is ignored.
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["VanVTT"])


class UserCreate(UserBase):
    """Schema for creating a user (``POST /users``)."""


class UserUpdate(UserBase):
    """Schema for replacing a user (``PUT /users/{id}``).

    The id in the path identifies the record; a body ``id`` is ignored.
    """


class UserRead(UserBase):
    """Stored user record and response body."""

    id: int

    # Records are shared between the store and its callers, so they must
    # not be mutated in place.  Use ``model_copy(update=...)`` instead.
    model_config = {
        "frozen": True,
    }
