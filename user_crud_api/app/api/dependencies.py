"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from ..services.user_service import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store created by ``create_app`` for this application."""
    return request.app.state.user_store
