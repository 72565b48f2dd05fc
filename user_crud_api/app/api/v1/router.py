"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  When a new domain is added, include its
router here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
