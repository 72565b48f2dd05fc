"""
User endpoints for API v1.

CRUD over the in‑memory user store.  Lookups that miss answer 404,
creating a user whose name is taken answers 409.  A successful create
answers 201 with a ``Location`` header pointing at the new user.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from user_crud_api.app.api.dependencies import get_user_store
from user_crud_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_crud_api.app.services.user_service import UserStore


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return every user in creation order."""
    return store.get_all()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)) -> UserRead:
    """Retrieve a single user by id."""
    user = store.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    request: Request,
    response: Response,
    store: UserStore = Depends(get_user_store),
) -> UserRead:
    """Create a user and point the ``Location`` header at it."""
    if store.exists(user_in):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists")
    user = store.create(user_in)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    user_in: UserUpdate,
    store: UserStore = Depends(get_user_store),
) -> UserRead:
    """Replace the name of an existing user.

    The path id wins over any ``id`` in the body.  Renaming to a name
    held by another user answers 409.
    """
    if store.find_by_id(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return store.update(UserRead(id=user_id, name=user_in.name))


@router.delete("/{user_id}")
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)) -> Response:
    """Delete a user by id."""
    if store.find_by_id(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not store.delete(user_id):
        # Removed by a concurrent request between the lookup and the delete.
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return Response(status_code=status.HTTP_200_OK)
