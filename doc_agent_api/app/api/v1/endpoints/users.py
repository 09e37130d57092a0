"""
User endpoints for API v1.

CRUD over the catalog's user collection plus a read‑only profile view.
Handlers are plain functions, so FastAPI runs them in its thread pool
and concurrent requests really do reach the store in parallel.

A body that cannot be decoded into ``UserIn`` never reaches these
functions: it is rejected with 400 by the handlers registered in
``doc_agent_api.core.errors``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from doc_agent_api.app.api.deps import get_catalog
from doc_agent_api.app.schemas.common import ErrorResponse, MessageResponse
from doc_agent_api.app.schemas.user import User, UserIn, UserList, UserProfile, UserProfileResponse
from doc_agent_api.app.services.catalog_store import CatalogStore
from doc_agent_api.core.store import utcnow

router = APIRouter()

NOT_FOUND = "user not found"
NOT_FOUND_RESPONSES = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_BODY_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.get("", response_model=UserList)
def list_users(catalog: CatalogStore = Depends(get_catalog)) -> UserList:
    """Return every user, in no particular order."""
    users = catalog.users.list()
    return UserList(users=users, count=len(users))


@router.get("/{user_id}", response_model=User, responses=NOT_FOUND_RESPONSES)
def get_user(user_id: str, catalog: CatalogStore = Depends(get_catalog)) -> User:
    """Retrieve a single user by id; 404 if it does not exist."""
    user = catalog.users.get(user_id)
    if user is None:
        raise _not_found()
    return user


@router.get("/{user_id}/profile", response_model=UserProfileResponse, responses=NOT_FOUND_RESPONSES)
def get_user_profile(user_id: str, catalog: CatalogStore = Depends(get_catalog)) -> UserProfileResponse:
    """Return the user together with a few derived flags.

    ``account_age_days`` counts whole days since the user was created.
    """
    user = catalog.users.get(user_id)
    if user is None:
        raise _not_found()
    age_days = 0
    if user.created_at is not None:
        age_days = max((utcnow() - user.created_at).days, 0)
    profile = UserProfile(
        has_avatar=bool(user.avatar),
        has_phone_number=bool(user.phone_number),
        is_admin=user.role == "admin",
        account_age_days=age_days,
    )
    return UserProfileResponse(user=user, profile=profile)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED, responses=BAD_BODY_RESPONSES)
def create_user(user_in: UserIn, catalog: CatalogStore = Depends(get_catalog)) -> User:
    """Add a user.  The id and timestamps are assigned by the store."""
    return catalog.users.create(user_in.to_record())


@router.put("/{user_id}", response_model=User, responses={**NOT_FOUND_RESPONSES, **BAD_BODY_RESPONSES})
def update_user(user_id: str, user_in: UserIn, catalog: CatalogStore = Depends(get_catalog)) -> User:
    """Replace a user; fields missing from the body are reset to empty."""
    user = catalog.users.update(user_id, user_in.to_record())
    if user is None:
        raise _not_found()
    return user


@router.delete("/{user_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
def delete_user(user_id: str, catalog: CatalogStore = Depends(get_catalog)) -> MessageResponse:
    """Remove a user; 404 if it does not exist."""
    if not catalog.users.delete(user_id):
        raise _not_found()
    return MessageResponse(message="user deleted successfully")
