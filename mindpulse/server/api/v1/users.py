"""
API endpoints for user accounts.

Registration, Firebase sign-in sync, guest accounts, profile and password
updates, and account deletion (which removes every row the user owns).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.io import (
    FirebaseUserSync,
    SuccessResponse,
    UserCreate,
    UserEnvelope,
    UserProfileUpdate,
    UserRead,
    UserUpdate,
)
from mindpulse.server.services.deps import AccountServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Register User",
    description="Create a user account. The password, when given, is stored as a bcrypt hash.",
    responses={
        201: {"description": "User created"},
        409: {"description": "Email or username already registered"},
    },
)
async def create_user(data: UserCreate, accounts: AccountServiceDep) -> UserEnvelope:
    """
    Register a new user.

    - **name**: Display name (required).
    - **username** / **email**: Optional, unique when given.
    - **password**: Optional plain password.
    """
    user = await accounts.register(data)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.post(
    "/firebase",
    response_model=UserEnvelope,
    summary="Sync Firebase User",
    description="Find or create the user behind a Firebase sign-in, linking the Firebase uid by email.",
    responses={400: {"description": "firebaseUid missing"}},
)
async def sync_firebase_user(data: FirebaseUserSync, accounts: AccountServiceDep) -> UserEnvelope:
    user = await accounts.sync_firebase_user(data)
    public = UserRead.model_validate(user).model_copy(update={"is_guest": False, "firebase_uid": data.firebase_uid})
    return UserEnvelope(user=public)


@router.post(
    "/guest",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Guest User",
    description="Create an anonymous guest account with a random name.",
)
async def create_guest_user(accounts: AccountServiceDep) -> UserEnvelope:
    user = await accounts.create_guest()
    return UserEnvelope(user=UserRead.model_validate(user))


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    summary="Get User",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, accounts: AccountServiceDep) -> UserEnvelope:
    user = await accounts.get_user(user_id)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.patch(
    "/{user_id}",
    response_model=UserEnvelope,
    summary="Update User",
    description="Update name, email, username or password. Changing the password requires oldPassword.",
    responses={
        400: {"description": "Old password is incorrect"},
        404: {"description": "User not found"},
        409: {"description": "Email or username already taken"},
    },
)
async def update_user(user_id: int, data: UserUpdate, accounts: AccountServiceDep) -> UserEnvelope:
    user = await accounts.update_user(user_id, data)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.patch(
    "/{user_id}/profile",
    response_model=UserEnvelope,
    summary="Update Profile",
    description="Update the profile fields; name and email are required and the email must not belong to another user.",
    responses={
        400: {"description": "Missing fields or email taken"},
        404: {"description": "User not found"},
    },
)
async def update_profile(user_id: int, data: UserProfileUpdate, accounts: AccountServiceDep) -> UserEnvelope:
    user = await accounts.update_profile(user_id, data)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.delete(
    "/{user_id}",
    response_model=SuccessResponse,
    summary="Delete User",
    description="Delete a user together with all mood entries, interventions, posts, comments, progress, "
    "preferences and recommendations.",
)
async def delete_user(user_id: int, accounts: AccountServiceDep) -> SuccessResponse:
    await accounts.delete_user(user_id)
    return SuccessResponse()
