"""User profiles with an opt-in detailed view."""

from __future__ import annotations

from fastapi import APIRouter

from ....common.errors import NotFoundError
from ..catalog import find_profile
from ..schemas import ProfileRead, ProfileSummary

router = APIRouter(tags=["profiles"])


@router.get(
    "/{username}",
    response_model=ProfileRead | ProfileSummary,
    summary="Fetch a user profile",
)
async def read_profile(username: str, details: bool = False) -> ProfileRead | ProfileSummary:
    """Return only the username unless ``details=true`` is requested."""

    profile = find_profile(username)
    if profile is None:
        raise NotFoundError("User not found.")
    if not details:
        return ProfileSummary(username=profile.username)
    return ProfileRead(username=profile.username, email=profile.email, role=profile.role)
