"""Profile page with avatar upload."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, File, Form, Request, UploadFile, status
from starlette.responses import RedirectResponse

from ....common.session import add_flash_message, validate_csrf_token
from ....common.templates import template_response
from ..config import SettingsDependency
from ..deps import AvatarUploaderDependency, ProfileViewerDependency
from ..store import DataStoreDependency
from ..uploads import AvatarUploadError, save_avatar

router = APIRouter(tags=["profile"])


def _redirect_to_profile(request: Request) -> RedirectResponse:
    return RedirectResponse(request.url_for("profile:show"), status_code=status.HTTP_303_SEE_OTHER)


@router.get("/profile", name="profile:show")
async def show_profile(
    request: Request,
    username: ProfileViewerDependency,
    store: DataStoreDependency,
) -> object:
    return template_response(
        request,
        "profile.html",
        {"title": "Your profile", "user": store.get_user(username), "username": username},
    )


@router.post("/profile", name="profile:upload")
async def upload_avatar(
    request: Request,
    username: AvatarUploaderDependency,
    store: DataStoreDependency,
    settings: SettingsDependency,
    avatar: Annotated[UploadFile | None, File()] = None,
    csrf_token: Annotated[str | None, Form()] = None,
) -> RedirectResponse:
    """Replace the signed-in user's avatar; every outcome redirects back to the profile."""

    if not validate_csrf_token(request.session, csrf_token):
        add_flash_message(request.session, "danger", "The form has expired. Please try again.")
        return _redirect_to_profile(request)

    user = store.get_user(username)
    if user is None:
        add_flash_message(request.session, "danger", "Your account no longer exists. Please register again.")
        return _redirect_to_profile(request)

    try:
        user.avatar = await save_avatar(avatar, settings.upload_dir, settings.max_upload_bytes)
    except AvatarUploadError as exc:
        add_flash_message(request.session, "danger", exc.message)
    else:
        add_flash_message(request.session, "success", "Avatar updated!")
    return _redirect_to_profile(request)
