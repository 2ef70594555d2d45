"""Route guards for workshop 3, each with its own redirect message."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from ...common.deps import login_required

PageAuthorDependency = Annotated[
    str, Depends(login_required("You must be logged in to create a page."))
]
ProfileViewerDependency = Annotated[
    str, Depends(login_required("You must be logged in to view your profile."))
]
AvatarUploaderDependency = Annotated[
    str, Depends(login_required("You must be logged in to upload an avatar."))
]

__all__ = ["AvatarUploaderDependency", "PageAuthorDependency", "ProfileViewerDependency"]
