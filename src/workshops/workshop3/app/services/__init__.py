from .auth import AuthService
from .pages import PageService

__all__ = ["AuthService", "PageService"]
