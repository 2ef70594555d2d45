from .auth import AuthService
from .messages import MessageService
from .tasks import TaskService
from .users import UserService

__all__ = ["AuthService", "MessageService", "TaskService", "UserService"]
