from .base import BaseRepository
from .messages import MessageRepository
from .tasks import TaskRepository
from .users import UserRepository

__all__ = ["BaseRepository", "MessageRepository", "TaskRepository", "UserRepository"]
