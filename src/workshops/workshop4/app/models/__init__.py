from .common import TimestampMixin, utcnow
from .message import Message
from .task import Task
from .user import User

__all__ = ["Message", "Task", "TimestampMixin", "User", "utcnow"]
