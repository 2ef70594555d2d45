from .message import ChatMessageIn, MessageEvent, MessageRead
from .task import TaskCreate, TaskRead, TaskUpdate

__all__ = ["ChatMessageIn", "MessageEvent", "MessageRead", "TaskCreate", "TaskRead", "TaskUpdate"]
