"""Dataclasses mapped from Mission Control JSON."""

from dataclasses import dataclass
from typing import Any, List, Optional

# Known Task.status values. Anything else passes through untouched.
TASK_PENDING = 0
TASK_IN_PROGRESS = 1
TASK_COMPLETED = 4

# Message.type sent when the caller does not pick one.
DEFAULT_MESSAGE_TYPE = 2


@dataclass
class NotificationSummary:
    """Aggregate counters for one agent."""

    unread_messages: int = 0
    pending_tasks: int = 0
    in_progress_tasks: int = 0
    blocked_tasks: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Optional["NotificationSummary"]:
        if data is None:
            return None
        return cls(
            unread_messages=data.get("unreadMessages", 0),
            pending_tasks=data.get("pendingTasks", 0),
            in_progress_tasks=data.get("inProgressTasks", 0),
            blocked_tasks=data.get("blockedTasks", 0),
        )

    @property
    def has_activity(self) -> bool:
        return self.unread_messages > 0 or self.pending_tasks > 0


@dataclass
class Message:
    id: Optional[int] = None
    subject: str = ""
    body: str = ""
    from_agent_id: str = ""
    to_agent_id: str = ""
    type: int = 0
    is_read: bool = False
    created_at: str = ""  # ISO timestamp, kept as sent

    @classmethod
    def from_dict(cls, data: Any) -> "Message":
        return cls(
            id=data.get("id"),
            subject=data.get("subject", ""),
            body=data.get("body", ""),
            from_agent_id=data.get("fromAgentId", ""),
            to_agent_id=data.get("toAgentId", ""),
            type=data.get("type", 0),
            is_read=data.get("isRead", False),
            created_at=data.get("createdAt", ""),
        )

    @classmethod
    def list_from_json(cls, data: Any) -> List["Message"]:
        return [cls.from_dict(item) for item in data or []]


@dataclass
class Task:
    id: Optional[int] = None
    title: str = ""
    status: int = TASK_PENDING  # 0=pending, 1=in_progress, 4=completed
    priority: int = 0
    description: Optional[str] = None
    assignee_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        return cls(
            id=data.get("id"),
            title=data.get("title", ""),
            status=data.get("status", TASK_PENDING),
            priority=data.get("priority", 0),
            description=data.get("description"),
            assignee_id=data.get("assigneeId"),
        )

    @classmethod
    def list_from_json(cls, data: Any) -> List["Task"]:
        return [cls.from_dict(item) for item in data or []]
