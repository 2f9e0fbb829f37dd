"""Domain layer — Mission Control data shapes."""

from mission_control.domain.models import (
    DEFAULT_MESSAGE_TYPE,
    TASK_COMPLETED,
    TASK_IN_PROGRESS,
    TASK_PENDING,
    Message,
    NotificationSummary,
    Task,
)

__all__ = [
    "DEFAULT_MESSAGE_TYPE",
    "Message",
    "NotificationSummary",
    "Task",
    "TASK_PENDING",
    "TASK_IN_PROGRESS",
    "TASK_COMPLETED",
]
