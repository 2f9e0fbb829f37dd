"""Best-effort async client for the Mission Control coordination service."""

__version__ = "0.1.0"

from mission_control.client import (
    add_task_comment,
    claim_task,
    fetch_notifications,
    fetch_pending_tasks,
    fetch_unread_messages,
    mark_message_as_read,
    send_message,
)
from mission_control.config import MissionControlConfig
from mission_control.domain.models import Message, NotificationSummary, Task
from mission_control.poller import poll_mission_control_activity

__all__ = [
    "MissionControlConfig",
    "Message",
    "NotificationSummary",
    "Task",
    "add_task_comment",
    "claim_task",
    "fetch_notifications",
    "fetch_pending_tasks",
    "fetch_unread_messages",
    "mark_message_as_read",
    "poll_mission_control_activity",
    "send_message",
]
