"""Outbound ports — interfaces for collaborators of the Mission Control client."""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from mission_control.config import MissionControlConfig
from mission_control.domain.models import DEFAULT_MESSAGE_TYPE, Message, NotificationSummary, Task


@runtime_checkable
class LoggerPort(Protocol):
    """Structured logger: a message plus a flat dict of fields."""

    def info(self, msg: str, fields: Optional[Dict[str, Any]] = None) -> None: ...
    def warn(self, msg: str, fields: Optional[Dict[str, Any]] = None) -> None: ...


@runtime_checkable
class MissionControlPort(Protocol):
    """Interface for Mission Control access (the client module satisfies it)."""

    async def fetch_notifications(
        self, config: MissionControlConfig
    ) -> Optional[NotificationSummary]: ...

    async def fetch_unread_messages(self, config: MissionControlConfig) -> List[Message]: ...

    async def fetch_pending_tasks(self, config: MissionControlConfig) -> List[Task]: ...

    async def mark_message_as_read(
        self, config: MissionControlConfig, message_id: int
    ) -> bool: ...

    async def send_message(
        self,
        config: MissionControlConfig,
        to_agent_id: str,
        subject: str,
        body: str,
        type: int = DEFAULT_MESSAGE_TYPE,
    ) -> bool: ...

    async def claim_task(self, config: MissionControlConfig, task_id: int) -> bool: ...

    async def add_task_comment(
        self, config: MissionControlConfig, task_id: int, content: str
    ) -> bool: ...
