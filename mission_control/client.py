"""Mission Control client using aiohttp.

Polls the Mission Control API for messages, tasks and notifications on behalf
of one agent. Every call is best-effort: failures are logged and turned into
an empty result (``None``, ``[]`` or ``False``), never raised.
"""

from typing import Any, Callable, Dict, List, Optional

import aiohttp

from mission_control.config import MissionControlConfig
from mission_control.domain.models import (
    DEFAULT_MESSAGE_TYPE,
    TASK_PENDING,
    Message,
    NotificationSummary,
    Task,
)
from mission_control.log import SubsystemLogger, error_text
from mission_control.ports.outbound import LoggerPort

log: LoggerPort = SubsystemLogger("gateway/mission-control")


async def _request(
    config: MissionControlConfig,
    method: str,
    path: str,
    *,
    empty: Any,
    failed_msg: str,
    error_msg: str,
    fields: Dict[str, Any],
    json_body: Optional[Dict[str, Any]] = None,
    decode: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """Send one request and map its outcome.

    2xx -> ``decode(body)``, or ``True`` when there is nothing to decode.
    Other status -> ``empty`` plus one "failed" warning; body is not read.
    Any exception (network, timeout, bad JSON) -> ``empty`` plus one "error" warning.
    """
    url = f"{config.base_url}{path}"
    kwargs: Dict[str, Any] = {
        "timeout": aiohttp.ClientTimeout(total=config.timeout_ms / 1000),
    }
    if json_body is not None:
        kwargs["json"] = json_body

    try:
        async with aiohttp.ClientSession() as session:
            async with session.request(method, url, **kwargs) as resp:
                if not 200 <= resp.status < 300:
                    log.warn(failed_msg, {"status": resp.status, **fields})
                    return empty
                if decode is None:
                    return True
                data = await resp.json(content_type=None)
                return decode(data)
    except Exception as e:
        log.warn(error_msg, {"error": error_text(e), **fields})
        return empty


async def fetch_notifications(config: MissionControlConfig) -> Optional[NotificationSummary]:
    """Fetch the notification summary for ``config.agent_id``."""
    if not config.enabled:
        return None

    return await _request(
        config,
        "GET",
        f"/api/agents/{config.agent_id}/notifications",
        empty=None,
        failed_msg="MC notifications fetch failed",
        error_msg="MC notifications fetch error",
        fields={"agentId": config.agent_id},
        decode=NotificationSummary.from_dict,
    )


async def fetch_unread_messages(config: MissionControlConfig) -> List[Message]:
    """Fetch unread messages addressed to ``config.agent_id``."""
    if not config.enabled:
        return []

    return await _request(
        config,
        "GET",
        f"/api/agents/{config.agent_id}/messages/unread",
        empty=[],
        failed_msg="MC messages fetch failed",
        error_msg="MC messages fetch error",
        fields={"agentId": config.agent_id},
        decode=Message.list_from_json,
    )


async def fetch_pending_tasks(config: MissionControlConfig) -> List[Task]:
    """Fetch pending tasks assigned to ``config.agent_id``."""
    if not config.enabled:
        return []

    return await _request(
        config,
        "GET",
        f"/api/tasks?assigneeId={config.agent_id}&status={TASK_PENDING}",
        empty=[],
        failed_msg="MC tasks fetch failed",
        error_msg="MC tasks fetch error",
        fields={"agentId": config.agent_id},
        decode=Task.list_from_json,
    )


async def mark_message_as_read(config: MissionControlConfig, message_id: int) -> bool:
    if not config.enabled:
        return False

    return await _request(
        config,
        "POST",
        f"/api/messages/{message_id}/read",
        empty=False,
        failed_msg="MC mark read failed",
        error_msg="MC mark read error",
        fields={"messageId": message_id},
    )


async def send_message(
    config: MissionControlConfig,
    to_agent_id: str,
    subject: str,
    body: str,
    type: int = DEFAULT_MESSAGE_TYPE,
) -> bool:
    """Send a message from ``config.agent_id`` to another agent.

    The sender is always the configured agent; it cannot be overridden.
    """
    if not config.enabled:
        return False

    return await _request(
        config,
        "POST",
        "/api/messages",
        empty=False,
        failed_msg="MC send message failed",
        error_msg="MC send message error",
        fields={"toAgentId": to_agent_id},
        json_body={
            "fromAgentId": config.agent_id,
            "toAgentId": to_agent_id,
            "subject": subject,
            "body": body,
            "type": type,
        },
    )


async def claim_task(config: MissionControlConfig, task_id: int) -> bool:
    """Claim a task (the server moves it to in_progress)."""
    if not config.enabled:
        return False

    return await _request(
        config,
        "POST",
        f"/api/tasks/{task_id}/claim",
        empty=False,
        failed_msg="MC claim task failed",
        error_msg="MC claim task error",
        fields={"taskId": task_id},
    )


async def add_task_comment(config: MissionControlConfig, task_id: int, content: str) -> bool:
    if not config.enabled:
        return False

    return await _request(
        config,
        "POST",
        f"/api/tasks/{task_id}/comments",
        empty=False,
        failed_msg="MC add comment failed",
        error_msg="MC add comment error",
        fields={"taskId": task_id},
        json_body={"agentId": config.agent_id, "content": content},
    )
