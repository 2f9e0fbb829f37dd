"""Heartbeat hook: poll Mission Control and log when there is something to do."""

from mission_control import client as mc
from mission_control.config import MissionControlConfig
from mission_control.log import error_text


async def poll_mission_control_activity(config: MissionControlConfig) -> None:
    """Fetch the notification summary and log it if there is pending work.

    Called from the agent heartbeat. Never raises.
    """
    if not config.enabled:
        return

    try:
        notifications = await mc.fetch_notifications(config)
        if notifications and notifications.has_activity:
            mc.log.info("MC activity detected", {
                "agentId": config.agent_id,
                "unreadMessages": notifications.unread_messages,
                "pendingTasks": notifications.pending_tasks,
            })
    except Exception as e:
        mc.log.warn("MC activity poll error", {"error": error_text(e)})
