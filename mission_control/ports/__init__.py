"""Port interfaces (Hexagonal Architecture)."""

from mission_control.ports.outbound import LoggerPort, MissionControlPort

__all__ = [
    "LoggerPort",
    "MissionControlPort",
]
