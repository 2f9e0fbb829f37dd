"""Tests for port protocol conformance."""

import inspect

from mission_control import client
from mission_control.domain.models import DEFAULT_MESSAGE_TYPE
from mission_control.log import SubsystemLogger
from mission_control.ports import LoggerPort, MissionControlPort


class TestLoggerPortConformance:
    def test_subsystem_logger(self):
        assert isinstance(SubsystemLogger("x"), LoggerPort)

    def test_recording_logger(self, recorder):
        assert isinstance(recorder, LoggerPort)


class TestMissionControlPortConformance:
    def test_client_module_has_interface(self):
        assert isinstance(client, MissionControlPort)

    def test_package_reexports(self):
        import mission_control

        for name in (
            "fetch_notifications",
            "fetch_unread_messages",
            "fetch_pending_tasks",
            "mark_message_as_read",
            "send_message",
            "claim_task",
            "add_task_comment",
            "poll_mission_control_activity",
        ):
            assert callable(getattr(mission_control, name))


class TestPortDefaults:
    def test_client_logger_is_a_logger_port(self):
        assert isinstance(client.log, LoggerPort)

    def test_send_message_default_type_matches_client(self):
        port_default = inspect.signature(MissionControlPort.send_message).parameters["type"].default
        client_default = inspect.signature(client.send_message).parameters["type"].default
        assert port_default == client_default == DEFAULT_MESSAGE_TYPE
