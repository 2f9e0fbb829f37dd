"""Tests for SubsystemLogger."""

import asyncio
import json

from mission_control.log import SubsystemLogger, error_text


class TestSubsystemLogger:
    def test_warn_line(self, capsys):
        SubsystemLogger("gateway/mission-control").warn(
            "MC claim task failed", {"status": 404, "taskId": 42}
        )
        err = capsys.readouterr().err.strip()
        assert " WARN [gateway/mission-control] MC claim task failed " in err
        assert json.loads(err[err.index("{"):]) == {"status": 404, "taskId": 42}

    def test_info_without_fields(self, capsys):
        SubsystemLogger("sub").info("hello")
        err = capsys.readouterr().err.strip()
        assert err.endswith("INFO [sub] hello")

    def test_unserialisable_field(self):
        line = SubsystemLogger("sub").format("INFO", "x", {"obj": object()})
        assert "object object" in line


class TestErrorText:
    def test_message(self):
        assert error_text(ValueError("bad")) == "bad"

    def test_empty_message_falls_back_to_class(self):
        assert error_text(asyncio.TimeoutError()) == "TimeoutError"
