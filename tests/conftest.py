"""Shared fixtures for Mission Control tests."""

import pytest


class RecordingLogger:
    """LoggerPort fake that keeps (level, msg, fields) tuples."""

    def __init__(self):
        self.records = []

    def info(self, msg, fields=None):
        self.records.append(("info", msg, fields or {}))

    def warn(self, msg, fields=None):
        self.records.append(("warn", msg, fields or {}))

    @property
    def warnings(self):
        return [r for r in self.records if r[0] == "warn"]


@pytest.fixture
def recorder(monkeypatch):
    rec = RecordingLogger()
    monkeypatch.setattr("mission_control.client.log", rec)
    return rec
