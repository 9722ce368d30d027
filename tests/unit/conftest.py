"""Shared fixtures for unit tests."""

import pytest

from confirm_cli.logging import setup_logging


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep the user's config file and CONFIRM_* variables out of the tests."""
    monkeypatch.setenv("CONFIRM_CONFIG", str(tmp_path / "missing.toml"))
    for name in ("CONFIRM_ASK_COUNT", "CONFIRM_DEFAULT", "CONFIRM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    setup_logging("WARNING")
    yield


class ScriptedReader:
    """Input reader that replays canned responses and records prompts."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.prompts = []

    def read(self, prompt):
        self.prompts.append(prompt)
        return self.responses.pop(0)


@pytest.fixture
def scripted_reader():
    return ScriptedReader
