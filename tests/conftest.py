"""Shared pytest fixtures for all tests."""

import json
import os
from typing import List, Sequence

import pytest

from opwrap.config import Config
from opwrap.process import CommandResult
from opwrap.tool import OpTool

# ============================================================================
# Process Fixtures
# ============================================================================


class FakeRunner:
    """Stands in for run_command: records calls and replays canned results."""

    def __init__(self, *results: CommandResult):
        self.results = list(results)
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


@pytest.fixture
def fake_runner_factory():
    """Build a FakeRunner from an exit status and output."""

    def make(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b""):
        return FakeRunner(CommandResult(returncode, stdout, stderr))

    return make


@pytest.fixture
def make_tool():
    """Build an OpTool at a fixed fake path using the given runner."""

    def make(runner) -> OpTool:
        return OpTool.from_path("/usr/local/bin/op", runner=runner)

    return make


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_session_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every OP_SESSION_ variable from the process environment."""
    for name in list(os.environ):
        if name.startswith(Config.SESSION_ENV_PREFIX):
            monkeypatch.delenv(name)
    return monkeypatch


# ============================================================================
# Item Fixtures
# ============================================================================


@pytest.fixture
def password_item_data() -> dict:
    """Item JSON with the password details shape."""
    return {
        "uuid": "u1",
        "vaultUuid": "v1",
        "changerUuid": "c1",
        "overview": {"ainfo": "a", "title": "t"},
        "details": {"password": "secret"},
    }


@pytest.fixture
def login_item_data() -> dict:
    """Item JSON with the field-list details shape."""
    return {
        "uuid": "u2",
        "vaultUuid": "v1",
        "changerUuid": "c2",
        "overview": {"ainfo": "dev@example.com", "title": "GitHub"},
        "details": {
            "fields": [
                {
                    "designation": "username",
                    "name": "username",
                    "type": "T",
                    "value": "dev@example.com",
                },
                {
                    "designation": "password",
                    "name": "password",
                    "type": "P",
                    "value": "GitHubToken456!",
                },
                {"name": "pin", "type": "P", "value": "1234"},
            ]
        },
    }


@pytest.fixture
def password_item_json(password_item_data: dict) -> bytes:
    return json.dumps(password_item_data).encode("utf-8")
