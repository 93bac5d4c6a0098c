"""Tests for configuration handling."""

from opwrap.config import Config


class TestConfig:
    def test_no_tool_path_by_default(self, monkeypatch):
        monkeypatch.delenv(Config.OP_PATH_ENV, raising=False)
        assert Config().op_path is None

    def test_tool_path_from_environment(self, monkeypatch):
        monkeypatch.setenv(Config.OP_PATH_ENV, "/opt/1password/op")
        assert Config().op_path == "/opt/1password/op"

    def test_tool_path_expands_user(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/dev")
        monkeypatch.setenv(Config.OP_PATH_ENV, "~/bin/op")
        assert Config().op_path == "/home/dev/bin/op"

    def test_session_env_var(self):
        assert Config.session_env_var("acme") == "OP_SESSION_acme"
        assert Config().session_env_var("acme") == "OP_SESSION_acme"
