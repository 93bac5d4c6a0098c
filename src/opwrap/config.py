"""Configuration management for opwrap."""

import os
from typing import Optional


class Config:
    """Configuration settings for opwrap."""

    OP_COMMAND = "op"
    OP_PATH_ENV = "OPWRAP_OP_PATH"
    SESSION_ENV_PREFIX = "OP_SESSION_"

    # Exit status `op --version` reports on success
    VERSION_SUCCESS_CODE = 0

    # Display constants
    CLIPBOARD_TIMEOUT_SECONDS = 30

    def __init__(self):
        """Initialize configuration with environment variable support."""
        self.op_path = self._get_op_path()

    def _get_op_path(self) -> Optional[str]:
        """Get an explicit tool path from the environment, if any."""
        env_path = os.getenv(self.OP_PATH_ENV)
        if env_path:
            return os.path.expanduser(env_path)
        return None

    @classmethod
    def session_env_var(cls, subdomain: str) -> str:
        """Name of the session variable for an account subdomain."""
        return f"{cls.SESSION_ENV_PREFIX}{subdomain}"


config = Config()
