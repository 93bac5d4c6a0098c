"""Authenticated sessions against the op command-line tool."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .config import Config
from .errors import (
    GetCommandError,
    MissingSessionVariableError,
    MultipleSessionVariablesError,
)
from .models import Item
from .tool import OpTool

logger = logging.getLogger(__name__)


def _decode_env_value(value: str) -> str:
    """Return the value as text, raising UnicodeDecodeError if it isn't UTF-8.

    os.environ smuggles undecodable bytes through as surrogate escapes; encode
    them back to the raw bytes and decode strictly.
    """
    return os.fsencode(value).decode("utf-8")


def _decode_stdout(stdout: bytes) -> str:
    """Decode tool output, reporting invalid UTF-8 as a JSON error."""
    try:
        return stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise json.JSONDecodeError(
            f"invalid UTF-8 in op output: {e.reason}",
            stdout.decode("utf-8", "replace"),
            e.start,
        ) from e


def session_variable_names(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Names of all session variables, in environment enumeration order."""
    env = os.environ if environ is None else environ
    return [name for name in env if name.startswith(Config.SESSION_ENV_PREFIX)]


@dataclass(frozen=True)
class OpSession:
    """An op tool bound to a session token."""

    tool: OpTool
    token: str = field(repr=False)

    @classmethod
    def with_token(cls, tool: OpTool, token: str) -> "OpSession":
        return cls(tool=tool, token=token)

    @classmethod
    def from_named_env_var(
        cls,
        tool: OpTool,
        subdomain: str,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "OpSession":
        """Read the token from `OP_SESSION_<subdomain>`.

        Raises:
            MissingSessionVariableError: If the variable is not set
            UnicodeDecodeError: If the variable is not valid UTF-8
        """
        env = os.environ if environ is None else environ
        name = Config.session_env_var(subdomain)
        if name not in env:
            raise MissingSessionVariableError(name)
        return cls(tool=tool, token=_decode_env_value(env[name]))

    @classmethod
    def from_any_env_var(
        cls, tool: OpTool, environ: Optional[Mapping[str, str]] = None
    ) -> "OpSession":
        """Read the token from the single `OP_SESSION_*` variable that is set.

        Raises:
            MissingSessionVariableError: If no session variable is set
            MultipleSessionVariablesError: If more than one is set
            UnicodeDecodeError: If the variable is not valid UTF-8
        """
        env = os.environ if environ is None else environ
        names = session_variable_names(env)
        if not names:
            raise MissingSessionVariableError()
        if len(names) > 1:
            raise MultipleSessionVariablesError(names)
        logger.debug("Using session from %s", names[0])
        return cls(tool=tool, token=_decode_env_value(env[names[0]]))

    def get_item(self, uuid: str) -> Item:
        """Fetch and decode one item.

        Raises:
            GetCommandError: If op exits unsuccessfully
            json.JSONDecodeError: If stdout is not valid UTF-8 JSON
            ItemSchemaError: If the JSON is not an item
            UnicodeDecodeError: If stderr of a failed call is not valid UTF-8
            OSError: If the tool cannot be started
        """
        result = self.tool.runner(
            [str(self.tool.command), "get", "item", "--session", self.token, uuid]
        )
        if result.success:
            return Item.from_dict(json.loads(_decode_stdout(result.stdout)))

        stderr = result.stderr.decode("utf-8")
        raise GetCommandError(uuid, stderr, result.returncode)
