"""Locating and querying the op command-line tool."""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional, Union

from .config import Config, config
from .errors import MissingToolError, VersionCommandError
from .process import CommandRunner, run_command

if TYPE_CHECKING:
    from .session import OpSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpTool:
    """Handle to an op executable.

    The path is not checked until the tool is invoked. `runner` executes the
    tool and can be replaced to run against a fake.
    """

    command: Path
    runner: CommandRunner = field(default=run_command, repr=False, compare=False)

    @classmethod
    def from_path(
        cls, path: Union[str, "os.PathLike[str]"], runner: Optional[CommandRunner] = None
    ) -> "OpTool":
        """Wrap a caller-supplied path without validating it."""
        return cls(command=Path(path), runner=runner or run_command)

    @classmethod
    def discover(cls, runner: Optional[CommandRunner] = None) -> "OpTool":
        """Find the op binary on PATH.

        Raises:
            MissingToolError: If no executable named op is on PATH
        """
        found = shutil.which(Config.OP_COMMAND)
        if found is None:
            raise MissingToolError(Config.OP_COMMAND)
        logger.debug("Found %s at %s", Config.OP_COMMAND, found)
        return cls.from_path(found, runner=runner)

    @classmethod
    def locate(cls, runner: Optional[CommandRunner] = None) -> "OpTool":
        """Use the configured tool path if there is one, otherwise search PATH."""
        if config.op_path:
            return cls.from_path(config.op_path, runner=runner)
        return cls.discover(runner=runner)

    def version(self) -> str:
        """Return the version string reported by `op --version`.

        Raises:
            VersionCommandError: If the tool exits with an unexpected status
            OSError: If the tool cannot be started
            UnicodeDecodeError: If the output is not valid UTF-8
        """
        result = self.runner([str(self.command), "--version"])
        if result.returncode != Config.VERSION_SUCCESS_CODE:
            raise VersionCommandError(result.stderr.decode("utf-8"), result.returncode)
        return result.stdout.decode("utf-8").strip()

    def session(self, token: str) -> "OpSession":
        """Bind this tool to an explicit session token."""
        from .session import OpSession

        return OpSession.with_token(self, token)

    def env_account_session(
        self, subdomain: str, environ: Optional[Mapping[str, str]] = None
    ) -> "OpSession":
        """Bind this tool to the session variable of one account."""
        from .session import OpSession

        return OpSession.from_named_env_var(self, subdomain, environ=environ)

    def env_session(self, environ: Optional[Mapping[str, str]] = None) -> "OpSession":
        """Bind this tool to the only session variable in the environment."""
        from .session import OpSession

        return OpSession.from_any_env_var(self, environ=environ)
