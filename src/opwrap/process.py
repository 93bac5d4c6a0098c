"""Synchronous subprocess execution with captured output."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Sequence

logger = logging.getLogger(__name__)

REDACTED = "********"


@dataclass(frozen=True)
class CommandResult:
    """Exit status and raw output of a finished command."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[Sequence[str]], CommandResult]


def redact_args(args: Sequence[str]) -> List[str]:
    """Mask the value following any `--session` flag."""
    redacted = []
    hide_next = False
    for arg in args:
        redacted.append(REDACTED if hide_next else arg)
        hide_next = arg == "--session"
    return redacted


def run_command(args: Sequence[str]) -> CommandResult:
    """Run a command to completion and capture stdout, stderr and exit status.

    Blocks until the child exits. There is no timeout.

    Raises:
        OSError: If the executable cannot be started
    """
    logger.debug("Running %s", redact_args(args))
    result = subprocess.run(list(args), capture_output=True, check=False)
    logger.debug("%s exited with status %d", args[0], result.returncode)
    return CommandResult(
        returncode=result.returncode, stdout=result.stdout, stderr=result.stderr
    )
