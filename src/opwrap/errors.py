"""Exceptions raised when talking to the op command-line tool."""

from typing import List


class OpError(Exception):
    """Base exception for opwrap errors."""

    pass


class MissingToolError(OpError):
    """Raised when the op command cannot be found in PATH."""

    def __init__(self, command: str = "op"):
        self.command = command
        super().__init__(f"{command} command not found in path")


class MissingSessionVariableError(OpError):
    """Raised when no session environment variable is set."""

    def __init__(self, name: str = ""):
        self.name = name
        if name:
            message = f"session environment variable {name} is not set"
        else:
            message = "could not find any session environment variable"
        super().__init__(message)


class MultipleSessionVariablesError(OpError):
    """Raised when more than one session environment variable is set."""

    def __init__(self, names: List[str]):
        self.names = list(names)
        super().__init__(
            f"more than one session environment variable found: {self.names}"
        )


class GetCommandError(OpError):
    """Raised when `op get item` exits unsuccessfully."""

    def __init__(self, uuid: str, stderr: str, returncode: int):
        self.uuid = uuid
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(
            f"op get error for {uuid} code: {returncode}, {stderr.strip()}"
        )


class VersionCommandError(OpError):
    """Raised when `op --version` exits with an unexpected status."""

    def __init__(self, stderr: str, returncode: int):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"op version error code: {returncode}, {stderr.strip()}")


class ItemSchemaError(OpError, ValueError):
    """Raised when item JSON is well-formed but does not match the item schema."""

    pass
