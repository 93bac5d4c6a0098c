"""Typed wrapper around the 1Password op command-line tool."""

# Version constant (must be defined before imports to avoid circular dependencies)
__version__ = "0.1.0"

# ruff: noqa: E402
from .config import config
from .errors import (
    GetCommandError,
    ItemSchemaError,
    MissingSessionVariableError,
    MissingToolError,
    MultipleSessionVariablesError,
    OpError,
    VersionCommandError,
)
from .models import FieldsDetails, Item, ItemField, ItemOverview, PasswordDetails
from .process import CommandResult, run_command
from .session import OpSession, session_variable_names
from .tool import OpTool

__all__ = [
    "OpTool",
    "OpSession",
    "Item",
    "ItemOverview",
    "ItemField",
    "PasswordDetails",
    "FieldsDetails",
    "CommandResult",
    "run_command",
    "session_variable_names",
    "config",
    "OpError",
    "MissingToolError",
    "MissingSessionVariableError",
    "MultipleSessionVariablesError",
    "GetCommandError",
    "VersionCommandError",
    "ItemSchemaError",
]
