"""CLI using Typer."""

import json
import logging
import os
import sys
from typing import NoReturn, Optional

import typer
from typing_extensions import Annotated

from . import __version__, ui
from .clipboard import wait_for_clear
from .config import config
from .errors import MissingSessionVariableError, OpError
from .messages import (
    ERROR_GENERIC,
    ERROR_INVALID_OUTPUT,
    ERROR_NO_PASSWORD,
    ERROR_SESSION_CONFLICT,
    ERROR_TOOL_FAILED,
    INFO_CLIPBOARD_CLEARED,
    INFO_NO_SESSIONS,
    INFO_SESSION_COUNT,
    INFO_SIGNIN_HINT,
)
from .session import OpSession, session_variable_names
from .tool import OpTool

app = typer.Typer(
    name="opwrap",
    help="Read items from 1Password through the op command-line tool",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"opwrap {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    op: Annotated[
        Optional[str],
        typer.Option("--op", help="Path to the op executable (default: search PATH)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log op invocations to stderr")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
):
    """Global options."""
    if op:
        config.op_path = os.path.expanduser(op)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def fail(message: str) -> NoReturn:
    """Report an error and exit with status 1."""
    ui.error(message)
    raise typer.Exit(1)


def resolve_session(
    tool: OpTool, session: Optional[str], subdomain: Optional[str]
) -> OpSession:
    """Pick the session source from the command-line options."""
    if session is not None and subdomain is not None:
        fail(ERROR_SESSION_CONFLICT)
    if session is not None:
        return tool.session(session)
    if subdomain is not None:
        return tool.env_account_session(subdomain)
    return tool.env_session()


@app.command("version", help="Show the op tool version")
def show_tool_version():
    """Print the version reported by op."""
    try:
        typer.echo(OpTool.locate().version())
    except OpError as e:
        fail(ERROR_GENERIC.format(error=e))
    except OSError as e:
        fail(ERROR_TOOL_FAILED.format(error=e))
    except ValueError as e:
        fail(ERROR_INVALID_OUTPUT.format(error=e))


@app.command("sessions", help="List OP_SESSION_ variables")
def list_sessions():
    """Show which session variables are set, without their values."""
    names = session_variable_names()
    if not names:
        ui.info(INFO_NO_SESSIONS)
        ui.info(INFO_SIGNIN_HINT)
        return
    ui.info(INFO_SESSION_COUNT.format(count=len(names)))
    ui.show_session_names(names)


@app.command("get", help="Get an item by uuid")
def get_item(
    uuid: Annotated[str, typer.Argument(help="Item uuid")],
    subdomain: Annotated[
        Optional[str],
        typer.Option("--subdomain", "-s", help="Account subdomain (OP_SESSION_<name>)"),
    ] = None,
    session: Annotated[
        Optional[str],
        typer.Option("--session", help="Session token"),
    ] = None,
    show_password: Annotated[
        bool, typer.Option("--show-password", "-p", help="Show password in output")
    ] = False,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the item as JSON")
    ] = False,
    copy: Annotated[
        bool, typer.Option("--copy/--no-copy", help="Copy the password to the clipboard")
    ] = True,
):
    """Fetch an item and display it."""
    try:
        tool = OpTool.locate()
        item = resolve_session(tool, session, subdomain).get_item(uuid)
    except MissingSessionVariableError as e:
        ui.error(ERROR_GENERIC.format(error=e))
        ui.info(INFO_SIGNIN_HINT)
        raise typer.Exit(1)
    except OpError as e:
        fail(ERROR_GENERIC.format(error=e))
    except OSError as e:
        fail(ERROR_TOOL_FAILED.format(error=e))
    except ValueError as e:
        # Undecodable JSON or text from op
        fail(ERROR_INVALID_OUTPUT.format(error=e))

    if as_json:
        typer.echo(json.dumps(item.to_dict(), indent=2))
        return

    timer = None
    password = item.password()
    if password is None:
        ui.warning(ERROR_NO_PASSWORD.format(title=item.title))
    elif copy:
        timer = ui.copy_password_with_feedback(password)
    ui.show_item_panel(item, show_password=show_password)

    if timer is not None:
        wait_for_clear(timer, password)
        ui.info(INFO_CLIPBOARD_CLEARED)


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        ui.error("Operation cancelled")
        sys.exit(1)


if __name__ == "__main__":
    main()
