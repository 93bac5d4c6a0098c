"""UI utilities."""

from typing import TYPE_CHECKING, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import Config
from .models import FieldsDetails, Item

if TYPE_CHECKING:
    import threading

console = Console()


def success(message: str) -> None:
    """Display success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def info(message: str) -> None:
    """Display info message."""
    console.print(f"[blue]i[/blue] {escape(message)}")


def warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def mask(secret: str) -> str:
    return "•" * 12 if secret else ""


def copy_password_with_feedback(password: str) -> Optional["threading.Timer"]:
    """Copy password to clipboard and show feedback message.

    Returns the pending clear timer, or None if the clipboard is unavailable.
    """
    from .clipboard import copy_to_clipboard_with_autoclear

    timeout = Config.CLIPBOARD_TIMEOUT_SECONDS
    timer = copy_to_clipboard_with_autoclear(password, timeout=timeout)
    if timer is None:
        warning("Clipboard unavailable")
        return None
    success(f"Password copied (clears in {timeout}s, Ctrl-C to clear now)")
    return timer


def show_item_panel(item: Item, show_password: bool = False) -> None:
    """Display item details."""
    content = []

    if item.overview.ainfo:
        content.append(f"[green]Info:[/green] {escape(item.overview.ainfo)}")

    password = item.password()
    if password is not None:
        if show_password:
            shown = escape(password)
        else:
            shown = f"{mask(password)}  [dim]({len(password)} chars)[/dim]"
        content.append(f"[yellow]Password:[/yellow] {shown}")

    console.print(
        Panel("\n".join(content), title=escape(item.title), border_style="blue")
    )

    if isinstance(item.details, FieldsDetails) and item.details.fields:
        table = Table(show_header=True, box=None, padding=(0, 2))
        table.add_column("Field", style="cyan")
        table.add_column("Type", style="dim")
        table.add_column("Value")
        for item_field in item.details.fields:
            # "P" marks concealed fields in op's field list
            hidden = item_field.field_type == "P" and not show_password
            table.add_row(
                escape(item_field.name),
                escape(item_field.field_type),
                mask(item_field.value) if hidden else escape(item_field.value),
            )
        console.print(table)

    console.print(
        f"[dim]uuid {escape(item.uuid)} • vault {escape(item.vault_uuid)}[/dim]"
    )


def show_session_names(names: List[str]) -> None:
    """List session variable names, one per line."""
    for name in names:
        console.print(f"  [cyan]{escape(name)}[/cyan]")
