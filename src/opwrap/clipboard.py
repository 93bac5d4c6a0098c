"""Clipboard helpers used by the command-line front end."""

import subprocess
import sys
import threading
from typing import Any, List, Optional

from .config import Config

try:
    import pyperclip as _pyperclip

    pyperclip: Optional[Any] = _pyperclip
except Exception:
    pyperclip = None


def _platform_commands() -> List[List[str]]:
    """Clipboard tools to try for the current platform, in order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if sys.platform.startswith("win"):
        return [["clip"]]
    if sys.platform.startswith("linux") or sys.platform.startswith("freebsd"):
        return [
            ["wl-copy"],
            ["xclip", "-selection", "clipboard"],
            ["xsel", "--clipboard", "--input"],
        ]
    return []


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the clipboard. Returns True on success.

    pyperclip is preferred; platform command-line tools are the fallback.
    """
    if pyperclip:
        try:
            pyperclip.copy(text)
            return True
        except Exception:
            pass

    for cmd in _platform_commands():
        try:
            result = subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=5,
                check=False,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            continue
        if result.returncode == 0:
            return True

    return False


def _clear_if_unchanged(clipboard_content: str) -> None:
    """Clear the clipboard unless the user has copied something else since.

    When the clipboard cannot be read back it is cleared regardless.
    """
    current = None
    if pyperclip:
        try:
            current = pyperclip.paste()
        except Exception:
            current = None

    if current is None or current == clipboard_content:
        copy_to_clipboard("")


def copy_to_clipboard_with_autoclear(
    text: str, timeout: float = Config.CLIPBOARD_TIMEOUT_SECONDS
) -> Optional[threading.Timer]:
    """Copy text and schedule a clear after `timeout` seconds.

    Returns the started timer, or None if nothing could be copied. The timer
    is not a daemon thread, so the interpreter waits for it before exiting.
    """
    if not copy_to_clipboard(text):
        return None

    timer = threading.Timer(max(timeout, 0), _clear_if_unchanged, args=(text,))
    timer.daemon = False
    timer.start()
    return timer


def wait_for_clear(timer: threading.Timer, clipboard_content: str) -> None:
    """Block until the scheduled clear has run. Ctrl-C clears immediately."""
    try:
        timer.join()
    except KeyboardInterrupt:
        timer.cancel()
        _clear_if_unchanged(clipboard_content)
