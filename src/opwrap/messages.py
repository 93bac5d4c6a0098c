"""User messages for the opwrap command line."""

# Error messages
ERROR_NO_PASSWORD = "Item '{title}' has no password field."
ERROR_SESSION_CONFLICT = "Use either --session or --subdomain, not both."
ERROR_GENERIC = "Error: {error}"
ERROR_TOOL_FAILED = "Could not run op: {error}"
ERROR_INVALID_OUTPUT = "op returned unreadable output: {error}"

# Info messages
INFO_NO_SESSIONS = "No OP_SESSION_ variables are set."
INFO_SESSION_COUNT = "Found {count} session variable(s):"
INFO_SIGNIN_HINT = "Run 'eval $(op signin)' to start a session."
INFO_CLIPBOARD_CLEARED = "Clipboard cleared."
