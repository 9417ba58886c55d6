"""
Log sanitization for user-supplied path information.

PATH_INFO arrives straight from the request line, so anything copied from it
into a log record must not be able to forge extra log lines (CWE-117) or
flood the log.

Security References:
- OWASP Logging Cheat Sheet: https://cheatsheetseries.owasp.org/cheatsheets/Logging_Cheat_Sheet.html
"""

import re
from typing import Any

# Maximum length for logged user input to prevent log flooding
MAX_LOG_INPUT_LENGTH = 200

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_for_log(value: Any, max_length: int = MAX_LOG_INPUT_LENGTH) -> str:
    """
    Sanitize a value for safe logging by removing CRLF and limiting length.

    Args:
        value: Value to sanitize (will be converted to string)
        max_length: Maximum length of output (default: 200)

    Returns:
        Sanitized string safe for logging

    Example:
        >>> sanitize_for_log("/a-1\\n[FAKE] Admin logged in")
        '/a-1 [FAKE] Admin logged in'
    """
    text = _CONTROL_CHARS.sub(" ", str(value))

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text
