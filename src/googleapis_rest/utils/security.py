"""Log sanitization and secure logging setup.

Credentials flow through this package as OAuth2 access tokens, refresh
tokens, signed JWT assertions and service account private keys. This
module redacts them from log output:

- :func:`sanitize_string` replaces sensitive substrings
- :func:`sanitize_headers` redacts credential headers
- :class:`SanitizingFormatter` applies both to every log record
- :func:`setup_secure_logging` installs the formatter on the root logger
"""

import logging
import re
import sys
from typing import Any, Dict, Optional

SENSITIVE_PATTERNS = {
    "private_key": re.compile(
        r"-----BEGIN [A-Z ]*PRIVATE KEY-----.*?-----END [A-Z ]*PRIVATE KEY-----",
        re.DOTALL,
    ),
    "jwt_token": re.compile(r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+"),
    "bearer_token": re.compile(r"Bearer\s+[A-Za-z0-9._~+/=-]+", re.IGNORECASE),
    "access_token": re.compile(r"ya29\.[A-Za-z0-9._-]+"),
    "refresh_token": re.compile(r"1//[A-Za-z0-9._-]+"),
}

# Headers that should never be logged
SENSITIVE_HEADERS = {
    "authorization",
    "x-goog-api-key",
    "x-goog-iam-authorization-token",
    "cookie",
    "set-cookie",
}


def sanitize_string(value: str) -> str:
    """Redact sensitive substrings from a string.

    :param value: String to sanitize
    :type value: str
    :return: The string with every sensitive match replaced
    :rtype: str
    """
    if not value:
        return value
    for pattern_name, pattern in SENSITIVE_PATTERNS.items():
        value = pattern.sub(f"<{pattern_name}:REDACTED>", value)
    return value


def sanitize_headers(headers: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a copy of HTTP headers that is safe to log.

    :param headers: Dictionary of HTTP headers
    :type headers: Optional[Dict[str, Any]]
    :return: Headers with credential values redacted
    :rtype: Optional[Dict[str, Any]]
    """
    if not headers:
        return headers
    sanitized: Dict[str, Any] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            if isinstance(value, str) and value:
                sanitized[key] = f"<REDACTED:length={len(value)}>"
            else:
                sanitized[key] = "<REDACTED>"
        elif isinstance(value, str):
            sanitized[key] = sanitize_string(value)
        else:
            sanitized[key] = value
    return sanitized


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts credentials from log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record after sanitizing its message and arguments.

        :param record: Log record to format
        :type record: logging.LogRecord
        :return: Sanitized log line
        :rtype: str
        """
        if record.args:
            try:
                record.msg = sanitize_string(record.msg % record.args)
                record.args = None
            except (TypeError, ValueError):
                record.msg = sanitize_string(str(record.msg))
                record.args = tuple(
                    sanitize_string(a) if isinstance(a, str) else a
                    for a in record.args
                )
        else:
            record.msg = sanitize_string(str(record.msg))
        return super().format(record)


# Global flag to track if logging has been set up
_LOGGING_CONFIGURED = False


def setup_secure_logging(level: Optional[str] = None) -> None:
    """Set up logging with automatic sanitization.

    Installs a :class:`SanitizingFormatter` on a stdout handler of the root
    logger. Calling it again is a no-op.

    :param level: Logging level; defaults to the ``LOG_LEVEL`` setting
    :type level: Optional[str]
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    if level is None:
        from ..config import get_settings

        level = get_settings().log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )
    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
