"""
Logging configuration for the customer API.

Customer email addresses are personal data and must not reach log
output in clear text.  ``mask_email`` is used where a module logs an
address on purpose; ``EmailMaskingFilter`` is installed on every
handler by ``setup_logging`` so that addresses embedded in any other
message (SQL errors, third-party loggers) are masked as well.
"""

import logging
import re
from pathlib import Path
from typing import Optional


EMAIL_PATTERN = re.compile(r"[^\s@'\"<>(),;:]+@[^\s@'\"<>(),;:]+")


def mask_email(email: str) -> str:
    """Keep the first character of the local part and the domain.

    ``carlos@email.com`` becomes ``c***@email.com``.
    """
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


class EmailMaskingFilter(logging.Filter):
    """Replace email addresses in the rendered message with masked ones."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = EMAIL_PATTERN.sub(lambda match: mask_email(match.group(0)), message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a console
    handler and optionally a file handler, both masking email
    addresses.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no file
        handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by pytest or a repeated create_app().
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(EmailMaskingFilter())
        logger.addHandler(handler)
