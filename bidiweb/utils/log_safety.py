"""
Log-safe handling of user text
==============================

Element text can carry personal data. Anything logged from it goes through
`preview_text`, and module loggers are wrapped so that e-mail addresses,
URLs and phone numbers are masked in every message.
"""

import re
from typing import Any, Optional

EMAIL_PATTERN = re.compile(
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.IGNORECASE
)
URL_PATTERN = re.compile(r"\bhttps?://[^\s]+", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"(?<!\w)\+?\d[\d .-]{7,}\d(?!\w)")

MASK = "█"


def mask_sensitive(text: Any) -> Any:
    """Mask e-mails, URLs and phone numbers; non-strings pass through."""
    if not isinstance(text, str):
        return text

    def keep_domain(match):
        local, domain = match.group(0).split("@", 1)
        return f"{MASK * min(len(local), 3)}@{domain}"

    def keep_host(match):
        parts = match.group(0).split("/", 3)
        host = "/".join(parts[:3])
        return f"{host}/{MASK * 3}" if len(parts) > 3 and parts[3] else host

    masked = EMAIL_PATTERN.sub(keep_domain, text)
    masked = URL_PATTERN.sub(keep_host, masked)
    masked = PHONE_PATTERN.sub(lambda m: MASK * len(m.group(0)), masked)
    return masked


def preview_text(text: Optional[str], max_chars: int = 40) -> str:
    """Short, masked, single-line preview of `text` for logs and reports."""
    if not text:
        return ""
    flat = " ".join(text.split())
    flat = mask_sensitive(flat)
    if max_chars <= 0:
        return ""
    if len(flat) <= max_chars:
        return flat
    return flat[:max_chars].rstrip() + "…"


def create_safe_logger_wrapper(logger):
    """Wrap a logger so every message and string argument is masked."""

    class SafeLoggerWrapper:
        def __init__(self, wrapped_logger):
            self._logger = wrapped_logger

        def _log(self, method, msg, *args, **kwargs):
            safe_args = tuple(mask_sensitive(arg) for arg in args)
            return method(mask_sensitive(str(msg)), *safe_args, **kwargs)

        def debug(self, msg, *args, **kwargs):
            return self._log(self._logger.debug, msg, *args, **kwargs)

        def info(self, msg, *args, **kwargs):
            return self._log(self._logger.info, msg, *args, **kwargs)

        def warning(self, msg, *args, **kwargs):
            return self._log(self._logger.warning, msg, *args, **kwargs)

        def error(self, msg, *args, **kwargs):
            return self._log(self._logger.error, msg, *args, **kwargs)

        def __getattr__(self, name):
            # Delegate other attributes to wrapped logger
            return getattr(self._logger, name)

    return SafeLoggerWrapper(logger)


__all__ = [
    "mask_sensitive",
    "preview_text",
    "create_safe_logger_wrapper",
]
