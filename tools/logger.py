"""Logging helpers with typed-text masking."""

from __future__ import annotations

import logging
import re

_TYPED_RE = re.compile(r"\b(text|password)=.*", re.IGNORECASE | re.DOTALL)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


class TypedTextFilter(logging.Filter):
    """Mask ``text=`` values so typed input never reaches the logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _TYPED_RE.sub(lambda m: f"{m.group(1)}=***", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def configure_logging(level: str = "INFO") -> logging.Handler:
    """Attach a masked stream handler to the root logger (only once)."""
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _handler.addFilter(TypedTextFilter())
        root.addHandler(_handler)
    root.setLevel(level)
    return _handler
