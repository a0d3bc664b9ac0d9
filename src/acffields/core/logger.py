import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the current host request id across the call chain
_REQUEST_ID: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")


class _RequestFilter(logging.Filter):
    """Logging filter that injects the request_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = _REQUEST_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | req=%(request_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and the acffields logger.

    Root logger stays at INFO to suppress library noise (httpx, httpcore).
    Only acffields namespace logs are set to the requested level.

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()
    acf_logger = logging.getLogger("acffields")

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _RequestFilter) for f in h.filters):
            acf_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_RequestFilter())
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)

    acf_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "acffields") -> logging.Logger:
    """
    Get a module-specific logger under the acffields namespace.

    Handlers are left to the host application or ``configure_root_logger``.
    """
    return logging.getLogger(name)


def push_request_id(request_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current request id in context and return a token for later reset."""
    if not request_id:
        return None
    return _REQUEST_ID.set(request_id)


def reset_request_id(token: Optional[contextvars.Token]) -> None:
    """Reset the request id context using the provided token (if any)."""
    if token is None:
        return
    _REQUEST_ID.reset(token)


def current_request_id() -> str:
    return _REQUEST_ID.get()
