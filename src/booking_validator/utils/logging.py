"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management so all lines of one endpoint check
  can be grepped together
- Structured logging formatter for consistent log output
- Helpers for flow banners and the HTTP audit trail

Usage:
    from booking_validator.utils.logging import get_logger, set_correlation_id

    # At the start of an endpoint check:
    set_correlation_id()

    # In service code:
    logger = get_logger(__name__)
    logger.info("Validating response", extra={"endpoint": "/v1/BookingSubmit"})
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Mapping

# ID of the endpoint check in progress
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Header values never written to the audit log
_REDACTED_HEADERS = frozenset({"authorization"})

_NO_CORRELATION_ID = "-"


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Tag every log line that follows with an ID for the current endpoint check.

    Args:
        correlation_id: ID to use; a fresh UUID4 when omitted

    Returns:
        The ID now in effect
    """
    cid = correlation_id or str(uuid.uuid4())
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Stop tagging log lines; used once an endpoint check ends."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the current correlation ID ("-" outside a check)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or _NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Prefix every formatted line with ``[<correlation id>]``."""

    def format(self, record: logging.LogRecord) -> str:
        # Records from loggers created without get_logger() have no ID yet
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or _NO_CORRELATION_ID
        return f"[{record.correlation_id}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Return the named logger with a CorrelationIdFilter attached once."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send log output to stderr through the structured formatter.

    Replaces any handlers already installed on the root logger.

    Args:
        level: Root log level, by name or number
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper() if isinstance(level, str) else level)


def log_flow(logger: logging.Logger, flow: str, status: str) -> None:
    """Log a banner marking the start or end of an endpoint check.

    Args:
        logger: Logger instance
        flow: Flow name (e.g., "Availability Check")
        status: "Start" or "End"
    """
    logger.info("\n##########\n %s %s Flow \n##########", status, flow)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%A, %d-%b-%y %H:%M:%S UTC")


def _redact(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        key: ("<redacted>" if key.lower() in _REDACTED_HEADERS and value else value)
        for key, value in headers.items()
    }


def log_http_request(
    logger: logging.Logger,
    rpc_name: str,
    *,
    url: str,
    method: str,
    headers: Mapping[str, str],
    body: str,
    **extra: Any,
) -> None:
    """Log an outbound request verbatim for the audit trail.

    Args:
        logger: Logger instance
        rpc_name: Endpoint path the request is sent to
        url: Full request URL
        method: HTTP method
        headers: Request headers (credentials are redacted)
        body: Request body exactly as sent
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"rpc": rpc_name, "url": url, "method": method}
    context.update(extra)
    logger.info(
        "RPC %s Request. Sent(utc): %s, Url: %s, Method: %s, Header: %s, Body: %s",
        rpc_name,
        _utc_timestamp(),
        url,
        method,
        _redact(headers),
        body,
        extra=context,
    )


def log_http_response(
    logger: logging.Logger,
    rpc_name: str,
    *,
    status_code: int,
    body: str,
    **extra: Any,
) -> None:
    """Log an inbound response body verbatim for the audit trail.

    Args:
        logger: Logger instance
        rpc_name: Endpoint path the response came from
        status_code: HTTP status code
        body: Response body exactly as received
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"rpc": rpc_name, "status_code": status_code}
    context.update(extra)
    logger.info(
        "RPC %s Response. Received(utc): %s, Status: %s, Response %s",
        rpc_name,
        _utc_timestamp(),
        status_code,
        body,
        extra=context,
    )
