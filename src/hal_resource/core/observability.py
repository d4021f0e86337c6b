"""Structured INFO events about resource operations."""

from __future__ import annotations

import logging
from typing import Optional

EVENT_LOGGER = "hal_resource.observability"


def log_event(
    event: str,
    *,
    url: str,
    method: Optional[str] = None,
    status: Optional[int] = None,
    depth: Optional[int] = None,
    links: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Emit `event` about the resource at `url`.
    Fields left as None are not set on the record, so formatters skip them.
    """
    fields = {
        "url": url,
        "method": method,
        "status": status,
        "depth": depth,
        "links": links,
    }
    extra = {k: v for k, v in fields.items() if v is not None}
    log = logger or logging.getLogger(EVENT_LOGGER)
    log.info(event, extra={"event": event, **extra})


__all__ = ["log_event", "EVENT_LOGGER"]
