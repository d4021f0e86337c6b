import logging
from typing import Any, Optional

LIBRARY_LOGGER = "hal_resource"

# Extras set by the transport (hal.request), resolver and mutation events
LOG_EXTRA_FIELDS = (
    "method",
    "url",
    "status",
    "duration_ms",
    "depth",
    "links",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt lines for hal_resource records; unknown extras are ignored."""

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        kv.extend(
            f"{key}={self._fmt_val(getattr(record, key))}"
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            kv.append(f"exc_type={type(exc).__name__}")
            # HALError subclasses carry a numeric code
            code = getattr(exc, "code", None)
            if code is not None:
                kv.append(f"exc_code={int(code)}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if " " in s or "=" in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO", logger_name: Optional[str] = LIBRARY_LOGGER
) -> logging.Logger:
    """
    Attach a logfmt handler to the library logger (or root with None).
    Meant for host applications and scripts; the library never calls it.
    Calling it again replaces the handler rather than stacking another.
    """
    target = logging.getLogger(logger_name)
    for h in list(target.handlers):
        if isinstance(h.formatter, LogfmtFormatter):
            target.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    return target


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "LIBRARY_LOGGER"]
