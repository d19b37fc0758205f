import json
import logging
import sys
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else arrived through ``extra=``
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

QUIET_LOGGERS = ("openai", "httpx", "httpcore", "botocore", "urllib3")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` context copied to the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        for key, value in vars(record).items():
            if key not in _RECORD_FIELDS and key not in entry:
                entry[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _StdoutJsonHandler(logging.StreamHandler):
    def __init__(self):
        super().__init__(sys.stdout)
        self.setFormatter(JsonFormatter())


def configure_logging(level: str = "INFO") -> None:
    """
    Send root logging to stdout as JSON lines.

    Calling it again only changes the level.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    if not any(isinstance(h, _StdoutJsonHandler) for h in root_logger.handlers):
        root_logger.addHandler(_StdoutJsonHandler())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
