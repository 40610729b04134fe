"""Build Log Output — one structured line per inference for CI log collectors.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Inference summaries add input_count, output_count, and version; version lookup
      failures add error_code. Absent fields are omitted, never written as null
    - setup_logging returns its handler so an embedding build can detach it again

Design Decisions:
    - input_count / output_count let a CI dashboard spot a classpath that inferred
      nothing beyond server + testcontainers without parsing the message text
    - version is logged because the fallback chain (explicit, TEST_RESOURCES_VERSION,
      package metadata) is otherwise invisible in a build log
    - stdlib logging + json only: the library runs inside other tools' processes
"""

import logging
import json
from datetime import datetime, timezone


INFERENCE_FIELDS = ("input_count", "output_count", "version", "error_code")


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object per line."""

    def __init__(self, fields: tuple[str, ...] = INFERENCE_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update({
            key: record.__dict__[key] for key in self.fields
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stream handler to the root logger. fmt is "json" or "text"."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
