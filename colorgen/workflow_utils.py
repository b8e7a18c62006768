"""
Workflow utilities: logging setup for scripts and structured (JSON) log lines.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once for a script run."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def log_structured(level: str, **kwargs: Any) -> None:
    """Emit one structured (JSON) log line."""
    record = {"level": level, **kwargs}
    line = json.dumps(record, default=str)
    if level == "error":
        logger.error("%s", line)
    elif level == "warning":
        logger.warning("%s", line)
    else:
        logger.info("%s", line)
