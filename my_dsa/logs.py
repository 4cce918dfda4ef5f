import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import get_settings

PACKAGE_LOGGER = "my_dsa"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the handler it installed earlier, so repeated
    calls never duplicate output.
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    json_format = settings.log_json if json_format is None else json_format

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_my_dsa_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._my_dsa_handler = True
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
