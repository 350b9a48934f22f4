import json
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from bytering.settings import LoggingSettings

_STANDARD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

# Structured fields every JSON line carries (None when the record has no value)
MANDATORY_FIELDS = ("buffer", "op", "error_kind", "available")


def _extras(record: logging.LogRecord) -> dict:
    return {key: value for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = _extras(record)
        for field in MANDATORY_FIELDS:
            payload[field] = extras.get(field)
        payload.update(extras)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        extras = _extras(record)
        if extras:
            extra_pairs = " ".join(f"{key}={value}" for key, value in extras.items())
            msg = f"{msg} | {extra_pairs}"
        return msg


def setup_logging(service_name: str = "bytering", settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Attach handlers to the ``service_name`` logger (idempotent).

    A rotating file handler is added only when a log directory is configured.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger(service_name)
    if logger.handlers:
        return logger

    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    if settings.format == "json":
        formatter = JsonFormatter()
    else:
        formatter = TextFormatter(fmt)

    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    sh.setLevel(level)
    logger.addHandler(sh)

    if settings.dir:
        os.makedirs(settings.dir, exist_ok=True)
        fh_path = os.path.join(settings.dir, f"{service_name}.log")
        fh = RotatingFileHandler(fh_path, maxBytes=5 * 1024 * 1024, backupCount=3)
        fh.setFormatter(formatter)
        fh.setLevel(level)
        logger.addHandler(fh)

    logger.setLevel(level)
    logger.propagate = False
    return logger
