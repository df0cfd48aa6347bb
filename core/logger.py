"""TelebindLogger — Singleton JSON logger with console and rotating file output.

Owns the ``telebind`` logger.  Library modules log through child loggers
(``telebind.encoder``, ``telebind.client``) and inherit its handlers, so
one :meth:`TelebindLogger.get_logger` call at startup is enough to get
structured JSON on stdout and in ``logs/telebind.log``.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present.  Any key passed via ``extra`` is merged in, which is
    how the SDK attaches ``api_method``, ``encoding``, ``status_code`` and
    similar context::

        logger.info("API call succeeded", extra={"api_method": "sendVideoNote"})

    Produces::

        {"timestamp": "…", "level": "INFO", …, "api_method": "sendVideoNote"}

    Bytes values are summarised by length instead of being dumped.
    """

    # Keys that belong to the standard LogRecord; everything else is extra.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        """Serialize *record* to a JSON string."""
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key in self._BUILTIN_ATTRS or key in log_entry:
                continue
            if isinstance(value, (bytes, bytearray)):
                value = f"<{len(value)} bytes>"
            log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TelebindLogger:
    """Singleton owner of the ``telebind`` logger (console + rotating file).

    Usage::

        from core.logger import TelebindLogger

        logger = TelebindLogger.get_logger()
        logger.info("Client ready")

    Set ``TELEBIND_LOG_DIR`` to move the log file; an empty value disables
    the file handler.
    """

    _instance: Optional["TelebindLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "telebind"

    # Rotation settings
    _LOG_FILE: str = "telebind.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO) -> "TelebindLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level)
        return cls._instance

    def _init_logger(self, level: int) -> None:
        """Configure the ``telebind`` logger and attach handlers once."""
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        log_dir = os.environ.get("TELEBIND_LOG_DIR", "logs")
        if not log_dir:
            return
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, self._LOG_FILE),
            maxBytes=self._MAX_BYTES,
            backupCount=self._BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    @staticmethod
    def get_logger(level: int = logging.INFO) -> logging.Logger:
        """Return the shared ``telebind`` :class:`logging.Logger`.

        Creates the singleton on first call; later calls return the same
        logger regardless of the *level* argument.
        """
        instance = TelebindLogger(level)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger

    @classmethod
    def reset(cls) -> None:
        """Close all handlers and forget the singleton (used by tests)."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
