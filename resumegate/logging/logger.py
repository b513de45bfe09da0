import json
import logging
import sys
from typing import Protocol


class StructuredFormatter(logging.Formatter):
    """Appends the structured fields of a record to the formatted line as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = getattr(record, "fields", None)
        if not fields:
            return line
        return f"{line} {json.dumps(fields, default=str, ensure_ascii=False, sort_keys=True)}"


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("resumegate")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                StructuredFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=cls._fields(kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=cls._fields(kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=cls._fields(kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=cls._fields(kwargs))

    @staticmethod
    def _fields(kwargs: dict[str, object]) -> dict[str, object]:
        # LogRecord reserves attribute names such as "message" and "args".
        return {"fields": kwargs} if kwargs else {}


class StructuredLogger(Protocol):
    """Anything exposing the ``Log`` method surface (``Log`` itself qualifies)."""

    def debug(self, message: str, **kwargs: object) -> None: ...

    def info(self, message: str, **kwargs: object) -> None: ...

    def warning(self, message: str, **kwargs: object) -> None: ...

    def error(self, message: str, **kwargs: object) -> None: ...
