"""
Logging configuration for the jumpdest command line tools.

Provides a logger class with an extra `VERBOSE` level, UTC timestamped and
coloured formatters, and a standalone `configure_logging` entry point. The
analysis package itself never logs; the tools forward its trace events here.
"""

import logging
import sys
from datetime import datetime, timezone
from logging import LogRecord
from pathlib import Path
from typing import Any, ClassVar, Optional, Union, cast

file_handler: Optional[logging.FileHandler] = None

VERBOSE_LEVEL = 15  # Between DEBUG (10) and INFO (20)

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


class JumpdestLogger(logging.Logger):
    """Define custom log levels via a dedicated Logger class."""

    def verbose(
        self,
        msg: object,
        *args: Any,
        exc_info: Union[BaseException, bool, None] = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        extra: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Log a message with VERBOSE level severity (15).

        Intended for per-event detail such as individual queries, which is
        too much for INFO but not as low level as DEBUG.
        """
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, exc_info, extra, stack_info, stacklevel)


logging.setLoggerClass(JumpdestLogger)


def get_logger(name: str) -> JumpdestLogger:
    """Get a properly-typed logger with the custom logging levels."""
    return cast(JumpdestLogger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Log formatter that formats UTC timestamps with milliseconds and +00:00 suffix."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802  # camelcase required
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3] + "+00:00"


class ColorFormatter(UTCFormatter):
    """Formatter that adds ANSI color codes to log level names for terminal output."""

    running_in_docker: ClassVar[bool] = Path("/.dockerenv").exists()

    COLORS = {
        logging.DEBUG: "\033[37m",  # Gray
        VERBOSE_LEVEL: "\033[36m",  # Cyan
        logging.INFO: "\033[36m",  # Cyan
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[41m",  # Red background
    }
    RESET = "\033[0m"

    def format(self, record: LogRecord) -> str:
        """Apply colorful formatting only when not running in Docker."""
        record_copy = logging.makeLogRecord(record.__dict__)
        if not self.running_in_docker:
            color = self.COLORS.get(record_copy.levelno, self.RESET)
            record_copy.levelname = f"{color}{record_copy.levelname}{self.RESET}"
        return super().format(record_copy)


class LogLevel:
    """Help parse a log-level provided on the command-line."""

    @classmethod
    def from_cli(cls, value: str) -> int:
        """
        Parse a logging level from CLI.

        Accepts standard level names (e.g. 'INFO', 'verbose') or numeric values.
        """
        try:
            return int(value)
        except ValueError:
            pass

        level = logging.getLevelName(value.upper())
        if isinstance(level, int):
            return level

        valid = ", ".join(["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"])
        raise ValueError(f"Invalid log level '{value}'. Expected one of: {valid} or a number.")


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    log_level: Union[int, str] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
) -> Optional[logging.FileHandler]:
    """
    Configure the root logger for a tool run.

    Log output goes to stderr so that it never mixes with a command's JSON
    output on stdout. Colors are used only when stderr is a terminal outside
    of Docker.

    Args:
        log_level: The logging level to use (name or numeric value)
        log_file: Path to an additional log file (if None, only stderr is used)

    Returns:
        The file handler if log_file is provided, otherwise None

    """
    global file_handler

    root_logger = logging.getLogger()

    if isinstance(log_level, str):
        log_level = LogLevel.from_cli(log_level)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if file_handler is not None:
        file_handler.close()

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(exist_ok=True, parents=True)

        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(UTCFormatter(fmt=LOG_FORMAT))
        root_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    if not ColorFormatter.running_in_docker and sys.stderr.isatty():
        stream_handler.setFormatter(ColorFormatter(fmt=LOG_FORMAT))
    else:
        stream_handler.setFormatter(UTCFormatter(fmt=LOG_FORMAT))
    root_logger.addHandler(stream_handler)

    logger.verbose("Logging configured successfully.")
    return file_handler
