"""
Logging for the key generation service.
Category-tagged, colored console output on top of the standard logging module.
"""
import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class LogCategory(Enum):
    """Log categories"""
    SYSTEM = "system"        # startup, shutdown, configuration
    API = "api"              # HTTP requests and responses
    GENERATOR = "generator"  # key generation strategies
    COUNTER = "counter"      # counter store access


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    WHITE = "\033[37m"

    BG_RED = "\033[41m"


class LogFormatter(logging.Formatter):
    """Formatter producing `timestamp | LEVEL | [category] | message` lines."""

    LEVEL_COLORS = {
        "DEBUG": Colors.BRIGHT_BLUE,
        "INFO": Colors.BRIGHT_GREEN,
        "WARN": Colors.BRIGHT_YELLOW,
        "WARNING": Colors.BRIGHT_YELLOW,
        "ERROR": Colors.BRIGHT_RED,
        "CRITICAL": Colors.BG_RED + Colors.WHITE,
    }

    CATEGORY_COLORS = {
        LogCategory.SYSTEM.value: Colors.BRIGHT_CYAN,
        LogCategory.API.value: Colors.BRIGHT_BLUE,
        LogCategory.GENERATOR.value: Colors.BRIGHT_GREEN,
        LogCategory.COUNTER.value: Colors.BRIGHT_MAGENTA,
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        level = record.levelname
        if level == "WARNING":
            level = "WARN"
        level_str = f"{level:<5}"

        category = getattr(record, "category", LogCategory.SYSTEM.value)
        category_str = f"[{category}]".ljust(11)

        message = record.getMessage()

        if self.use_color:
            level_color = self.LEVEL_COLORS.get(record.levelname, "")
            category_color = self.CATEGORY_COLORS.get(category, "")
            level_str = f"{level_color}{level_str}{Colors.RESET}"
            category_str = f"{category_color}{category_str}{Colors.RESET}"

        log_line = f"{timestamp} | {level_str} | {category_str} | {message}"

        if record.exc_info:
            log_line += "\n" + self.formatException(record.exc_info)

        return log_line


class AppLogger:
    """
    Application logger.

    Usage:
        from keygen_service.logger import logger

        logger.system("Service started", port=8080)
        logger.generator("Generator ready", strategy="random", digits=8)
        logger.counter_error("INCR failed", key="incr:count", error="timeout")
    """

    _instance: Optional["AppLogger"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._logger = logging.getLogger("keygen-service")
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers.clear()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(LogFormatter(use_color=True))
        self._logger.addHandler(self._console_handler)

        self._logger.propagate = False

    def configure(self, level: Union[str, int] = "INFO", log_file: Optional[str] = None):
        """Apply LOG_LEVEL to the console and add a file handler when LOG_FILE is set."""
        self._console_handler.setLevel(level)

        if log_file and not any(isinstance(h, logging.FileHandler) for h in self._logger.handlers):
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(LogFormatter(use_color=False))
            self._logger.addHandler(file_handler)

    def _log(self, level: int, message: str, category: str = "system", **kwargs):
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            message = f"{message} | {details}"

        self._logger.log(level, message, extra={"category": category})

    # ========== Basic methods ==========

    def debug(self, message: str, category: str = "system", **kwargs):
        self._log(logging.DEBUG, message, category, **kwargs)

    def info(self, message: str, category: str = "system", **kwargs):
        self._log(logging.INFO, message, category, **kwargs)

    def warning(self, message: str, category: str = "system", **kwargs):
        self._log(logging.WARNING, message, category, **kwargs)

    def error(self, message: str, category: str = "system", exc_info: bool = False, **kwargs):
        if exc_info:
            self._logger.error(message, exc_info=True, extra={"category": category})
        else:
            self._log(logging.ERROR, message, category, **kwargs)

    def fatal(self, message: str, category: str = "system", **kwargs):
        self._log(logging.CRITICAL, message, category, **kwargs)

    # ========== Category shortcuts ==========

    def system(self, message: str, **kwargs):
        self.info(message, category=LogCategory.SYSTEM.value, **kwargs)

    def generator(self, message: str, **kwargs):
        self.info(message, category=LogCategory.GENERATOR.value, **kwargs)

    def generator_error(self, message: str, **kwargs):
        self.error(message, category=LogCategory.GENERATOR.value, **kwargs)

    def counter(self, message: str, **kwargs):
        self.debug(message, category=LogCategory.COUNTER.value, **kwargs)

    def counter_error(self, message: str, **kwargs):
        self.error(message, category=LogCategory.COUNTER.value, **kwargs)

    def api(self, method: str, path: str, status: int, duration: float, ip: str, **kwargs):
        """API request log"""
        method_str = f"{method:<6}"
        path_str = path[:40].ljust(40) if len(path) <= 40 else path[:37] + "..."
        time_str = f"{duration:.3f}s"

        message = f"{method_str} | {path_str} | {status} | {time_str:>8} | {ip}"
        self._log(logging.INFO, message, category=LogCategory.API.value, **kwargs)

    def api_error(self, method: str, path: str, status: int, error: str, ip: str, **kwargs):
        """API error log"""
        method_str = f"{method:<6}"
        message = f"{method_str} | {path} | {status} | {error}"
        self._log(logging.ERROR, message, category=LogCategory.API.value, ip=ip, **kwargs)


logger = AppLogger()

