"""
Structured console logger for the favicons generator
Verbosity lives on the logger instance, which is passed through the pipeline
"""

import json
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List
from enum import Enum


class LogLevel(Enum):
    """Log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# Levels printed even when verbose mode is off
ALWAYS_SHOWN = (LogLevel.WARNING, LogLevel.ERROR)


class Logger:
    """Structured logger with console output and an in-memory buffer"""

    def __init__(self, verbose: bool = True, component: Optional[str] = None):
        self.verbose = verbose
        self.component = component
        self.logs_buffer = []

    def _format_message(self, level: LogLevel, message: str, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Format log entry as structured dict"""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.value,
            "message": message,
            "component": self.component
        }

        if extra:
            log_entry["extra"] = extra

        return log_entry

    def _print_console(self, level: LogLevel, message: str, extra: Optional[Dict[str, Any]] = None):
        """Print formatted log to console"""
        if not self.verbose and level not in ALWAYS_SHOWN:
            return

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        prefix = f"[{self.component}]" if self.component else "[FAVICONS]"

        colors = {
            LogLevel.DEBUG: "\033[36m",      # Cyan
            LogLevel.INFO: "\033[32m",       # Green
            LogLevel.WARNING: "\033[33m",    # Yellow
            LogLevel.ERROR: "\033[31m",      # Red
        }
        reset = "\033[0m"

        color = colors.get(level, "")
        level_str = f"{color}[{level.value}]{reset}"

        console_msg = f"{timestamp} {prefix} {level_str} {message}"

        if extra:
            console_msg += f" | {json.dumps(extra, ensure_ascii=False, default=str)}"

        stream = sys.stderr if level in ALWAYS_SHOWN else sys.stdout
        print(console_msg, file=stream)

    def _log(self, level: LogLevel, message: str, extra: Dict[str, Any]):
        self.logs_buffer.append(self._format_message(level, message, extra or None))
        self._print_console(level, message, extra or None)

    def debug(self, message: str, **extra):
        """Log DEBUG level message"""
        self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: str, **extra):
        """Log INFO level message"""
        self._log(LogLevel.INFO, message, extra)

    def warning(self, message: str, **extra):
        """Log WARNING level message"""
        self._log(LogLevel.WARNING, message, extra)

    def error(self, message: str, **extra):
        """Log ERROR level message"""
        self._log(LogLevel.ERROR, message, extra)

    def generation_start(self, what: str):
        self.info(f"Generating {what}...")

    def file_created(self, path: str):
        self.info(f"Created {path}")

    def file_error(self, path: str, error: Optional[str] = None):
        if error:
            self.error(f"Error creating {path}: {error}", path=path)
        else:
            self.error(f"Error creating {path}", path=path)

    def get_logs(self) -> List[Dict[str, Any]]:
        """Get all buffered logs"""
        return self.logs_buffer


def get_logger(verbose: bool = True, component: Optional[str] = None) -> Logger:
    """Get a logger instance for one generation run"""
    return Logger(verbose=verbose, component=component)
