"""
Logging System for the Expression Engine

Centralized logging with verbosity levels so that parse diagnostics and
differentiation failures can be surfaced to the caller without cluttering
the terminal of the surrounding application.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the engine"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Diagnostics for rejected input only
    MODERATE = 2    # Plus summaries of parsed expressions
    DETAILED = 3    # Plus simplification / derivative results
    VERBOSE = 4     # All information including debug details


class EngineLogger:
    """
    Centralized logger for the expression engine with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('expression_engine')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        self._console_handler: Optional[logging.Handler] = None
        self.set_level(log_level)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_engine_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(self.formatter)
            self.logger.addHandler(file_handler)

    def set_level(self, log_level: LogLevel):
        """Change the verbosity, attaching or detaching the console handler to match"""
        self.log_level = log_level
        if log_level == LogLevel.SILENT:
            if self._console_handler is not None:
                self.logger.removeHandler(self._console_handler)
                self._console_handler = None
        elif self._console_handler is None:
            self._console_handler = logging.StreamHandler(sys.stdout)
            self._console_handler.setFormatter(self.formatter)
            self.logger.addHandler(self._console_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - unexpected internal failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def diagnostic(self, message: str, source: str = ""):
        """Rejected user input, shown from minimal level onwards"""
        if not self._should_log(LogLevel.MINIMAL):
            return
        if source:
            message = f"{message}: {source!r}"
        self.logger.warning(message)

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[EngineLogger] = None


def get_logger() -> EngineLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = EngineLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = EngineLogger(log_level=level)
    else:
        _global_logger.set_level(level)


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> EngineLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = EngineLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_diagnostic(message: str, source: str = ""):
    """Log a diagnostic for rejected input"""
    get_logger().diagnostic(message, source)


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
