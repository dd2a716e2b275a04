"""
Logging setup for Compositor
Console logging always, rotating log files when a log directory is given
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class CompositorLogger:
    """Process-wide logging configuration for hosts embedding Compositor"""

    _instance = None
    _loggers = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, 'initialized'):
            self.initialized = False
            self.log_dir = None
            self.log_level = logging.INFO

    def setup(self, log_dir: str | None = None, log_level: str = 'INFO'):
        """
        Initialize the logging system

        Args:
            log_dir: Directory to store log files (None logs to console only)
            log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        if self.initialized:
            return

        self.log_dir = log_dir
        self.log_level = getattr(logging, log_level.upper(), logging.INFO)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        self._configure_root_logger()

        self.initialized = True

    def _configure_root_logger(self):
        """Configure the compositor logger with handlers"""

        log_format = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        handlers = []

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(log_format)
        handlers.append(console_handler)

        if self.log_dir:
            # Main log file handler (rotating)
            file_handler = RotatingFileHandler(
                os.path.join(self.log_dir, 'compositor.log'),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
            file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
            file_handler.setFormatter(log_format)
            handlers.append(file_handler)

            # Error log file handler (separate file for errors)
            error_handler = RotatingFileHandler(
                os.path.join(self.log_dir, 'compositor_errors.log'),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=3
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(log_format)
            handlers.append(error_handler)

        package_logger = logging.getLogger('compositor')
        package_logger.setLevel(self.log_level)
        for handler in handlers:
            package_logger.addHandler(handler)

    def reset(self):
        """Remove installed handlers (for testing)"""
        package_logger = logging.getLogger('compositor')
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
        self._loggers.clear()
        self.initialized = False

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get or create a logger for a specific module

        Args:
            name: Logger name (usually __name__ of the module)

        Returns:
            Configured logger instance
        """
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)

        return self._loggers[name]


# Global instance
_logger_instance = CompositorLogger()


def setup_logging(log_dir: str | None = None, log_level: str = 'INFO') -> CompositorLogger:
    """
    Setup logging for the compositor package

    Args:
        log_dir: Directory for rotating log files (None for console only)
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    if _logger_instance.initialized:
        return _logger_instance

    _logger_instance.setup(log_dir, log_level)

    logger = _logger_instance.get_logger(__name__)
    logger.info(f'Log level: {log_level}')
    if log_dir:
        logger.info(f'Log directory: {log_dir}')

    return _logger_instance


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance

    Example:
        logger = get_logger(__name__)
        logger.debug("Resolved collection.transition")
    """
    return _logger_instance.get_logger(name)
