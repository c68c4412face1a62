"""
Logging Configuration Module

Queue-based logging setup shared by the web application and the
maintenance CLI, plus silencing of chatty third-party loggers.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from queue import Queue
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"

NOISY_LOGGERS = (
    "werkzeug",
    "urllib3",
    "asyncio",
)


class ThreadSafeLoggingConfig:
    """Thread-safe logging configuration with queue-based logging."""

    def __init__(self):
        self._log_listener: Optional[logging.handlers.QueueListener] = None
        self._log_queue: Optional[Queue] = None

    def setup_logging(self, debug: bool = False, log_file: Optional[Union[str, Path]] = None) -> None:
        """
        Route all records through a QueueHandler drained by a QueueListener.

        Request threads only enqueue records; the listener thread writes them,
        so lines from concurrent requests never interleave.

        Args:
            debug: Whether to enable debug logging
            log_file: Optional path of a rotating log file written alongside stdout
        """
        # Calling twice must not leave a second listener running.
        self.stop()

        self._log_queue = Queue()
        queue_handler = logging.handlers.QueueHandler(self._log_queue)

        formatter = logging.Formatter(LOG_FORMAT)
        handlers: List[logging.Handler] = []

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        self._log_listener = logging.handlers.QueueListener(
            self._log_queue, *handlers, respect_handler_level=True
        )
        self._log_listener.start()

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(queue_handler)
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        if not debug:
            self._silence_noisy_libraries()

    def _silence_noisy_libraries(self) -> None:
        """Raise third-party loggers to WARNING."""
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    def stop(self) -> None:
        """Stop the logging listener and cleanup."""
        if self._log_listener:
            self._log_listener.stop()
            self._log_listener = None
        if self._log_queue:
            self._log_queue = None

    @property
    def is_running(self) -> bool:
        return self._log_listener is not None


# Global logging configuration instance
logging_config = ThreadSafeLoggingConfig()


def setup_logging(debug: bool = False, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Setup thread-safe logging configuration.

    Args:
        debug: Whether to enable debug logging
        log_file: Optional rotating log file path
    """
    logging_config.setup_logging(debug, log_file)


def stop_logging() -> None:
    """Stop the logging listener and cleanup."""
    logging_config.stop()


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
