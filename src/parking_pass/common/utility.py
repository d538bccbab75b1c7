"""
Logging helpers shared by the parking pass services and use cases.

Provides a mixin that hands each class its own child logger, a level-colored
formatter, and the factory used to build the library's root logger.
"""

import logging

LOGGER_NAME = "ParkingPass"
LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


class LoggerMixin:
    """
    Mixin class to provide a logger instance to child classes.

    Methods:
        _build_logger(logger): Initializes a child logger for the class.
        _log(level, message): Logs a message at the specified level using the class logger.
    """

    _logger: logging.Logger

    def _build_logger(
        self,
        logger: logging.Logger,
    ) -> None:
        """
        Initialize a logger for the class as a child of the provided logger.

        Args:
            logger (logging.Logger): The base logger to use.
        """
        self._logger = logger.getChild(self.__class__.__name__)

    def _log(
        self,
        level: int,
        message: str,
        *args: object,
    ) -> None:
        """
        Log a message at the specified level using the class logger.

        Args:
            level (int): Logging level (e.g., logging.INFO).
            message (str): The message to log, with optional %-style args.
        """
        if self._logger:
            self._logger.log(level, message, *args)


class ColorFormatter(logging.Formatter):
    """
    Logging formatter that colors the whole record according to its level.
    """

    COLORS = {
        "DEBUG": "\033[94m",  # Blue
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        return f"{color}{super().format(record)}{self.RESET}"


def build_logger(
    log_level: int = logging.INFO, name: str = LOGGER_NAME
) -> logging.Logger:
    """
    Build and configure the library logger.

    A colored stream handler is attached only the first time, so calling this
    repeatedly never duplicates output.

    Args:
        log_level (int, optional): Logging level. Defaults to logging.INFO.
        name (str, optional): Logger name. Defaults to "ParkingPass".

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(log_level)

    return logger
