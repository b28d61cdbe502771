import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Written through the same handler as the application logger.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Process-wide logging facade for the API and its services."""

    _logger: logging.Logger = logging.getLogger("handnotes")
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach one stdout handler to the app and server loggers at log_level."""
        level = log_level.upper()
        if cls._handler is None:
            cls._handler = logging.StreamHandler(sys.stdout)
            cls._handler.setFormatter(logging.Formatter(LOG_FORMAT))
        for logger in (cls._logger, *map(logging.getLogger, SERVER_LOGGERS)):
            logger.setLevel(level)
            if cls._handler not in logger.handlers:
                logger.addHandler(cls._handler)
            logger.propagate = False

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR with the traceback of the exception being handled."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
