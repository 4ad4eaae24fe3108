import logging
import sys


class Log:
    """Process-wide logger for normalization and boundary events."""

    _logger: logging.Logger = logging.getLogger("orm_errors")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log a failure the data layer could not attribute to the caller."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a rejected request or a misbehaving classification rule."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a pass-through of an already normalized error."""
        cls._logger.debug(message, extra=kwargs)
