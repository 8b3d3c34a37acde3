import logging
import sys
from typing import TextIO


class Log:
    """Process-wide diagnostics for a calibration run.

    Report lines are not logged; they are written by the reporter to its own
    stream. Everything else (run start, broken lines, open failures) goes here.
    """

    _logger: logging.Logger = logging.getLogger("calibration")
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and (re)attach a single stream handler, stdout by default."""
        cls._logger.setLevel(log_level.upper())
        if cls._handler is not None:
            cls._logger.removeHandler(cls._handler)
        cls._handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        cls._handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        cls._logger.addHandler(cls._handler)

    @classmethod
    def debug_enabled(cls) -> bool:
        """Cheap guard for per-line debug messages."""
        return cls._logger.isEnabledFor(logging.DEBUG)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def reset(cls) -> None:
        """Detach the handler installed by ``configure``."""
        if cls._handler is not None:
            cls._logger.removeHandler(cls._handler)
            cls._handler = None
