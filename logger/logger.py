# logger.py
import logging
import sys

LOGGER_NAME = "calendar_grid"


class Logger:
    """Static logger for the calendar core with class-level methods.

    The anchor, resolutions and facade log through here; Config applies
    the level from CALENDAR_LOG_LEVEL.
    """

    _logger = None

    @classmethod
    def setup(cls, name: str = LOGGER_NAME, level: int = logging.INFO) -> None:
        """Attach the stdout handler once; later calls only change the level."""
        if cls._logger is None:
            cls._logger = logging.getLogger(name)

            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            cls._logger.addHandler(handler)
        cls._logger.setLevel(level)

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Return singleton logger instance."""
        if cls._logger is None:
            cls.setup()
        return cls._logger

    @classmethod
    def info(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().info(msg, *args, **kwargs)

    @classmethod
    def error(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().error(msg, *args, **kwargs)

    @classmethod
    def debug(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().debug(msg, *args, **kwargs)
