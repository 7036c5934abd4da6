"""Logging setup and utilities."""

import logging
import os

from .ansi import LogStyles, make_style, should_colorize

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
]


class LogObjects:
    """Reusable objects for loggers.

    `debug` starts enabled when the DEBUG environment variable is set.
    """

    handlers: list[logging.Handler] = []
    level: int = logging.INFO
    debug: bool = bool(os.environ.get("DEBUG"))


def init_logger(filename: str | None = None, force_debug: bool = False, quiet: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
        quiet: If True, only critical messages are shown
    """
    if force_debug:
        LogObjects.debug = True

    if LogObjects.debug:
        LogObjects.level = logging.DEBUG
    elif quiet:
        LogObjects.level = logging.CRITICAL
    else:
        LogObjects.level = logging.INFO

    class ScreenLogFormatter(logging.Formatter):
        """A custom formatter, adding colors based on log level.

        Respects NO_COLOR environment variable and TTY detection.
        """

        LOG_FORMAT = r"%(name)15s - %(message)s // %(filename)s:%(lineno)d" if LogObjects.debug else r"%(message)s"

        def __init__(self) -> None:
            super().__init__()
            if should_colorize():
                warn_pre, warn_suf = make_style(*LogStyles.WARNING)
                err_pre, err_suf = make_style(*LogStyles.ERROR)
                crit_pre, crit_suf = make_style(*LogStyles.CRITICAL)
            else:
                warn_pre = warn_suf = err_pre = err_suf = crit_pre = crit_suf = ""

            self._formatters = {
                logging.DEBUG: logging.Formatter(self.LOG_FORMAT),
                logging.INFO: logging.Formatter(self.LOG_FORMAT),
                logging.WARNING: logging.Formatter(warn_pre + self.LOG_FORMAT + warn_suf),
                logging.ERROR: logging.Formatter(err_pre + self.LOG_FORMAT + err_suf),
                logging.CRITICAL: logging.Formatter(crit_pre + self.LOG_FORMAT + crit_suf),
            }

        def format(self, record: logging.LogRecord) -> str:
            return self._formatters.get(record.levelno, self._formatters[logging.INFO]).format(record)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "termpal", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)
    """
    logger = logging.getLogger(name)
    logger.setLevel(LogObjects.level if level is None else level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in LogObjects.handlers:
        logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
