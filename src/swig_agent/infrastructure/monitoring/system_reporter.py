"""
System Reporter - logging for the Swig agent pipeline.

Every line is tagged ``[context]`` and filtered twice: by the stdlib level
and by a 0-3 verbosity. Output goes to stdout and, with a log directory,
to ``<log_dir>/<name>.log`` as well.
"""

import logging
import os
import sys
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_VERBOSE = 3


def _clamp(verbose: int) -> int:
    return max(0, min(MAX_VERBOSE, verbose))


class SystemReporter:
    """
    Logger with verbose filtering.

    Verbose Levels:
        0 = Failures only (always visible)
        1 = Operation outcomes (default)
        2 = Pipeline stages
        3 = Debug
    """

    def __init__(
        self,
        name: str = "swig_agent",
        log_dir: Optional[str] = None,
        level: Union[int, str] = logging.INFO,
        verbose: int = 1,
    ) -> None:
        """
        Args:
            name: Logger name, also the log file stem
            log_dir: Directory for ``<name>.log``; stdout only when None
            level: stdlib logging level (int or name)
            verbose: Verbosity 0-3, clamped
        """
        self.name = name
        self.verbose = _clamp(verbose)
        self.log_file: Optional[str] = None
        if log_dir:
            directory = os.path.abspath(log_dir)
            os.makedirs(directory, exist_ok=True)
            self.log_file = os.path.join(directory, f"{name}.log")

        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False
        self.logger.handlers.clear()

        line_format = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        for handler in self._handlers():
            handler.setFormatter(line_format)
            self.logger.addHandler(handler)

    def _handlers(self) -> List[logging.Handler]:
        handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        if self.log_file:
            handlers.append(logging.FileHandler(self.log_file, encoding="utf-8"))
        return handlers

    @classmethod
    def from_settings(cls, settings, name: str = "swig_agent") -> "SystemReporter":
        """Build a reporter from LOG_LEVEL, LOG_DIR and VERBOSE settings."""
        return cls(
            name=name,
            log_dir=settings.LOG_DIR,
            level=settings.LOG_LEVEL,
            verbose=settings.VERBOSE,
        )

    def set_verbose(self, level: int) -> None:
        self.verbose = _clamp(level)
        self.info(
            f"Verbosity set to {self.verbose}",
            context="SystemReporter",
            verbose_level=0,
        )

    def _emit(self, level: int, msg: str, context: str, verbose_level: int) -> None:
        if verbose_level <= self.verbose:
            self.logger.log(level, f"[{context}] {msg}")

    def debug(self, msg: str, context: str = "system", verbose_level: int = 3) -> None:
        self._emit(logging.DEBUG, msg, context, verbose_level)

    def info(self, msg: str, context: str = "system", verbose_level: int = 1) -> None:
        self._emit(logging.INFO, msg, context, verbose_level)

    def warning(
        self, msg: str, context: str = "system", verbose_level: int = 1
    ) -> None:
        self._emit(logging.WARNING, msg, context, verbose_level)

    def error(self, msg: str, context: str = "system", verbose_level: int = 0) -> None:
        self._emit(logging.ERROR, msg, context, verbose_level)

    def critical(
        self, msg: str, context: str = "system", verbose_level: int = 0
    ) -> None:
        self._emit(logging.CRITICAL, msg, context, verbose_level)
