from __future__ import annotations
from typing import TYPE_CHECKING
from loguru import logger as _logger

from config import config

if TYPE_CHECKING:
    import loguru


class Logger:
    def __init__(self, level: str = config.LOG_LEVEL):
        self.level = level

    def log(self) -> loguru.Logger:
        _logger.remove()
        _logger.add(
            lambda msg: print(msg, end=""),
            level=self.level,
            filter=lambda record: record['level'].no <= 25,
            backtrace=False,
            diagnose=False,
        )

        _logger.add(
            lambda msg: print(msg, end=""),
            level='WARNING',
            filter=lambda record: record['level'].no >= 30,
            backtrace=True,
            diagnose=True,
        )

        return _logger


logger = Logger().log()
