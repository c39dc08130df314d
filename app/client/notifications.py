from dataclasses import dataclass
from typing import List

from utils.logger import logger

INFO = "info"
SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


class Notifier:
    """Collects user-facing notifications in the order they were raised."""

    def __init__(self):
        self.history: List[Notification] = []

    def notify(self, level: str, message: str) -> Notification:
        notification = Notification(level, message)
        self.history.append(notification)
        if level == ERROR:
            logger.warning(f"[notify] {message}")
        else:
            logger.info(f"[notify] {message}")
        return notification

    def info(self, message: str) -> Notification:
        return self.notify(INFO, message)

    def success(self, message: str) -> Notification:
        return self.notify(SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.notify(ERROR, message)

    @property
    def last(self):
        return self.history[-1] if self.history else None
