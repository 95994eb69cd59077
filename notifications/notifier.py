import logging
from typing import Optional

logger = logging.getLogger(__name__)

SUCCESS = "success"
INFO = "info"
ERROR = "error"


class Notice:
    def __init__(self, level: str, message: str, error: Optional[BaseException] = None):
        self.level = level
        self.message = message
        self.error = error

    def as_dict(self) -> dict:
        return {"level": self.level, "message": self.message}

    def __repr__(self):
        return f"Notice({self.level!r}, {self.message!r})"


class Notifier:
    """
    Collects the user-facing messages produced while serving one request.

    Services record a notice for every mutation and every failure they
    absorb. Views read the latest error notice to build the response.
    """

    def __init__(self):
        self.notices = []

    def notify(self, level: str, message: str, error: Optional[BaseException] = None) -> Notice:
        notice = Notice(level, message, error)
        self.notices.append(notice)

        if level == ERROR:
            logger.warning(f"Notice: {message}")
        else:
            logger.debug(f"Notice ({level}): {message}")
        return notice

    def success(self, message: str) -> Notice:
        return self.notify(SUCCESS, message)

    def info(self, message: str) -> Notice:
        return self.notify(INFO, message)

    def error(self, message: str, error: Optional[BaseException] = None) -> Notice:
        return self.notify(ERROR, message, error)

    @property
    def errors(self) -> list:
        return [notice for notice in self.notices if notice.level == ERROR]

    @property
    def last_error(self) -> Optional[Notice]:
        errors = self.errors
        return errors[-1] if errors else None
