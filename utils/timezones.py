import datetime
from zoneinfo import ZoneInfo

from config import config


class TimeZoneUtils:
    def __init__(self, timezone_str=config.TIMEZONE):
        self.timezone = ZoneInfo(timezone_str)

    def get_timezone_datetime(self) -> datetime.datetime:
        """Get time zone time"""
        return datetime.datetime.now(self.timezone)


timezone_utils = TimeZoneUtils()
