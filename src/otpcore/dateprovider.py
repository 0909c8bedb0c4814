import calendar
import datetime
import math
import time
from typing import Union


class DateProvider(object):
    """
    Source of the "current time" used by TOTP generation, in seconds since the Unix epoch.
    """

    def current_time(self) -> int:
        raise NotImplementedError


class SystemDateProvider(DateProvider):
    def current_time(self) -> int:
        return int(time.time())

    def __repr__(self) -> str:
        return "SystemDateProvider()"


class ConstantDateProvider(DateProvider):
    """
    Always reports the same instant. Handy for tests and for computing the
    code of a known point in time.
    """

    def __init__(self, instant: Union[int, float, datetime.datetime]) -> None:
        """
        :param instant: epoch seconds, or a datetime (naive values are read as UTC)
        """
        if isinstance(instant, datetime.datetime):
            # timegm, unlike mktime, does not apply the local timezone
            if instant.tzinfo is None:
                instant = calendar.timegm(instant.utctimetuple())
            else:
                instant = instant.timestamp()
        self.instant = math.floor(instant)

    def current_time(self) -> int:
        return self.instant

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantDateProvider):
            return NotImplemented
        return self.instant == other.instant

    def __hash__(self) -> int:
        return hash(self.instant)

    def __repr__(self) -> str:
        return "ConstantDateProvider({})".format(self.instant)
