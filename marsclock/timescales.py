"""
conversions between terrestrial time scales. times are floating-point
seconds since 1970-01-01 in the named scale (so "TAI" here means Unix-style
seconds counted in TAI), except J2000 values, which are days of TT since
2000-01-01 12:00:00 TT.
"""
import datetime as dt
import time as _time
from typing import Callable, Union

import dateutil.parser as dtp

TZS = {
    'EST': -18000,
    'CST': -21600,
    'MST': -25200,
    'PST': -28800
}

TT_TAI_OFFSET = 32.184
SECONDS_PER_DAY = 86400
# J2000 epoch is 10957.5 days after 1970-01-01 00:00:00
J2000_UNIX_DAYS = 10957.5


def utc_to_tai(utc: float, offset_function: Callable[[float], int]) -> float:
    """
    offset_function returns TAI - UTC for a UTC instant;
    generally a partially-evaluated marsclock.leapsecs.offset
    """
    return utc + offset_function(utc)


def tai_to_tt(tai: float) -> float:
    return tai + TT_TAI_OFFSET


def tt_to_tai(tt: float) -> float:
    return tt - TT_TAI_OFFSET


def tt_to_j2k(tt: float) -> float:
    """seconds since the Unix epoch (TT) to days since J2000 (TT)"""
    return tt / SECONDS_PER_DAY - J2000_UNIX_DAYS


def j2k_to_tt(j2k: float) -> float:
    return SECONDS_PER_DAY * (j2k + J2000_UNIX_DAYS)


def tai_to_j2k(tai: float) -> float:
    """seconds since the Unix epoch (TAI) to days since J2000 (TT)"""
    return (tai + TT_TAI_OFFSET) / SECONDS_PER_DAY - J2000_UNIX_DAYS


def j2k_to_tai(j2k: float) -> float:
    return SECONDS_PER_DAY * (j2k + J2000_UNIX_DAYS) - TT_TAI_OFFSET


def timeval_to_float(seconds: int, microseconds: int) -> float:
    """
    seconds + microseconds, as returned by gettimeofday() and friends,
    to floating-point seconds
    """
    return seconds + microseconds / 1e6


def to_unix(time: Union[dt.datetime, str, float, None] = None) -> float:
    """
    transforms a UTC python datetime -- or any string representing UTC
    time in a format dateutil can parse, or a number, which is assumed to
    already be unix seconds -- into floating-point unix seconds (UTC).
    None means now.
    """
    if time is None:
        return _time.time()
    if isinstance(time, (int, float)):
        return float(time)
    if isinstance(time, str):
        time = dtp.parse(time, tzinfos=TZS)
    if time.tzinfo is None:
        time = time.replace(tzinfo=dt.timezone.utc)
    return time.timestamp()
