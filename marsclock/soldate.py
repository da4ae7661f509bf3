"""
broken-down martian times: a sol count since a zone's epoch plus martian
hours, minutes, and seconds (i.e., 24ths, 1440ths, and 86400ths of a sol).
"""
from dataclasses import dataclass
from math import floor

from marsclock.zones import TimeZoneProfile

# martian seconds per sol
SECONDS_PER_SOL = 86400


@dataclass(frozen=True)
class Soldate:
    sol: int
    hour: int
    min: int
    sec: int
    zone: TimeZoneProfile

    def __str__(self):
        return soldate_to_string(self)


def _carry(sol: int, hour: int, minute: int, second: int) -> tuple:
    """
    push any component that floating-point error has rounded up to its
    bound into the next larger unit
    """
    if second >= 60:
        second, minute = second - 60, minute + 1
    if minute >= 60:
        minute, hour = minute - 60, hour + 1
    if hour >= 24:
        hour, sol = hour - 24, sol + 1
    return sol, hour, minute, second


def to_soldate(msd: float, zone: TimeZoneProfile) -> Soldate:
    """
    convert a floating-point Mars Sol Date to a Soldate in the given zone.
    sols are floored, not truncated, so times just before a zone's epoch
    land on sol -1.
    """
    msd = msd - zone.start_sol + zone.offset / SECONDS_PER_SOL
    sol = floor(msd)
    remainder = (msd - sol) * 24
    hour = floor(remainder)
    remainder = (remainder - hour) * 60
    minute = floor(remainder)
    remainder = (remainder - minute) * 60
    second = floor(remainder)
    return Soldate(*_carry(sol, hour, minute, second), zone=zone)


def soldate_to_string(soldate: Soldate) -> str:
    """
    e.g.:
        MSD 44796 12:34:56 MTC
        MSL 0034 14:54:49
    """
    zone = soldate.zone
    text = (
        f"{zone.epoch_name} {soldate.sol:0{zone.digits}d} "
        f"{soldate.hour:02d}:{soldate.min:02d}:{soldate.sec:02d}"
    )
    if zone.zone_name:
        text += f" {zone.zone_name}"
    return text
