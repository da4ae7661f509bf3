"""
end-to-end conversion from earth (UTC) time to formatted martian time, and
the `marsclock` command-line entry point.
"""
import argparse
import datetime as dt
from functools import partial
import logging
from typing import Callable, Optional, Sequence, Union

from cytoolz import compose

from marsclock.config import DEFAULT_ZONE
from marsclock.leapsecs import (
    LeapTable,
    describe_table,
    load_leap_table,
    offset,
)
from marsclock.msd import j2k_to_msd
from marsclock.soldate import Soldate, soldate_to_string, to_soldate
from marsclock.timescales import tai_to_j2k, to_unix, utc_to_tai
from marsclock.zones import TIME_ZONES, TimeZoneProfile, get_zone

logger = logging.getLogger(__name__)


def msd_converter(table: LeapTable) -> Callable[[float], float]:
    """
    make a function from unix seconds (UTC) to Mars Sol Date that resolves
    leap seconds against `table`
    """
    return compose(
        j2k_to_msd,
        tai_to_j2k,
        partial(utc_to_tai, offset_function=partial(offset, table=table)),
    )


def utc_to_msd(utc: float, table: LeapTable) -> float:
    return msd_converter(table)(utc)


def mars_soldate(
    time: Union[dt.datetime, str, float, None] = None,
    zone: Union[str, TimeZoneProfile] = DEFAULT_ZONE,
    table: Optional[LeapTable] = None,
) -> Soldate:
    if table is None:
        table = load_leap_table()
    if isinstance(zone, str):
        zone = get_zone(zone)
    msd = utc_to_msd(to_unix(time), table)
    logger.debug("MSD %f", msd)
    return to_soldate(msd, zone)


def mars_time(
    time: Union[dt.datetime, str, float, None] = None,
    zone: Union[str, TimeZoneProfile] = DEFAULT_ZONE,
    table: Optional[LeapTable] = None,
) -> str:
    """
    formatted martian time in `zone` at `time` (default now). `time` may be
    anything marsclock.timescales.to_unix accepts. if no leap second table
    is passed, loads one from the configured location.
    """
    return soldate_to_string(mars_soldate(time, zone, table))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marsclock", description="print the current time on Mars"
    )
    parser.add_argument(
        "time",
        nargs="?",
        default=None,
        help="UTC time to convert instead of now, in any format dateutil "
        "understands",
    )
    parser.add_argument(
        "-z", "--zone", default=DEFAULT_ZONE, help="martian time zone"
    )
    parser.add_argument(
        "-l", "--leap-file", default=None, help="leap-seconds file"
    )
    parser.add_argument(
        "--list-zones", action="store_true", help="list known time zones"
    )
    parser.add_argument(
        "--leap-table",
        action="store_true",
        help="print the contents of the leap-seconds file",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if args.list_zones:
        for name, zone in TIME_ZONES.items():
            print(f"{name}: {zone.epoch_name}")
        return 0
    table = load_leap_table(args.leap_file)
    if args.leap_table:
        frame = describe_table(table)
        print(f"updated: {frame.attrs['updated']}")
        print(f"expires: {frame.attrs['expires']}")
        print(frame.to_string(index=False))
        return 0
    print(mars_time(args.time, args.zone, table))
    return 0
