"""
leap-second table handling: reading the IERS / NIST `leap-seconds.list`
file, and resolving TAI - UTC for arbitrary UTC instants.

the file format is line-oriented:

    #$ 3676924800                     <- when the list was updated (NTP)
    #@ 3928521600                     <- when the list expires (NTP)
    2272060800  10  # 1 Jan 1972      <- NTP instant, TAI - UTC from then on

NTP instants are seconds since 1900-01-01; everything in this module is
converted to Unix seconds (since 1970-01-01) at load time.
"""
from dataclasses import dataclass
from functools import cached_property
import datetime as dt
import logging
from pathlib import Path
from typing import Iterable, Iterator, Union
import warnings

from more_itertools import is_sorted
import numpy as np
import pandas as pd

from marsclock.config import leap_seconds_path

NTP_UNIX_OFFSET = 2208988800
"""seconds between 1900-01-01 (NTP epoch) and 1970-01-01 (Unix epoch)"""

logger = logging.getLogger(__name__)


class LeapTableFormatError(ValueError):
    """a leap-second file contains a line we can't interpret."""


class EmptyTableError(ValueError):
    """an offset was requested from a table with no entries."""


class StaleTableWarning(UserWarning):
    """
    an offset was requested for an instant past the table's expiration date.
    the returned value is the last known offset and may be wrong.
    """


class PreRangeAdvisory(UserWarning):
    """
    an offset was requested for an instant before the first leap second
    entry (i.e., before 1972). the returned value of 0 is approximate.
    """


def ntp_to_unix(ntp_time: int) -> int:
    """seconds since 1900-01-01 to seconds since 1970-01-01"""
    return ntp_time - NTP_UNIX_OFFSET


@dataclass(frozen=True)
class LeapEntry:
    effective_at: int  # unix seconds, UTC
    offset: int  # TAI - UTC from effective_at onward


@dataclass(frozen=True)
class LeapTable:
    """
    immutable leap-second table. if the table ever needs to be refreshed,
    build a new one rather than modifying this one.
    """
    updated: int
    expires: int
    entries: tuple[LeapEntry, ...] = ()

    def __post_init__(self):
        if not is_sorted(
            (entry.effective_at for entry in self.entries), strict=True
        ):
            raise LeapTableFormatError(
                "leap second entries must be strictly increasing in time"
            )

    def __len__(self):
        return len(self.entries)

    @cached_property
    def times(self) -> np.ndarray:
        return np.array([e.effective_at for e in self.entries], dtype=np.int64)

    @cached_property
    def offsets(self) -> np.ndarray:
        return np.array([e.offset for e in self.entries], dtype=np.int64)


def _parse_int(field: str, lineno: int, line: str) -> int:
    try:
        return int(field)
    except ValueError:
        raise LeapTableFormatError(
            f"line {lineno}: can't read {field!r} as an integer: {line!r}"
        ) from None


def _parse_header_value(lineno: int, line: str) -> int:
    fields = line[2:].split()
    if len(fields) == 0:
        raise LeapTableFormatError(f"line {lineno}: missing value: {line!r}")
    return ntp_to_unix(_parse_int(fields[0], lineno, line))


def _parse_entry(lineno: int, line: str) -> LeapEntry:
    # anything after a '#' on a data line is a human-readable date
    fields = line.split("#", 1)[0].split()
    if len(fields) < 2:
        raise LeapTableFormatError(
            f"line {lineno}: expected '<ntp time> <offset>': {line!r}"
        )
    return LeapEntry(
        ntp_to_unix(_parse_int(fields[0], lineno, line)),
        _parse_int(fields[1], lineno, line),
    )


def parse_leap_lines(lines: Iterable[str]) -> LeapTable:
    """
    build a LeapTable from the lines of a leap-seconds file. malformed data
    or header lines raise LeapTableFormatError rather than being skipped.
    """
    updated, expires, entries = None, None, []
    for lineno, line in enumerate(lines, start=1):
        if line.startswith("#$"):
            updated = _parse_header_value(lineno, line)
        elif line.startswith("#@"):
            expires = _parse_header_value(lineno, line)
        elif line[:1].isdigit():
            entries.append(_parse_entry(lineno, line))
    if updated is None:
        raise LeapTableFormatError("no '#$' (last updated) line found")
    if expires is None:
        raise LeapTableFormatError("no '#@' (expiration) line found")
    return LeapTable(updated, expires, tuple(entries))


def _decode_lines(stream: Iterable[bytes]) -> Iterator[str]:
    for lineno, raw in enumerate(stream, start=1):
        try:
            yield raw.decode("ascii")
        except UnicodeDecodeError:
            raise LeapTableFormatError(
                f"line {lineno}: not ASCII text: {raw!r}"
            ) from None


def load_leap_table(path: Union[str, Path, None] = None) -> LeapTable:
    """
    read a leap-seconds file. if path is not specified, use the configured
    default location (see marsclock.config). OSErrors from opening the file
    are not caught.
    """
    path = leap_seconds_path() if path is None else Path(path)
    with open(path, "rb") as stream:
        table = parse_leap_lines(_decode_lines(stream))
    logger.debug(
        "loaded %d leap second entries from %s (updated %s, expires %s)",
        len(table),
        path,
        timestr(table.updated),
        timestr(table.expires),
    )
    return table


def is_expired(table: LeapTable, instant: float) -> bool:
    return instant > table.expires


def offset(instant: float, table: LeapTable) -> int:
    """
    return TAI - UTC at the given UTC instant (unix seconds). this is
    authoritative only from the first entry (1972) until the table expires;
    outside that range we warn and return our best guess.
    """
    if len(table) == 0:
        raise EmptyTableError("leap second table has no entries")
    if instant < table.entries[0].effective_at:
        warnings.warn(
            f"{timestr(instant)} precedes the first leap second entry; "
            f"assuming TAI - UTC = 0",
            PreRangeAdvisory,
            stacklevel=2,
        )
        return 0
    if is_expired(table, instant):
        warnings.warn(
            f"leap second table expired at {timestr(table.expires)}; "
            f"offset for {timestr(instant)} may be wrong",
            StaleTableWarning,
            stacklevel=2,
        )
    if instant >= table.entries[-1].effective_at:
        return table.entries[-1].offset
    # index of the last entry with effective_at <= instant
    ix = np.searchsorted(table.times, instant, side="right") - 1
    return int(table.offsets[ix])


def timestr(instant: float) -> str:
    """unix seconds to an ISO 8601 UTC string"""
    return dt.datetime.fromtimestamp(instant, dt.timezone.utc).isoformat(
        sep=" ", timespec="seconds"
    )


def describe_table(table: LeapTable) -> pd.DataFrame:
    """
    tabulate a LeapTable's entries with human-readable UTC timestamps.
    the table's update and expiration times are stored in DataFrame.attrs.
    """
    frame = pd.DataFrame(
        {
            "utc": pd.to_datetime(table.times, unit="s", utc=True),
            "tai_minus_utc": table.offsets,
        }
    )
    frame.attrs["updated"] = timestr(table.updated)
    frame.attrs["expires"] = timestr(table.expires)
    return frame
