import datetime as dt
from functools import partial

from hypothesis import given
import pytest

from marsclock.leapsecs import load_leap_table, offset
from marsclock.timescales import (
    j2k_to_tai,
    j2k_to_tt,
    tai_to_j2k,
    tai_to_tt,
    timeval_to_float,
    to_unix,
    tt_to_j2k,
    tt_to_tai,
    utc_to_tai,
)
from marsclock.tests.utilz.utilz import LEAP_FILE, j2000_days, unix_seconds

J2000_UNIX_UTC = 946727935.816  # 2000-01-01 11:58:55.816 UTC


def test_j2000_epoch():
    table = load_leap_table(LEAP_FILE)
    tai = utc_to_tai(J2000_UNIX_UTC, partial(offset, table=table))
    assert tai == pytest.approx(J2000_UNIX_UTC + 32)
    assert tai_to_j2k(tai) == pytest.approx(0, abs=1e-9)
    assert tt_to_j2k(tai_to_tt(tai)) == pytest.approx(0, abs=1e-9)


def test_fixed_offsets():
    assert tai_to_tt(0) == 32.184
    assert tt_to_tai(32.184) == 0
    assert j2k_to_tt(0) == 946728000
    assert tt_to_j2k(946728000) == 0


@given(x=unix_seconds)
def test_tai_tt_round_trip(x):
    assert tt_to_tai(tai_to_tt(x)) == pytest.approx(x, rel=1e-12, abs=1e-6)


@given(x=unix_seconds)
def test_tai_j2k_round_trip(x):
    assert j2k_to_tai(tai_to_j2k(x)) == pytest.approx(x, rel=1e-12, abs=1e-5)


@given(x=j2000_days)
def test_j2k_tai_round_trip(x):
    assert tai_to_j2k(j2k_to_tai(x)) == pytest.approx(x, abs=1e-9)
    assert tt_to_j2k(j2k_to_tt(x)) == pytest.approx(x, abs=1e-9)


def test_timeval_to_float():
    assert timeval_to_float(1344146400, 250000) == 1344146400.25


class TestToUnix:
    def test_number(self):
        assert to_unix(1344146400) == 1344146400.0

    def test_naive_datetime_is_utc(self):
        assert to_unix(dt.datetime(2012, 8, 6, 5, 17, 57)) == 1344230277

    def test_aware_datetime(self):
        eastern = dt.timezone(dt.timedelta(hours=-5))
        assert to_unix(dt.datetime(2012, 8, 6, 0, 17, 57, tzinfo=eastern)) \
               == 1344230277

    def test_string(self):
        assert to_unix("2012-08-06T05:17:57") == 1344230277
        assert to_unix("2012-08-06 00:17:57 EST") == 1344230277

    def test_now(self):
        assert to_unix() > 1344230277
