from pathlib import Path

from hypothesis import strategies as st

from marsclock.leapsecs import LeapEntry, LeapTable

LEAP_FILE = Path(__file__).parent.parent / "data" / "leap-seconds.list"


def boring_reals(min_value: float, max_value: float):
    """
    hypothesis strategy that returns finite floats within a specified range.
    """
    return st.floats(
        allow_infinity=False,
        allow_nan=False,
        allow_subnormal=False,
        min_value=min_value,
        max_value=max_value,
    )


# roughly 1800 to 2200 CE in the units each converter takes
unix_seconds = boring_reals(-5.4e9, 7.3e9)
j2000_days = boring_reals(-73000, 73000)
mars_sol_dates = boring_reals(0, 1e5)


def toy_table(expires: int = 5000) -> LeapTable:
    return LeapTable(
        updated=0,
        expires=expires,
        entries=(
            LeapEntry(1000, 10), LeapEntry(2000, 11), LeapEntry(3000, 12)
        ),
    )
