import os
from pathlib import Path

LEAP_SECONDS_ENV = "MARSCLOCK_LEAP_SECONDS"
"""environment variable that overrides the leap-seconds file location"""

DEFAULT_LEAP_SECONDS_PATH = Path("~/.marsTime/leap-seconds")

DEFAULT_ZONE = "curiosity"


def leap_seconds_path() -> Path:
    """
    where to look for the leap-seconds file: $MARSCLOCK_LEAP_SECONDS if it's
    set and nonempty, otherwise ~/.marsTime/leap-seconds.
    """
    override = os.environ.get(LEAP_SECONDS_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_LEAP_SECONDS_PATH.expanduser()
