"""
martian time zones. each zone pairs an offset from Coordinated Mars Time with
an epoch for numbering sols, so a zone defines both a mission's local time
and its mission sol count.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TimeZoneProfile:
    start_sol: int  # sol 0, in MSD
    offset: float  # martian seconds ahead of MTC
    epoch_name: str  # name at beginning of formatted string
    zone_name: str  # name at end of formatted string
    digits: int  # minimum digits to display in sol


# Coordinated Mars Time (also AMT, AAT)
MTC = TimeZoneProfile(0, 0.0, "MSD", "MTC", 5)

# Mars Pathfinder (unofficial epoch name). Sol 1 = 1997-07-04 16:56:55,
# AAT-02:13:01
PATHFINDER = TimeZoneProfile(43904, -7981.0, "MP", "", 4)

# Mars Exploration Rover A. Sol 1 = 2004-01-04 04:35, AAT+11:00:04
SPIRIT = TimeZoneProfile(46215, 39840.0, "MER-A", "", 4)

# Mars Exploration Rover B. Sol 1 = 2004-01-25 05:05, AAT-01:01:06
OPPORTUNITY = TimeZoneProfile(46235, -3666.0, "MER-B", "", 4)

# Phoenix (unofficial epoch name). Sol 0 = 2008-05-25 23:53:52,
# AAT-08:26:36, LMST at 233.35 E
PHOENIX = TimeZoneProfile(47776, -30396.0, "MPh", "", 4)

# Mars Science Laboratory. Sol 0 = 2012-08-05 05:51,
# AAT+09:09:41.736, LMST at 137.4239 E
CURIOSITY = TimeZoneProfile(49269, 32981.736, "MSL", "", 4)

TIME_ZONES: Mapping[str, TimeZoneProfile] = MappingProxyType(
    {
        "mtc": MTC,
        "pathfinder": PATHFINDER,
        "spirit": SPIRIT,
        "opportunity": OPPORTUNITY,
        "phoenix": PHOENIX,
        "curiosity": CURIOSITY,
    }
)


def get_zone(
    name: str, zones: Mapping[str, TimeZoneProfile] = TIME_ZONES
) -> TimeZoneProfile:
    """
    look up a zone by registry key (case-insensitive), or failing that, by
    epoch name if exactly one zone uses it.
    """
    if name.lower() in zones:
        return zones[name.lower()]
    matches = [
        zone for zone in zones.values()
        if zone.epoch_name.lower() == name.lower()
    ]
    if len(matches) == 1:
        return matches[0]
    raise KeyError(
        f"unknown time zone {name}; known zones are {', '.join(zones)}"
    )
