"""
Mars Sol Date: floating-point sols since 1873-12-29 12:00, the martian
counterpart of the julian date. its fractional part is Coordinated Mars Time.
"""
from marsclock.timescales import tai_to_j2k

# length of a sol in earth days
SOL_RATIO = 1.027491252
MSD_AT_J2K_OFFSET = 44796.0
# empirical correction, sols (see Mars24 eq. C-2)
MSD_CORRECTION = 0.00096
# J2000 + 4.5 days: 2000-01-06 00:00 TT, the reference instant
J2K_REFERENCE = 4.5


def j2k_to_msd(j2k: float) -> float:
    """eq. C-2 (days since J2000 TT to MSD)"""
    return (
        (j2k - J2K_REFERENCE) / SOL_RATIO + MSD_AT_J2K_OFFSET - MSD_CORRECTION
    )


def msd_to_j2k(msd: float) -> float:
    """inverse of j2k_to_msd"""
    return (
        SOL_RATIO * (msd - MSD_AT_J2K_OFFSET + MSD_CORRECTION) + J2K_REFERENCE
    )


def tai_to_msd(tai: float) -> float:
    return j2k_to_msd(tai_to_j2k(tai))


def lmst(msd: float, west_longitude: float) -> float:
    """
    eq. C-3: local mean solar time at a longitude in degrees west,
    expressed as a fractional sol count like MSD
    """
    return msd - west_longitude / 360
