"""
mars orbital parameters as functions of days since J2000 (TT).

equation numbers refer to the Mars24 algorithm page:
    https://www.giss.nasa.gov/tools/mars24/help/algorithm.html
itself based on Allison & McEwen 2000. all angles going in and out of these
functions are in degrees; we only convert to radians to take sines / cosines.
"""
from itertools import starmap
from math import cos, radians, sin, pi
from typing import Callable


def mean_anomaly(dt_j2000: float) -> float:
    """eq. B-1"""
    return 19.3780 + 0.52402075 * dt_j2000


def fictitious_mean_sun(dt_j2000: float) -> float:
    """eq. B-2: angle of the fictitious mean sun"""
    return 270.3863 + 0.52403840 * dt_j2000


# table B-3 (truncated): amplitude (deg), period (julian years), phase (deg)
PERTURBATION_TABLE = (
    (0.0071, 2.2353, 49.409),
    (0.0057, 2.7543, 168.173),
    (0.0039, 1.1177, 191.837),
    (0.0037, 15.7866, 21.736),
    (0.0021, 2.1354, 15.704),
    (0.0020, 2.4694, 95.528),
    (0.0018, 32.8493, 49.095),
)

# one revolution per julian year, in radians per day
RADIANS_PER_DAY = 2 * pi / 365.25


def perturbation_factory(
    dt_j2000: float
) -> Callable[[float, float, float], float]:
    """
    generate the interior of the perturbation summation
    """

    def calculate_perturbation(a: float, tau: float, phi: float) -> float:
        return a * cos(RADIANS_PER_DAY * dt_j2000 / tau) + phi

    return calculate_perturbation


def pbs(dt_j2000: float) -> float:
    """eq. B-3: sum of planetary perturbations (deg)"""
    return sum(starmap(perturbation_factory(dt_j2000), PERTURBATION_TABLE))


def equation_of_center(dt_j2000: float) -> float:
    """eq. B-4: true anomaly minus mean anomaly (deg)"""
    m = radians(mean_anomaly(dt_j2000))
    return sum([
        (10.691 + 3e-7 * dt_j2000) * sin(m),
        0.623 * sin(2 * m),
        0.050 * sin(3 * m),
        0.005 * sin(4 * m),
        0.0005 * sin(5 * m),
        pbs(dt_j2000)
    ])


def l_s(dt_j2000: float) -> float:
    """eq. B-5: areocentric solar longitude (deg)"""
    return fictitious_mean_sun(dt_j2000) + equation_of_center(dt_j2000)


def eot(dt_j2000: float) -> float:
    """eq. C-1: equation of time (deg)"""
    l_s_0 = radians(l_s(dt_j2000))
    return sum([
        2.861 * sin(2 * l_s_0),
        -0.071 * sin(4 * l_s_0),
        0.002 * sin(6 * l_s_0),
        -1 * equation_of_center(dt_j2000)
    ])


def heliocentric_distance(dt_j2000: float) -> float:
    """eq. D-2: distance between mars and the sun (AU)"""
    m = radians(mean_anomaly(dt_j2000))
    return 1.523679 * sum([
        1.00436,
        -0.09309 * cos(m),
        -0.004336 * cos(2 * m),
        -0.00031 * cos(3 * m),
        -0.00003 * cos(4 * m)
    ])
