"""Projection of WGS84 coordinates onto the UTM grid."""

from __future__ import annotations

import math
from collections.abc import Sequence

Location = tuple[float, float]

_A = 6378137.0
_F = 1 / 298.257223563
_K0 = 0.9996
_FALSE_EASTING = 500000.0

_N = _F / (2 - _F)
_E = math.sqrt(_F * (2 - _F))
_RECTIFYING_RADIUS = _A / (1 + _N) * (1 + _N**2 / 4 + _N**4 / 64 + _N**6 / 256)
_ALPHA = (
    _N / 2 - 2 * _N**2 / 3 + 5 * _N**3 / 16 + 41 * _N**4 / 180,
    13 * _N**2 / 48 - 3 * _N**3 / 5 + 557 * _N**4 / 1440,
    61 * _N**3 / 240 - 103 * _N**4 / 140,
    49561 * _N**4 / 161280,
)


def utm_zone(longitude: float) -> int:
    """Return the UTM zone number for a longitude in degrees."""
    return math.floor((longitude + 180) / 6) + 1


def _central_meridian(zone: int) -> float:
    return (zone - 1) * 6 - 180 + 3


def _project(longitude: float, latitude: float, zone: int) -> Location:
    phi = math.radians(latitude)
    lam = math.radians(longitude - _central_meridian(zone))

    sin_phi = math.sin(phi)
    t = math.sinh(math.atanh(sin_phi) - _E * math.atanh(_E * sin_phi))
    xi_prime = math.atan2(t, math.cos(lam))
    eta_prime = math.atanh(math.sin(lam) / math.sqrt(1 + t * t))

    xi = xi_prime
    eta = eta_prime
    for j, alpha in enumerate(_ALPHA, start=1):
        xi += alpha * math.sin(2 * j * xi_prime) * math.cosh(2 * j * eta_prime)
        eta += alpha * math.cos(2 * j * xi_prime) * math.sinh(2 * j * eta_prime)

    easting = _FALSE_EASTING + _K0 * _RECTIFYING_RADIUS * eta
    northing = _K0 * _RECTIFYING_RADIUS * xi
    return easting, northing


def transform_locations(gps_locations: Sequence[Location]) -> list[Location]:
    """Project ``(longitude, latitude)`` pairs to ``(easting, northing)`` in metres.

    All points use the northern-hemisphere UTM zone of the first point, so
    points south of the equator get negative northings.
    """
    if not gps_locations:
        raise ValueError("at least one location is needed to choose the UTM zone")
    zone = utm_zone(gps_locations[0][0])
    return [_project(longitude, latitude, zone) for longitude, latitude in gps_locations]