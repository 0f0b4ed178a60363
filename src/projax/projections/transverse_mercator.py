"""Transverse Mercator projection, UTM and Gauss-Krüger grids.

Implements the ellipsoidal Transverse Mercator series of Snyder (eqs. 8-9
to 8-25): a 6th-order expansion in the longitude difference for the
forward projection and, for the inverse, the footpoint latitude from the
non-iterative third-flattening series followed by a 6th-order expansion in
the normalised easting.

The series is accurate to about a millimetre within 3-4 degrees of the
central meridian and degrades quickly beyond that.  It is undefined at the
poles, where ``cos(lat) = 0``.

References:
    1. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, p. 57-64.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import jax.numpy as jnp

from projax.constants import DEG2RAD
from projax.coordinates.geographic import prime_vertical_radius
from projax.ellipsoid import Ellipsoid
from projax.projections._base import CoordinateSystem
from projax.projections._series import footpoint_latitude, meridian_arc

logger = logging.getLogger(__name__)

UTM_SCALE = 0.9996
UTM_FALSE_EASTING = 500000.0
UTM_FALSE_NORTHING_SOUTH = 10000000.0


@dataclass(frozen=True)
class TransverseMercator(CoordinateSystem):
    """Transverse Mercator projection ``[easting, northing, h]``.

    Args:
        lon0: Longitude of the central meridian. Units: *deg*
        lat0: Latitude of origin. Units: *deg*
        scale: Scale factor on the central meridian. Dimensionless.
        false_easting: Units: *m*
        false_northing: Units: *m*
    """

    lon0: float = 0.0
    lat0: float = 0.0
    scale: float = 1.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def _to_geographic(self, east, north, h, ellipsoid: Ellipsoid):
        k0 = self.scale
        ep2 = ellipsoid.ep2
        e2 = ellipsoid.e2
        east = east - self.false_easting
        north = north - self.false_northing

        M = meridian_arc(self.lat0 * DEG2RAD, ellipsoid) + north / k0
        lat1 = footpoint_latitude(M, ellipsoid)

        sin1 = jnp.sin(lat1)
        cos1 = jnp.cos(lat1)
        tan1 = jnp.tan(lat1)
        C1 = ep2 * cos1 * cos1
        T1 = tan1 * tan1
        N1 = prime_vertical_radius(lat1, ellipsoid)
        R1 = ellipsoid.a * (1.0 - e2) / (1.0 - e2 * sin1 * sin1) ** 1.5
        D = east / (N1 * k0)

        lat = lat1 - (N1 * tan1 / R1) * (
            D**2 / 2.0
            - (5.0 + 3.0 * T1 + 10.0 * C1 - 4.0 * C1**2 - 9.0 * ep2) * D**4 / 24.0
            + (61.0 + 90.0 * T1 + 298.0 * C1 + 45.0 * T1**2 - 252.0 * ep2 - 3.0 * C1**2)
            * D**6
            / 720.0
        )
        lon = self.lon0 * DEG2RAD + (
            D
            - (1.0 + 2.0 * T1 + C1) * D**3 / 6.0
            + (5.0 - 2.0 * C1 + 28.0 * T1 - 3.0 * C1**2 + 8.0 * ep2 + 24.0 * T1**2)
            * D**5
            / 120.0
        ) / cos1
        return lon, lat, h

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        k0 = self.scale
        ep2 = ellipsoid.ep2

        cos_lat = jnp.cos(lat)
        tan_lat = jnp.tan(lat)
        T = tan_lat * tan_lat
        C = ep2 * cos_lat * cos_lat
        N = prime_vertical_radius(lat, ellipsoid)
        A = (lon - self.lon0 * DEG2RAD) * cos_lat

        east = self.false_easting + k0 * N * (
            A
            + (1.0 - T + C) * A**3 / 6.0
            + (5.0 - 18.0 * T + T**2 + 72.0 * C - 58.0 * ep2) * A**5 / 120.0
        )
        north = self.false_northing + k0 * (
            meridian_arc(lat, ellipsoid)
            - meridian_arc(self.lat0 * DEG2RAD, ellipsoid)
            + N
            * tan_lat
            * (
                A**2 / 2.0
                + (5.0 - T + 9.0 * C + 4.0 * C**2) * A**4 / 24.0
                + (61.0 - 58.0 * T + T**2 + 600.0 * C - 330.0 * ep2) * A**6 / 720.0
            )
        )
        return east, north, h


def utm(zone: int, northern: bool = True) -> TransverseMercator:
    """Universal Transverse Mercator grid for a 6-degree zone.

    Args:
        zone: UTM zone number, 1-60.  Out-of-range zones are evaluated as
            given after logging a warning.
        northern: ``True`` for the northern hemisphere (false northing 0),
            ``False`` for the southern (false northing 10,000 km).

    Returns:
        TransverseMercator: Central meridian ``6 * zone - 183``, scale 0.9996,
            false easting 500 km.

    Examples:
        ```python
        from projax.projections import Geographic, transform, utm
        transform([3.0, 0.0, 0.0], Geographic(), utm(31))  # [500000, 0, 0]
        ```
    """
    if not 1 <= zone <= 60:
        logger.warning("UTM zone %s is outside 1-60; evaluating as given", zone)
    return TransverseMercator(
        lon0=zone * 6.0 - 183.0,
        lat0=0.0,
        scale=UTM_SCALE,
        false_easting=UTM_FALSE_EASTING,
        false_northing=0.0 if northern else UTM_FALSE_NORTHING_SOUTH,
    )


def gauss_kruger(zone: int) -> TransverseMercator:
    """Gauss-Krüger grid for a 3-degree zone.

    The zone number is prefixed to the easting: false easting is
    ``zone * 1,000,000 + 500,000``.

    Args:
        zone: Zone number.  Zones outside 1-120 log a warning.

    Returns:
        TransverseMercator: Central meridian ``3 * zone``, scale 1.
    """
    if not 1 <= zone <= 120:
        logger.warning("Gauss-Krüger zone %s is outside 1-120; evaluating as given", zone)
    return TransverseMercator(
        lon0=zone * 3.0,
        lat0=0.0,
        scale=1.0,
        false_easting=zone * 1000000.0 + 500000.0,
        false_northing=0.0,
    )
