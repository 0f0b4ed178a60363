"""Equidistant Conic projection.

Parallels are spaced at their true meridian distance:
``rho(lat) = a G - M(lat)`` with the meridian arc ``M`` of the Transverse
Mercator series.  The inverse recovers latitude from ``M`` with the same
non-iterative footpoint series, unlike the conformal and equal-area conics
which refine latitude iteratively.

References:
    1. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, p. 111-115.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from projax.constants import DEG2RAD
from projax.ellipsoid import Ellipsoid
from projax.projections._base import CoordinateSystem
from projax.projections._conic import grid_to_polar, polar_to_grid
from projax.projections._series import (
    footpoint_latitude,
    meridian_arc,
    parallel_radius,
)


@dataclass(frozen=True)
class EquidistantConic(CoordinateSystem):
    """Equidistant Conic ``[easting, northing, h]``.

    Args:
        lon0: Longitude of the false origin. Units: *deg*
        lat0: Latitude of the false origin. Units: *deg*
        lat1: First standard parallel. Units: *deg*
        lat2: Second standard parallel. Units: *deg*.  When equal to *lat1*
            the cone constant is ``sin(lat1)``.
        false_easting: Units: *m*
        false_northing: Units: *m*
    """

    lon0: float = 0.0
    lat0: float = 0.0
    lat1: float = 30.0
    lat2: float = 60.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def _cone(self, ellipsoid: Ellipsoid):
        """Cone constant ``n`` and ``aG = a (m1 / n) + M1``."""
        lat1 = self.lat1 * DEG2RAD
        lat2 = self.lat2 * DEG2RAD
        m1 = parallel_radius(lat1, ellipsoid)
        M1 = meridian_arc(lat1, ellipsoid)

        if self.lat1 == self.lat2:
            n = jnp.sin(lat1)
        else:
            m2 = parallel_radius(lat2, ellipsoid)
            M2 = meridian_arc(lat2, ellipsoid)
            n = ellipsoid.a * (m1 - m2) / (M2 - M1)

        return n, ellipsoid.a * m1 / n + M1

    def _to_geographic(self, east, north, h, ellipsoid: Ellipsoid):
        n, aG = self._cone(ellipsoid)
        rho0 = aG - meridian_arc(self.lat0 * DEG2RAD, ellipsoid)

        rho, dlon = grid_to_polar(
            east, north, rho0, n, self.false_easting, self.false_northing
        )
        lat = footpoint_latitude(aG - rho, ellipsoid)
        return self.lon0 * DEG2RAD + dlon, lat, h

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        n, aG = self._cone(ellipsoid)
        rho0 = aG - meridian_arc(self.lat0 * DEG2RAD, ellipsoid)
        rho = aG - meridian_arc(lat, ellipsoid)

        east, north = polar_to_grid(
            rho, rho0, n, lon - self.lon0 * DEG2RAD,
            self.false_easting, self.false_northing,
        )
        return east, north, h
