"""Albers Equal-Area Conic projection.

Radius function ``rho(lat) = a * sqrt(C - n q(lat)) / n`` on the authalic
parameter ``q``.  The inverse recovers latitude from ``q`` with five fixed
additive Newton corrections (Snyder eq. 3-16), not a tolerance loop.

On the sphere (``f = 0``) the authalic parameter reduces to ``2 sin(lat)``
and the formulas reduce to the spherical Albers projection.  Latitudes
where ``cos(lat) = 0`` are outside the inverse's domain.

References:
    1. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, p. 98-103.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from projax.constants import DEG2RAD
from projax.ellipsoid import Ellipsoid
from projax.projections._base import CoordinateSystem
from projax.projections._conic import grid_to_polar, polar_to_grid
from projax.projections._series import (
    authalic_q,
    latitude_from_authalic_q,
    parallel_radius,
)


@dataclass(frozen=True)
class AlbersEqualAreaConic(CoordinateSystem):
    """Albers Equal-Area Conic ``[easting, northing, h]``.

    Args:
        lon0: Longitude of the false origin. Units: *deg*
        lat0: Latitude of the false origin. Units: *deg*
        lat1: First standard parallel. Units: *deg*
        lat2: Second standard parallel. Units: *deg*.  When equal to *lat1*
            the cone constant is ``sin(lat1)``.
        false_easting: Units: *m*
        false_northing: Units: *m*

    Examples:
        ```python
        from projax.projections import AlbersEqualAreaConic
        # NAD83 / Conus Albers
        conus = AlbersEqualAreaConic(lon0=-96.0, lat0=23.0, lat1=29.5, lat2=45.5)
        ```
    """

    lon0: float = 0.0
    lat0: float = 0.0
    lat1: float = 30.0
    lat2: float = 60.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def _cone(self, ellipsoid: Ellipsoid):
        """Cone constant ``n`` and ``C = m1^2 + n q1``."""
        lat1 = self.lat1 * DEG2RAD
        lat2 = self.lat2 * DEG2RAD
        m1 = parallel_radius(lat1, ellipsoid)
        q1 = authalic_q(lat1, ellipsoid)

        if self.lat1 == self.lat2:
            n = jnp.sin(lat1)
        else:
            m2 = parallel_radius(lat2, ellipsoid)
            q2 = authalic_q(lat2, ellipsoid)
            n = (m1 * m1 - m2 * m2) / (q2 - q1)

        return n, m1 * m1 + n * q1

    def _rho(self, lat, n, C, ellipsoid: Ellipsoid):
        return ellipsoid.a * jnp.sqrt(C - n * authalic_q(lat, ellipsoid)) / n

    def _to_geographic(self, east, north, h, ellipsoid: Ellipsoid):
        n, C = self._cone(ellipsoid)
        rho0 = self._rho(self.lat0 * DEG2RAD, n, C, ellipsoid)

        rho, dlon = grid_to_polar(
            east, north, rho0, n, self.false_easting, self.false_northing
        )
        q = (C - rho * rho * n * n / ellipsoid.a**2) / n
        lat = latitude_from_authalic_q(q, ellipsoid)
        return self.lon0 * DEG2RAD + dlon, lat, h

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        n, C = self._cone(ellipsoid)
        rho0 = self._rho(self.lat0 * DEG2RAD, n, C, ellipsoid)
        rho = self._rho(lat, n, C, ellipsoid)

        east, north = polar_to_grid(
            rho, rho0, n, lon - self.lon0 * DEG2RAD,
            self.false_easting, self.false_northing,
        )
        return east, north, h
