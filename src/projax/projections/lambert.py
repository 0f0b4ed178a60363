"""Lambert Conformal Conic projections.

- :class:`LambertConformalConic1SP`: one standard parallel, which is also
  the latitude of origin, with a scale factor applied on it.
- :class:`LambertConformalConic2SP`: two standard parallels with unit scale
  on both.  When they coincide the cone constant degenerates to
  ``sin(lat1)`` and the projection equals the 1SP form with scale 1.

The inverse recovers latitude from the isometric parameter with the same
fixed five-pass iteration as :class:`~projax.projections.Mercator`.

Valid away from the pole opposite the cone apex and from the antimeridian
of ``lon0``; at the apex pole ``rho = 0`` and longitude is indeterminate.

References:
    1. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, p. 104-110.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from projax.constants import DEG2RAD
from projax.ellipsoid import Ellipsoid
from projax.projections._base import CoordinateSystem
from projax.projections._conic import grid_to_polar, polar_to_grid
from projax.projections._series import (
    conformal_t,
    latitude_from_conformal_t,
    parallel_radius,
)


class _LambertConformalConic(CoordinateSystem):
    """Forward/inverse shared by both Lambert variants.

    Subclasses supply ``_cone(ellipsoid) -> (n, aFk)`` where ``aFk`` is the
    product ``a * F * k0`` so that ``rho(lat) = aFk * t(lat) ** n``.
    """

    def _cone(self, ellipsoid: Ellipsoid):
        raise NotImplementedError

    def _to_geographic(self, east, north, h, ellipsoid: Ellipsoid):
        n, aFk = self._cone(ellipsoid)
        rho0 = aFk * conformal_t(self.lat0 * DEG2RAD, ellipsoid) ** n

        rho, dlon = grid_to_polar(
            east, north, rho0, n, self.false_easting, self.false_northing
        )
        t = (rho / aFk) ** (1.0 / n)
        lat = latitude_from_conformal_t(t, ellipsoid)
        return self.lon0 * DEG2RAD + dlon, lat, h

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        n, aFk = self._cone(ellipsoid)
        rho0 = aFk * conformal_t(self.lat0 * DEG2RAD, ellipsoid) ** n
        rho = aFk * conformal_t(lat, ellipsoid) ** n

        east, north = polar_to_grid(
            rho, rho0, n, lon - self.lon0 * DEG2RAD,
            self.false_easting, self.false_northing,
        )
        return east, north, h


@dataclass(frozen=True)
class LambertConformalConic1SP(_LambertConformalConic):
    """Lambert Conformal Conic with one standard parallel.

    Args:
        lon0: Longitude of the natural origin. Units: *deg*
        lat0: Latitude of the natural origin and standard parallel.
            Units: *deg*.  Must not be 0 (the cone degenerates to a cylinder).
        scale: Scale factor on the standard parallel. Dimensionless.
        false_easting: Units: *m*
        false_northing: Units: *m*
    """

    lon0: float = 0.0
    lat0: float = 45.0
    scale: float = 1.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def _cone(self, ellipsoid: Ellipsoid):
        lat0 = self.lat0 * DEG2RAD
        n = jnp.sin(lat0)
        F = parallel_radius(lat0, ellipsoid) / (n * conformal_t(lat0, ellipsoid) ** n)
        return n, ellipsoid.a * F * self.scale


@dataclass(frozen=True)
class LambertConformalConic2SP(_LambertConformalConic):
    """Lambert Conformal Conic with two standard parallels.

    Args:
        lon0: Longitude of the false origin. Units: *deg*
        lat0: Latitude of the false origin. Units: *deg*
        lat1: First standard parallel. Units: *deg*
        lat2: Second standard parallel. Units: *deg*
        false_easting: Units: *m*
        false_northing: Units: *m*

    Examples:
        ```python
        from projax.projections import LambertConformalConic2SP
        # RGF93 / Lambert-93
        lambert93 = LambertConformalConic2SP(
            lon0=3.0, lat0=46.5, lat1=49.0, lat2=44.0,
            false_easting=700000.0, false_northing=6600000.0,
        )
        ```
    """

    lon0: float = 0.0
    lat0: float = 0.0
    lat1: float = 30.0
    lat2: float = 60.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def _cone(self, ellipsoid: Ellipsoid):
        lat1 = self.lat1 * DEG2RAD
        lat2 = self.lat2 * DEG2RAD
        m1 = parallel_radius(lat1, ellipsoid)
        t1 = conformal_t(lat1, ellipsoid)

        if self.lat1 == self.lat2:
            n = jnp.sin(lat1)
        else:
            m2 = parallel_radius(lat2, ellipsoid)
            t2 = conformal_t(lat2, ellipsoid)
            n = (jnp.log(m1) - jnp.log(m2)) / (jnp.log(t1) - jnp.log(t2))

        F = m1 / (n * t1**n)
        return n, ellipsoid.a * F
