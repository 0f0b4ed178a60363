"""Mercator projections.

- :class:`Mercator`: ellipsoidal normal-aspect Mercator (Snyder eqs. 7-6,
  7-7).  The inverse recovers latitude from the isometric parameter
  ``t = exp(-y / (k0 a))`` with a fixed five-pass fixed-point iteration.
- :class:`WebMercator`: the spherical "Pseudo-Mercator" used by web map
  tiles, which projects geodetic latitude with the spherical formulas on
  radius ``a``.  Closed form in both directions.

Both are undefined at latitude +/-90 deg, where the northing diverges.

References:
    1. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, p. 38-47.
    2. IOGP, *Geomatics Guidance Note 7-2*, method 1024 (Popular
       Visualisation Pseudo Mercator).
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from projax.constants import DEG2RAD
from projax.ellipsoid import Ellipsoid
from projax.projections._base import CoordinateSystem
from projax.projections._series import esin_ratio, latitude_from_conformal_t


@dataclass(frozen=True)
class Mercator(CoordinateSystem):
    """Ellipsoidal Mercator projection ``[easting, northing, h]``.

    Args:
        lon0: Longitude of the natural origin. Units: *deg*
        scale: Scale factor on the equator. Dimensionless.
        false_easting: Units: *m*
        false_northing: Units: *m*
    """

    lon0: float = 0.0
    scale: float = 1.0
    false_easting: float = 0.0
    false_northing: float = 0.0

    def _to_geographic(self, east, north, h, ellipsoid: Ellipsoid):
        ka = self.scale * ellipsoid.a
        t = jnp.exp(-(north - self.false_northing) / ka)
        lat = latitude_from_conformal_t(t, ellipsoid)
        lon = (east - self.false_easting) / ka + self.lon0 * DEG2RAD
        return lon, lat, h

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        ka = self.scale * ellipsoid.a
        e = ellipsoid.e
        sin_lat = jnp.sin(lat)

        east = self.false_easting + ka * (lon - self.lon0 * DEG2RAD)
        north = self.false_northing + ka / 2.0 * jnp.log(
            (1.0 + sin_lat) / (1.0 - sin_lat) * esin_ratio(lat, e) ** e
        )
        return east, north, h


@dataclass(frozen=True)
class WebMercator(CoordinateSystem):
    """Spherical (Pseudo) Mercator ``[easting, northing, h]`` on radius ``a``.

    Examples:
        ```python
        from projax.projections import WebMercator
        WebMercator().from_xyz([6378137.0, 0.0, 0.0])  # [0, 0, 0]
        ```
    """

    def _to_geographic(self, east, north, h, ellipsoid: Ellipsoid):
        lon = east / ellipsoid.a
        lat = 2.0 * jnp.arctan(jnp.exp(north / ellipsoid.a)) - jnp.pi / 2.0
        return lon, lat, h

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        east = ellipsoid.a * lon
        north = ellipsoid.a * jnp.log(jnp.tan(jnp.pi / 4.0 + lat / 2.0))
        return east, north, h
