"""Polar-coordinate plumbing shared by the conic projections.

A conic projection maps a point to polar coordinates ``(rho, theta)``
around the cone apex, with ``theta = n * (lon - lon0)``.  Only the radius
function ``rho(lat)`` differs between the Lambert, Albers and Equidistant
families.
"""

from __future__ import annotations

import jax.numpy as jnp


def polar_to_grid(rho, rho0, n, dlon, false_easting, false_northing):
    """Grid ``(easting, northing)`` from the radius and longitude difference."""
    theta = n * dlon
    east = false_easting + rho * jnp.sin(theta)
    north = false_northing + rho0 - rho * jnp.cos(theta)
    return east, north


def grid_to_polar(east, north, rho0, n, false_easting, false_northing):
    """Signed radius and ``theta / n`` from grid coordinates.

    The radius carries the sign of the cone constant so that cones opening
    toward the south pole (``n < 0``) invert correctly.
    """
    x = east - false_easting
    y = rho0 - (north - false_northing)
    sign = jnp.sign(n)
    rho = sign * jnp.sqrt(x * x + y * y)
    theta = jnp.arctan2(sign * x, sign * y)
    return rho, theta / n
