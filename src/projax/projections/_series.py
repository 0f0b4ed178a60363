"""Auxiliary latitude functions shared by the projection families.

- :func:`meridian_arc` and :func:`footpoint_latitude`: the meridian
  distance series and its non-iterative inverse (Transverse Mercator,
  Equidistant Conic);
- :func:`conformal_t` and :func:`latitude_from_conformal_t`: the
  isometric parameter and its fixed-iteration inverse (Mercator, Lambert);
- :func:`authalic_q` and :func:`latitude_from_authalic_q`: the authalic
  parameter and its fixed-iteration inverse (Albers);
- :func:`parallel_radius`: ``m = cos(lat) / sqrt(1 - e^2 sin^2(lat))``.

The inverse refinements run exactly :data:`ITERATIONS` times through
``jax.lax.fori_loop``; there is no convergence test.  Each pass reduces the
latitude error by roughly a factor ``e^2``, so five passes leave a residual
well below 1e-10 rad on terrestrial ellipsoids.

All angles are in radians.

References:
    1. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, eqs. 3-21, 3-26, 7-9, 3-12, 3-16, 14-19.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array

from projax.ellipsoid import Ellipsoid

ITERATIONS = 5


def _mu_scale(ellipsoid: Ellipsoid):
    return 1.0 - ellipsoid.e2 / 4.0 - 3.0 * ellipsoid.e4 / 64.0 - 5.0 * ellipsoid.e6 / 256.0


def _atanh_ratio(e, s):
    # atanh(e*s)/e, tending to s on the sphere
    safe_e = jnp.where(e > 0, e, 1.0)
    return jnp.where(e > 0, jnp.arctanh(e * s) / safe_e, s)


def meridian_arc(lat, ellipsoid: Ellipsoid) -> Array:
    """Distance along the meridian from the equator to *lat*. Units: *m*"""
    e2, e4, e6 = ellipsoid.e2, ellipsoid.e4, ellipsoid.e6
    return ellipsoid.a * (
        _mu_scale(ellipsoid) * lat
        - (3.0 * e2 / 8.0 + 3.0 * e4 / 32.0 + 45.0 * e6 / 1024.0) * jnp.sin(2.0 * lat)
        + (15.0 * e4 / 256.0 + 45.0 * e6 / 1024.0) * jnp.sin(4.0 * lat)
        - (35.0 * e6 / 3072.0) * jnp.sin(6.0 * lat)
    )


def footpoint_latitude(M, ellipsoid: Ellipsoid) -> Array:
    """Latitude whose meridian arc equals *M*, by the third-flattening series."""
    ei, ei2, ei3, ei4 = ellipsoid.ei, ellipsoid.ei2, ellipsoid.ei3, ellipsoid.ei4
    mu = M / (ellipsoid.a * _mu_scale(ellipsoid))
    return (
        mu
        + (3.0 * ei / 2.0 - 27.0 * ei3 / 32.0) * jnp.sin(2.0 * mu)
        + (21.0 * ei2 / 16.0 - 55.0 * ei4 / 32.0) * jnp.sin(4.0 * mu)
        + (151.0 * ei3 / 96.0) * jnp.sin(6.0 * mu)
        + (1097.0 * ei4 / 512.0) * jnp.sin(8.0 * mu)
    )


def parallel_radius(lat, ellipsoid: Ellipsoid) -> Array:
    """Radius of the parallel at *lat* divided by ``a``."""
    sin_lat = jnp.sin(lat)
    return jnp.cos(lat) / jnp.sqrt(1.0 - ellipsoid.e2 * sin_lat * sin_lat)


def esin_ratio(lat, e):
    e_sin = e * jnp.sin(lat)
    return (1.0 - e_sin) / (1.0 + e_sin)


def conformal_t(lat, ellipsoid: Ellipsoid) -> Array:
    """Isometric parameter ``t = tan(pi/4 - lat/2) / ((1 - e sin)/(1 + e sin))^(e/2)``."""
    e = ellipsoid.e
    return jnp.tan(jnp.pi / 4.0 - lat / 2.0) / esin_ratio(lat, e) ** (e / 2.0)


def latitude_from_conformal_t(t, ellipsoid: Ellipsoid) -> Array:
    """Invert :func:`conformal_t` with a fixed number of fixed-point passes."""
    e = ellipsoid.e

    def step(_, lat):
        return jnp.pi / 2.0 - 2.0 * jnp.arctan(t * esin_ratio(lat, e) ** (e / 2.0))

    lat0 = jnp.pi / 2.0 - 2.0 * jnp.arctan(t)
    return jax.lax.fori_loop(0, ITERATIONS, step, lat0)


def authalic_q(lat, ellipsoid: Ellipsoid) -> Array:
    """Authalic parameter ``q``; equals ``2 sin(lat)`` on the sphere."""
    e2 = ellipsoid.e2
    sin_lat = jnp.sin(lat)
    return (1.0 - e2) * (
        sin_lat / (1.0 - e2 * sin_lat * sin_lat) + _atanh_ratio(ellipsoid.e, sin_lat)
    )


def latitude_from_authalic_q(q, ellipsoid: Ellipsoid) -> Array:
    """Invert :func:`authalic_q` with a fixed number of additive corrections."""
    e = ellipsoid.e
    e2 = ellipsoid.e2

    def step(_, lat):
        sin_lat = jnp.sin(lat)
        w = 1.0 - e2 * sin_lat * sin_lat
        return lat + w * w / (2.0 * jnp.cos(lat)) * (
            q / (1.0 - e2) - sin_lat / w - _atanh_ratio(e, sin_lat)
        )

    lat0 = jnp.arcsin(q / 2.0)
    return jax.lax.fori_loop(0, ITERATIONS, step, lat0)
