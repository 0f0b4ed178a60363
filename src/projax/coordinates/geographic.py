"""Geographic (ellipsoidal) coordinate transformations.

Converts between geographic coordinates ``[longitude, latitude, height]``
and geocentric Cartesian coordinates ``[x, y, z]`` on an arbitrary
reference ellipsoid.  Every projection in :mod:`projax.projections` routes
through these two transforms.

The forward transformation is closed-form.  The inverse uses a single pass
of Bowring's parametric-latitude formula with no refinement loop: the cost
is fixed and the error is far below a millimetre for terrestrial heights,
degrading only asymptotically at the poles where ``h = p / cos(lat) - N``
becomes indeterminate.

Public functions take and return longitude/latitude in decimal degrees and
heights in metres.  Inputs may carry any leading batch shape ``(..., 3)``.

References:
    1. B. R. Bowring, *Transformation from spatial to geographical
       coordinates*, Survey Review 23(181), 1976.
    2. J. P. Snyder, *Map Projections: A Working Manual*, USGS Professional
       Paper 1395, 1987, p. 13-18.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from projax.config import get_default_ellipsoid, get_dtype
from projax.constants import DEG2RAD, RAD2DEG
from projax.ellipsoid import Ellipsoid


def prime_vertical_radius(lat: ArrayLike, ellipsoid: Ellipsoid) -> Array:
    """Prime vertical radius of curvature ``N = a / sqrt(1 - e^2 sin^2(lat))``.

    Args:
        lat: Geodetic latitude. Units: *rad*
        ellipsoid: Reference ellipsoid.

    Returns:
        Radius of curvature. Units: *m*
    """
    sin_lat = jnp.sin(lat)
    return ellipsoid.a / jnp.sqrt(1.0 - ellipsoid.e2 * sin_lat * sin_lat)


def geographic_to_xyz(lon, lat, h, ellipsoid: Ellipsoid):
    """Component-wise forward transform with angles in radians.

    Returns:
        tuple: ``(x, y, z)`` in *m*.
    """
    N = prime_vertical_radius(lat, ellipsoid)
    cos_lat = jnp.cos(lat)

    x = (N + h) * cos_lat * jnp.cos(lon)
    y = (N + h) * cos_lat * jnp.sin(lon)
    z = (N * ellipsoid.b**2 / ellipsoid.a**2 + h) * jnp.sin(lat)
    return x, y, z


def xyz_to_geographic(x, y, z, ellipsoid: Ellipsoid):
    """Component-wise single-pass Bowring inverse with angles in radians.

    Returns:
        tuple: ``(lon, lat, h)`` with angles in *rad* and height in *m*.
    """
    a = ellipsoid.a
    b = ellipsoid.b
    e2 = ellipsoid.e2

    p = jnp.sqrt(x * x + y * y)
    # Parametric latitude of the point's projection onto the ellipsoid
    T = jnp.arctan2(z * a, p * b)
    sin_t = jnp.sin(T)
    cos_t = jnp.cos(T)
    lat = jnp.arctan2(
        z + e2 * a * a / b * sin_t * sin_t * sin_t,
        p - e2 * a * cos_t * cos_t * cos_t,
    )
    h = p / jnp.cos(lat) - prime_vertical_radius(lat, ellipsoid)
    lon = jnp.arctan2(y, x)
    return lon, lat, h


def position_geographic_to_xyz(
    x_geo: ArrayLike,
    ellipsoid: Ellipsoid | None = None,
) -> Array:
    """Convert geographic position to geocentric Cartesian coordinates.

    Args:
        x_geo: Geographic coordinates ``[lon, lat, h]``, longitude and
            latitude in *deg*, height in *m* above the ellipsoid.  Any
            leading batch shape is accepted.
        ellipsoid: Reference ellipsoid.  Defaults to
            :func:`projax.config.get_default_ellipsoid`.

    Returns:
        jax.Array: Geocentric position ``[x, y, z]`` in *m*.

    Example:
        >>> import jax.numpy as jnp
        >>> from projax.coordinates import position_geographic_to_xyz
        >>> float(position_geographic_to_xyz(jnp.array([0.0, 0.0, 0.0]))[0])
        6378137.0
    """
    if ellipsoid is None:
        ellipsoid = get_default_ellipsoid()
    x_geo = jnp.asarray(x_geo, dtype=get_dtype())

    x, y, z = geographic_to_xyz(
        x_geo[..., 0] * DEG2RAD, x_geo[..., 1] * DEG2RAD, x_geo[..., 2], ellipsoid
    )
    return jnp.stack([x, y, z], axis=-1)


def position_xyz_to_geographic(
    x_xyz: ArrayLike,
    ellipsoid: Ellipsoid | None = None,
) -> Array:
    """Convert geocentric Cartesian coordinates to geographic position.

    Longitude is recovered with ``atan2(y, x)`` and is therefore in
    ``(-180, 180]``.  At the poles (``x = y = 0``) longitude is 0 and the
    height is not meaningful.

    Args:
        x_xyz: Geocentric position ``[x, y, z]`` in *m*.  Any leading batch
            shape is accepted.
        ellipsoid: Reference ellipsoid.  Defaults to
            :func:`projax.config.get_default_ellipsoid`.

    Returns:
        jax.Array: Geographic coordinates ``[lon, lat, h]``, angles in *deg*,
            height in *m*.
    """
    if ellipsoid is None:
        ellipsoid = get_default_ellipsoid()
    x_xyz = jnp.asarray(x_xyz, dtype=get_dtype())

    lon, lat, h = xyz_to_geographic(
        x_xyz[..., 0], x_xyz[..., 1], x_xyz[..., 2], ellipsoid
    )
    return jnp.stack([lon * RAD2DEG, lat * RAD2DEG, h], axis=-1)
