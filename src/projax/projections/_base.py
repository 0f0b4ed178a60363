"""Coordinate system interface.

Every coordinate system exposes the same pair of operations:

- ``to_xyz(x, ellipsoid=None)``: system coordinates ``[a, b, c]`` to
  geocentric ``[x, y, z]``;
- ``from_xyz(x, ellipsoid=None)``: the inverse.

Subclasses implement a projection by overriding ``_to_geographic`` and
``_from_geographic``, which work component-wise in radians.  The base class
hooks are the geographic pass-through, so a system that defines no
projection behaves exactly like :class:`Geographic`.

Projection parameters are static Python floats on frozen dataclasses.
Python ``if`` branches on them are resolved at JAX trace time, so a bound
``system.to_xyz`` can be handed to ``jax.jit`` or ``jax.vmap`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from projax.config import get_default_ellipsoid, get_dtype
from projax.constants import DEG2RAD, RAD2DEG
from projax.coordinates.geographic import geographic_to_xyz, xyz_to_geographic
from projax.ellipsoid import Ellipsoid


class CoordinateSystem:
    """Base class for all coordinate systems."""

    def _to_geographic(self, a, b, c, ellipsoid: Ellipsoid):
        """System coordinates to ``(lon, lat, h)`` in radians and metres."""
        return a * DEG2RAD, b * DEG2RAD, c

    def _from_geographic(self, lon, lat, h, ellipsoid: Ellipsoid):
        """``(lon, lat, h)`` in radians and metres to system coordinates."""
        return lon * RAD2DEG, lat * RAD2DEG, h

    def to_xyz(self, x: ArrayLike, ellipsoid: Ellipsoid | None = None) -> Array:
        """Convert system coordinates to geocentric Cartesian coordinates.

        Args:
            x: System coordinates, shape ``(..., 3)``.
            ellipsoid: Reference ellipsoid.  Defaults to
                :func:`projax.config.get_default_ellipsoid`.

        Returns:
            jax.Array: Geocentric position ``[x, y, z]`` in *m*, shape
                ``(..., 3)``.
        """
        if ellipsoid is None:
            ellipsoid = get_default_ellipsoid()
        x = jnp.asarray(x, dtype=get_dtype())

        lon, lat, h = self._to_geographic(x[..., 0], x[..., 1], x[..., 2], ellipsoid)
        return jnp.stack(geographic_to_xyz(lon, lat, h, ellipsoid), axis=-1)

    def from_xyz(self, x: ArrayLike, ellipsoid: Ellipsoid | None = None) -> Array:
        """Convert geocentric Cartesian coordinates to system coordinates.

        Args:
            x: Geocentric position ``[x, y, z]`` in *m*, shape ``(..., 3)``.
            ellipsoid: Reference ellipsoid.  Defaults to
                :func:`projax.config.get_default_ellipsoid`.

        Returns:
            jax.Array: System coordinates, shape ``(..., 3)``.
        """
        if ellipsoid is None:
            ellipsoid = get_default_ellipsoid()
        x = jnp.asarray(x, dtype=get_dtype())

        lon, lat, h = xyz_to_geographic(x[..., 0], x[..., 1], x[..., 2], ellipsoid)
        return jnp.stack(self._from_geographic(lon, lat, h, ellipsoid), axis=-1)


@dataclass(frozen=True)
class Geographic(CoordinateSystem):
    """Geographic coordinates ``[lon, lat, h]`` in degrees and metres.

    This is the system used when no projection is configured.

    Examples:
        ```python
        from projax.projections import Geographic
        Geographic().to_xyz([0.0, 0.0, 0.0])  # [6378137, 0, 0]
        ```
    """


def transform(
    x: ArrayLike,
    source: CoordinateSystem,
    target: CoordinateSystem,
    ellipsoid: Ellipsoid | None = None,
) -> Array:
    """Convert coordinates between two systems on the same ellipsoid.

    The conversion passes through geocentric coordinates.  No datum shift is
    applied: both systems are evaluated on *ellipsoid*.

    Args:
        x: Coordinates in *source*, shape ``(..., 3)``.
        source: System the input is expressed in.
        target: System to express the result in.
        ellipsoid: Reference ellipsoid.  Defaults to
            :func:`projax.config.get_default_ellipsoid`.

    Returns:
        jax.Array: Coordinates in *target*, shape ``(..., 3)``.

    Examples:
        ```python
        from projax.projections import Geographic, utm, transform
        transform([3.0, 0.0, 0.0], Geographic(), utm(31))  # [500000, 0, 0]
        ```
    """
    if ellipsoid is None:
        ellipsoid = get_default_ellipsoid()
    return target.from_xyz(source.to_xyz(x, ellipsoid), ellipsoid)
