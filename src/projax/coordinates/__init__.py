"""Coordinate transformations.

This sub-module converts between geographic coordinates
``[lon, lat, h]`` on a reference ellipsoid and geocentric Cartesian
coordinates ``[x, y, z]``.
"""

from .geographic import (
    position_geographic_to_xyz,
    position_xyz_to_geographic,
    prime_vertical_radius,
)

__all__ = [
    "position_geographic_to_xyz",
    "position_xyz_to_geographic",
    "prime_vertical_radius",
]
