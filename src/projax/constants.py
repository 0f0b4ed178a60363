"""
The `constants` module defines angle conversion factors and the defining
parameters of common reference ellipsoids.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Reference Ellipsoids
"""
Semi-major axis of the WGS84 ellipsoid. Units: *m*

References:

1. NIMA Technical Report TR8350.2
"""
WGS84_a = 6378137.0  # WGS-84 semi-major axis

"""
Flattening of the WGS84 ellipsoid. [dimensionless]

References:

1. NIMA Technical Report TR8350.2
"""
WGS84_f = 1.0 / 298.257223563  # WGS-84 flattening

"""
Semi-major axis and flattening of the GRS80 ellipsoid (ETRS89, NAD83).

References:

1. H. Moritz, *Geodetic Reference System 1980*, Bulletin Géodésique 54, 1980
"""
GRS80_a = 6378137.0
GRS80_f = 1.0 / 298.257222101

"""
Semi-major axis and flattening of the WGS72 ellipsoid.
"""
WGS72_a = 6378135.0
WGS72_f = 1.0 / 298.26

"""
Semi-major axis and flattening of the Bessel 1841 ellipsoid (DHDN, Gauss-Krüger
grids in Germany and Austria).
"""
BESSEL1841_a = 6377397.155
BESSEL1841_f = 1.0 / 299.1528128

"""
Semi-major axis and flattening of the Krassowsky 1940 ellipsoid (Pulkovo 1942).
"""
KRASSOWSKY1940_a = 6378245.0
KRASSOWSKY1940_f = 1.0 / 298.3

"""
Semi-major axis and flattening of the International 1924 (Hayford) ellipsoid.
"""
INTERNATIONAL1924_a = 6378388.0
INTERNATIONAL1924_f = 1.0 / 297.0

"""
Semi-major axis and flattening of the Clarke 1866 ellipsoid (NAD27).
"""
CLARKE1866_a = 6378206.4
CLARKE1866_f = 1.0 / 294.978698214

"""
Semi-major axis and flattening of the Airy 1830 ellipsoid (OSGB36).
"""
AIRY1830_a = 6377563.396
AIRY1830_f = 1.0 / 299.3249646
