"""
projax converts between geocentric Cartesian coordinates and geographic or
projected map coordinates on arbitrary reference ellipsoids, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    WGS84_a,
    WGS84_f,
)

from .config import (
    set_dtype,
    get_dtype,
    set_default_ellipsoid,
    get_default_ellipsoid,
    get_roundtrip_tolerance,
)

from .ellipsoid import (
    Ellipsoid,
    WGS84,
    GRS80,
    WGS72,
    BESSEL1841,
    KRASSOWSKY1940,
    INTERNATIONAL1924,
    CLARKE1866,
    AIRY1830,
)

from .coordinates import (
    position_geographic_to_xyz,
    position_xyz_to_geographic,
)

from .projections import (
    CoordinateSystem,
    Geographic,
    transform,
    TransverseMercator,
    utm,
    gauss_kruger,
    Mercator,
    WebMercator,
    LambertConformalConic1SP,
    LambertConformalConic2SP,
    AlbersEqualAreaConic,
    EquidistantConic,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "WGS84_a",
    "WGS84_f",
    # Config
    "set_dtype",
    "get_dtype",
    "set_default_ellipsoid",
    "get_default_ellipsoid",
    "get_roundtrip_tolerance",
    # Ellipsoids
    "Ellipsoid",
    "WGS84",
    "GRS80",
    "WGS72",
    "BESSEL1841",
    "KRASSOWSKY1940",
    "INTERNATIONAL1924",
    "CLARKE1866",
    "AIRY1830",
    # Coordinates
    "position_geographic_to_xyz",
    "position_xyz_to_geographic",
    # Projections
    "CoordinateSystem",
    "Geographic",
    "transform",
    "TransverseMercator",
    "utm",
    "gauss_kruger",
    "Mercator",
    "WebMercator",
    "LambertConformalConic1SP",
    "LambertConformalConic2SP",
    "AlbersEqualAreaConic",
    "EquidistantConic",
]
