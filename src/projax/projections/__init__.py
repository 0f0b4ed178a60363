"""Coordinate systems and map projections.

Every system implements ``to_xyz`` and ``from_xyz`` against geocentric
Cartesian coordinates:

- **Geographic**: ``[lon, lat, h]`` pass-through
- **Transverse Mercator**: generic, plus the ``utm`` and ``gauss_kruger``
  zone grids
- **Mercator** and **Web Mercator**
- **Lambert Conformal Conic**: one or two standard parallels
- **Albers Equal-Area Conic**
- **Equidistant Conic**
"""

from ._base import CoordinateSystem, Geographic, transform
from .albers import AlbersEqualAreaConic
from .equidistant_conic import EquidistantConic
from .lambert import LambertConformalConic1SP, LambertConformalConic2SP
from .mercator import Mercator, WebMercator
from .transverse_mercator import TransverseMercator, gauss_kruger, utm

__all__ = [
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
