"""Reference ellipsoid model.

An :class:`Ellipsoid` is defined by its semi-major axis ``a`` and
flattening ``f``.  Every other shape parameter used by the projection
formulas (semi-minor axis, eccentricity powers, second eccentricity,
third flattening powers) is derived from those two numbers.

:class:`Ellipsoid` is a :class:`~typing.NamedTuple`, which JAX treats as a
pytree automatically, so an ellipsoid can be passed straight into
``jax.jit``-compiled functions.

No validation is performed.  Callers are responsible for supplying a
physically meaningful ellipsoid (``a > 0`` and ``0 <= f < 1``); anything
else propagates NaN/Inf through the formulas.
"""

from __future__ import annotations

from typing import NamedTuple

from projax.constants import (
    AIRY1830_a,
    AIRY1830_f,
    BESSEL1841_a,
    BESSEL1841_f,
    CLARKE1866_a,
    CLARKE1866_f,
    GRS80_a,
    GRS80_f,
    INTERNATIONAL1924_a,
    INTERNATIONAL1924_f,
    KRASSOWSKY1940_a,
    KRASSOWSKY1940_f,
    WGS72_a,
    WGS72_f,
    WGS84_a,
    WGS84_f,
)


class Ellipsoid(NamedTuple):
    """Rotational reference ellipsoid.

    Attributes:
        a: Semi-major axis. Units: *m*
        f: Flattening. Dimensionless.

    Examples:
        ```python
        from projax.ellipsoid import Ellipsoid
        ell = Ellipsoid.from_inverse_flattening(6378137.0, 298.257223563)
        ell.b  # 6356752.314245...
        ```
    """

    a: float
    f: float

    @classmethod
    def from_inverse_flattening(cls, a: float, rf: float) -> Ellipsoid:
        """Build an ellipsoid from its inverse flattening ``1/f``.

        An inverse flattening of ``0`` denotes a sphere.
        """
        if rf == 0:
            return cls(a, 0.0)
        return cls(a, 1.0 / rf)

    @property
    def b(self):
        """Semi-minor axis ``a(1 - f)``. Units: *m*"""
        return self.a * (1.0 - self.f)

    @property
    def e2(self):
        """First eccentricity squared ``2f - f^2``."""
        return 2.0 * self.f - self.f * self.f

    @property
    def e(self):
        """First eccentricity."""
        return self.e2**0.5

    @property
    def e4(self):
        return self.e2 * self.e2

    @property
    def e6(self):
        return self.e2 * self.e2 * self.e2

    @property
    def ep2(self):
        """Second eccentricity squared ``e^2 / (1 - e^2)``."""
        return self.e2 / (1.0 - self.e2)

    @property
    def ei(self):
        """Third flattening ``f / (2 - f)``."""
        return self.f / (2.0 - self.f)

    @property
    def ei2(self):
        return self.ei**2

    @property
    def ei3(self):
        return self.ei**3

    @property
    def ei4(self):
        return self.ei**4


WGS84 = Ellipsoid(WGS84_a, WGS84_f)
GRS80 = Ellipsoid(GRS80_a, GRS80_f)
WGS72 = Ellipsoid(WGS72_a, WGS72_f)
BESSEL1841 = Ellipsoid(BESSEL1841_a, BESSEL1841_f)
KRASSOWSKY1940 = Ellipsoid(KRASSOWSKY1940_a, KRASSOWSKY1940_f)
INTERNATIONAL1924 = Ellipsoid(INTERNATIONAL1924_a, INTERNATIONAL1924_f)
CLARKE1866 = Ellipsoid(CLARKE1866_a, CLARKE1866_f)
AIRY1830 = Ellipsoid(AIRY1830_a, AIRY1830_f)
