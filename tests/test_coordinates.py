"""Tests for the projax.coordinates module.

Covers the geographic <-> geocentric transforms: cardinal points, arbitrary
ellipsoids, round-trip accuracy, batched inputs, and JAX compatibility
(jit, vmap).
"""

import itertools

import jax
import jax.numpy as jnp
import pytest

from projax.constants import WGS84_a, WGS84_f
from projax.coordinates import (
    position_geographic_to_xyz,
    position_xyz_to_geographic,
    prime_vertical_radius,
)
from projax.ellipsoid import BESSEL1841, WGS84, Ellipsoid

# ──────────────────────────────────────────────
# Tolerance constants (float64)
# ──────────────────────────────────────────────

_POS_TOL = 1e-6  # metres
_ROUNDTRIP_POS_TOL = 1e-3  # metres
_ROUNDTRIP_DEG_TOL = 1e-7  # degrees

_SPHERE = Ellipsoid(6371000.0, 0.0)
_FLAT = Ellipsoid(6378137.0, 0.009)


class TestGeographicToXYZ:
    def test_origin_equator(self):
        """lon=0, lat=0, h=0 → [a, 0, 0]."""
        x_xyz = position_geographic_to_xyz(jnp.array([0.0, 0.0, 0.0]))

        assert jnp.abs(x_xyz[0] - 6378137.0) < _POS_TOL
        assert jnp.abs(x_xyz[1]) < _POS_TOL
        assert jnp.abs(x_xyz[2]) < _POS_TOL

    def test_90deg_lon(self):
        """lon=90°, lat=0, h=0 → [0, a, 0]."""
        x_xyz = position_geographic_to_xyz(jnp.array([90.0, 0.0, 0.0]))

        assert jnp.abs(x_xyz[0]) < _POS_TOL
        assert jnp.abs(x_xyz[1] - WGS84_a) < _POS_TOL
        assert jnp.abs(x_xyz[2]) < _POS_TOL

    def test_north_pole(self):
        """lon=0, lat=90°, h=0 → [0, 0, b] (semi-minor axis)."""
        x_xyz = position_geographic_to_xyz(jnp.array([0.0, 90.0, 0.0]))
        b = WGS84_a * (1.0 - WGS84_f)

        assert jnp.abs(x_xyz[0]) < _POS_TOL
        assert jnp.abs(x_xyz[1]) < _POS_TOL
        assert jnp.abs(x_xyz[2] - b) < _POS_TOL

    def test_south_pole_with_height(self):
        x_xyz = position_geographic_to_xyz(jnp.array([0.0, -90.0, 1000.0]))
        assert jnp.abs(x_xyz[2] + WGS84.b + 1000.0) < _POS_TOL

    def test_height_along_normal(self):
        """Height displaces the point along the ellipsoid normal."""
        base = position_geographic_to_xyz(jnp.array([30.0, 45.0, 0.0]))
        up = position_geographic_to_xyz(jnp.array([30.0, 45.0, 100.0]))
        assert jnp.abs(jnp.linalg.norm(up - base) - 100.0) < _POS_TOL

    def test_other_ellipsoid(self):
        x_xyz = position_geographic_to_xyz(jnp.array([0.0, 0.0, 0.0]), BESSEL1841)
        assert jnp.abs(x_xyz[0] - BESSEL1841.a) < _POS_TOL

    def test_sphere(self):
        """On a sphere the transform is the spherical one."""
        lon, lat, h = 40.0, -25.0, 500.0
        x_xyz = position_geographic_to_xyz(jnp.array([lon, lat, h]), _SPHERE)
        r = _SPHERE.a + h
        expected = jnp.array([
            r * jnp.cos(jnp.deg2rad(lat)) * jnp.cos(jnp.deg2rad(lon)),
            r * jnp.cos(jnp.deg2rad(lat)) * jnp.sin(jnp.deg2rad(lon)),
            r * jnp.sin(jnp.deg2rad(lat)),
        ])
        assert jnp.allclose(x_xyz, expected, atol=_POS_TOL, rtol=0.0)

    def test_prime_vertical_radius(self):
        assert jnp.abs(prime_vertical_radius(0.0, WGS84) - WGS84.a) < _POS_TOL
        assert jnp.abs(
            prime_vertical_radius(jnp.pi / 2.0, WGS84) - WGS84.a**2 / WGS84.b
        ) < _POS_TOL


class TestXYZToGeographic:
    def test_origin_equator(self):
        geo = position_xyz_to_geographic(jnp.array([WGS84_a, 0.0, 0.0]))

        assert jnp.abs(geo[0]) < _ROUNDTRIP_DEG_TOL
        assert jnp.abs(geo[1]) < _ROUNDTRIP_DEG_TOL
        assert jnp.abs(geo[2]) < _POS_TOL

    def test_negative_x_axis(self):
        """atan2 recovers lon=180° on the negative x-axis."""
        geo = position_xyz_to_geographic(jnp.array([-WGS84_a, 0.0, 0.0]))
        assert jnp.abs(geo[0] - 180.0) < _ROUNDTRIP_DEG_TOL

    def test_positive_y_axis(self):
        """x = 0 gives lon=90° without a division."""
        geo = position_xyz_to_geographic(jnp.array([0.0, WGS84_a + 10.0, 0.0]))
        assert jnp.abs(geo[0] - 90.0) < _ROUNDTRIP_DEG_TOL
        assert jnp.abs(geo[2] - 10.0) < _ROUNDTRIP_POS_TOL

    def test_third_quadrant(self):
        geo = position_xyz_to_geographic(jnp.array([-1e6, -1e6, 6e6]))
        assert jnp.abs(geo[0] + 135.0) < _ROUNDTRIP_DEG_TOL

    def test_north_pole_latitude(self):
        geo = position_xyz_to_geographic(jnp.array([0.0, 0.0, WGS84.b]))
        assert jnp.abs(geo[1] - 90.0) < _ROUNDTRIP_DEG_TOL


class TestGeographicRoundTrip:
    @pytest.mark.parametrize("ellipsoid", [WGS84, BESSEL1841, _SPHERE, _FLAT])
    @pytest.mark.parametrize("h", [-1000.0, 0.0, 9000.0])
    def test_roundtrip_grid(self, ellipsoid, h):
        """Forward → inverse ≈ identity over lon ∈ [-180, 180], lat ∈ [-85, 85]."""
        lons = [-180.0, -135.5, -60.0, -0.25, 0.0, 45.0, 119.9, 180.0]
        lats = [-85.0, -60.0, -33.3, -1.0, 0.0, 12.5, 47.0, 70.0, 85.0]
        pts = jnp.array([[lon, lat, h] for lon, lat in itertools.product(lons, lats)])

        back = position_xyz_to_geographic(
            position_geographic_to_xyz(pts, ellipsoid), ellipsoid
        )

        # Longitude ±180 wraps; compare on the circle
        dlon = (back[:, 0] - pts[:, 0] + 180.0) % 360.0 - 180.0
        assert jnp.max(jnp.abs(dlon)) < _ROUNDTRIP_DEG_TOL
        assert jnp.max(jnp.abs(back[:, 1] - pts[:, 1])) < _ROUNDTRIP_DEG_TOL
        assert jnp.max(jnp.abs(back[:, 2] - pts[:, 2])) < _ROUNDTRIP_POS_TOL

    def test_roundtrip_xyz(self):
        """Inverse → forward ≈ identity in Cartesian space."""
        x_xyz = jnp.array([4e6, -3e6, 3.5e6])
        back = position_geographic_to_xyz(position_xyz_to_geographic(x_xyz))
        assert jnp.allclose(back, x_xyz, atol=_ROUNDTRIP_POS_TOL, rtol=0.0)


class TestBatching:
    def test_leading_shape_preserved(self):
        pts = jnp.zeros((2, 4, 3))
        assert position_geographic_to_xyz(pts).shape == (2, 4, 3)
        assert position_xyz_to_geographic(pts + WGS84_a).shape == (2, 4, 3)

    def test_batch_matches_single(self):
        pts = jnp.array([[10.0, 20.0, 30.0], [-70.0, -40.0, 2000.0]])
        batch = position_geographic_to_xyz(pts)
        for i in range(pts.shape[0]):
            assert jnp.allclose(batch[i], position_geographic_to_xyz(pts[i]))


class TestJAXCompatibility:
    def test_jit_geographic_to_xyz(self):
        x = jnp.array([12.0, 34.0, 100.0])
        eager = position_geographic_to_xyz(x)
        jitted = jax.jit(position_geographic_to_xyz)(x)
        assert jnp.allclose(eager, jitted, atol=1e-6)

    def test_jit_xyz_to_geographic(self):
        x = jnp.array([WGS84_a, 1e6, 0.5e6])
        eager = position_xyz_to_geographic(x)
        jitted = jax.jit(position_xyz_to_geographic)(x)
        assert jnp.allclose(eager, jitted, atol=1e-9)

    def test_jit_ellipsoid_argument(self):
        x = jnp.array([12.0, 34.0, 100.0])
        eager = position_geographic_to_xyz(x, BESSEL1841)
        jitted = jax.jit(position_geographic_to_xyz)(x, BESSEL1841)
        assert jnp.allclose(eager, jitted, atol=1e-6)

    def test_vmap(self):
        coords = jnp.array([
            [0.0, 0.0, 0.0],
            [57.0, 28.0, 100.0],
            [-30.0, 30.0, 200.0],
        ])
        xyz = jax.vmap(position_geographic_to_xyz)(coords)
        assert xyz.shape == (3, 3)

        back = jax.vmap(position_xyz_to_geographic)(xyz)
        assert jnp.allclose(back, coords, atol=_ROUNDTRIP_POS_TOL, rtol=0.0)

    def test_grad_height(self):
        """d|xyz|/dh = 1 at the equator."""
        def radius(h):
            return jnp.linalg.norm(position_geographic_to_xyz(jnp.stack([0.0, 0.0, h])))

        assert jnp.abs(jax.grad(radius)(jnp.float64(0.0)) - 1.0) < 1e-9
