"""Tests for the projax.config module."""

import logging

import jax
import jax.numpy as jnp
import pytest

from projax.config import (
    get_default_ellipsoid,
    get_dtype,
    get_roundtrip_tolerance,
    set_default_ellipsoid,
    set_dtype,
)
from projax.constants import WGS84_a
from projax.coordinates import position_geographic_to_xyz, position_xyz_to_geographic
from projax.ellipsoid import BESSEL1841, GRS80, WGS84, Ellipsoid
from projax.projections import Geographic, utm

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True


class TestRoundtripTolerance:
    def test_float32_tolerance(self):
        assert get_roundtrip_tolerance() == 2.0

    def test_float64_tolerance(self):
        set_dtype(jnp.float64)
        assert get_roundtrip_tolerance() == 1e-3

    def test_bfloat16_tolerance(self):
        set_dtype(jnp.bfloat16)
        assert get_roundtrip_tolerance() == 1e5

    def test_float16_tolerance(self):
        set_dtype(jnp.float16)
        assert get_roundtrip_tolerance() == float("inf")


class TestDefaultEllipsoid:
    def test_default_is_wgs84(self):
        assert get_default_ellipsoid() == WGS84

    def test_set_and_get(self):
        set_default_ellipsoid(BESSEL1841)
        assert get_default_ellipsoid() == BESSEL1841

    def test_default_used_when_omitted(self):
        set_dtype(jnp.float64)
        set_default_ellipsoid(BESSEL1841)
        x = jnp.array([0.0, 0.0, 0.0])
        assert jnp.allclose(
            position_geographic_to_xyz(x),
            position_geographic_to_xyz(x, BESSEL1841),
        )
        assert jnp.allclose(Geographic().to_xyz(x)[0], BESSEL1841.a)

    def test_sphere_accepted(self):
        set_default_ellipsoid(Ellipsoid(6371000.0, 0.0))
        assert get_default_ellipsoid().f == 0.0

    def test_logs_change(self, caplog):
        with caplog.at_level(logging.INFO, logger="projax.config"):
            set_default_ellipsoid(GRS80)
        assert "Default ellipsoid set" in caplog.text

    def test_non_ellipsoid_raises(self):
        with pytest.raises(TypeError, match="Expected an Ellipsoid"):
            set_default_ellipsoid((6378137.0, 0.0033))

    def test_nonpositive_axis_raises(self):
        with pytest.raises(ValueError, match="semi-major axis"):
            set_default_ellipsoid(Ellipsoid(0.0, 0.0))

    @pytest.mark.parametrize("f", [-0.1, 1.0, 1.5])
    def test_flattening_out_of_range_raises(self, f):
        with pytest.raises(ValueError, match="flattening"):
            set_default_ellipsoid(Ellipsoid(6378137.0, f))


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_geographic_dtype_float64(self):
        set_dtype(jnp.float64)
        x_xyz = position_geographic_to_xyz(jnp.array([0.0, 0.0, 0.0]))
        assert x_xyz.dtype == jnp.float64

    def test_geographic_dtype_float32(self):
        x_geo = position_xyz_to_geographic(jnp.array([WGS84_a, 0.0, 0.0]))
        assert x_geo.dtype == jnp.float32

    def test_projection_dtype_float64(self):
        set_dtype(jnp.float64)
        en = utm(31).from_xyz(jnp.array([WGS84_a, 0.0, 0.0]))
        assert en.dtype == jnp.float64


class TestFloat32Precision:
    def test_utm_central_meridian_float32(self):
        """float32 still resolves a UTM coordinate to within its tolerance."""
        geo = Geographic()
        en = utm(31).from_xyz(geo.to_xyz(jnp.array([3.0, 0.0, 0.0])))
        assert jnp.abs(en[0] - 500000.0) < get_roundtrip_tolerance()
        assert jnp.abs(en[1]) < get_roundtrip_tolerance()
