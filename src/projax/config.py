"""Module-wide numeric configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout projax, and ``set_default_ellipsoid`` / ``get_default_ellipsoid``
to control the reference ellipsoid used when a conversion is called without
one.

The default dtype is ``jnp.float32`` for GPU/TPU compatibility.  Geocentric
coordinates are of order 6.4e6 m, so float32 resolves them only to about
half a metre; switch to ``jnp.float64`` (which automatically enables JAX's
64-bit mode) for millimetre-level work.

Call both setters **before** any JIT compilation.  Under JIT, the getters run
during tracing and their results are baked into the compiled program.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

from projax.ellipsoid import WGS84, Ellipsoid

logger = logging.getLogger(__name__)

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32
_default_ellipsoid = WGS84


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for projax.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype


def set_default_ellipsoid(ellipsoid: Ellipsoid) -> None:
    """Set the ellipsoid used when a conversion is called without one.

    Args:
        ellipsoid: Reference ellipsoid, e.g. :data:`projax.ellipsoid.GRS80`.

    Raises:
        TypeError: If *ellipsoid* is not an :class:`Ellipsoid`.
        ValueError: If the semi-major axis is not positive or the flattening
            lies outside ``[0, 1)``.
    """
    global _default_ellipsoid
    if not isinstance(ellipsoid, Ellipsoid):
        raise TypeError(
            f"Expected an Ellipsoid, got {type(ellipsoid).__name__}"
        )
    if not ellipsoid.a > 0:
        raise ValueError(
            f"Invalid ellipsoid: semi-major axis must be positive, got {ellipsoid.a}"
        )
    if not 0.0 <= ellipsoid.f < 1.0:
        raise ValueError(
            f"Invalid ellipsoid: flattening must lie in [0, 1), got {ellipsoid.f}"
        )
    logger.info(
        "Default ellipsoid set to a=%.4f m, 1/f=%s",
        ellipsoid.a,
        "inf" if ellipsoid.f == 0 else f"{1.0 / ellipsoid.f:.9f}",
    )
    _default_ellipsoid = ellipsoid


def get_default_ellipsoid() -> Ellipsoid:
    """Return the ellipsoid used when none is passed to a conversion.

    Returns:
        Ellipsoid: The active default (:data:`projax.ellipsoid.WGS84` unless
        changed with :func:`set_default_ellipsoid`).
    """
    return _default_ellipsoid


def get_roundtrip_tolerance() -> float:
    """Return the dtype-adaptive linear tolerance for round-trip comparisons.

    The tolerance scales with the precision of the configured float dtype
    on Earth-sized coordinates:

    - ``float16``:  inf (geocentric coordinates overflow float16)
    - ``bfloat16``: 1e5 m
    - ``float32``:  2.0 m
    - ``float64``:  1e-3 m

    Returns:
        float: Tolerance in metres.
    """
    if _dtype == jnp.float64:
        return 1e-3
    if _dtype == jnp.float32:
        return 2.0
    if _dtype == jnp.bfloat16:
        return 1e5
    return float("inf")
