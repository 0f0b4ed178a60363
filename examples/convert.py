# /// script
# requires-python = ">=3.10"
# dependencies = ["typer>=0.9.0", "projax"]
#
# [tool.uv.sources]
# projax = { path = ".." }
# ///
"""Convert coordinates between geographic, geocentric and projected systems.

Reads whitespace-separated coordinate triples from the command line or from
a text file (one point per line), converts them in a single vectorised, JIT
compiled call, and prints the result.

Requires projax to be installed (``uv pip install -e .`` from the repo root).

Systems are written as ``name[:arg]``:

    geographic          lon, lat (deg), h (m)
    xyz                 geocentric Cartesian x, y, z (m)
    utm:<zone>[n|s]     e.g. utm:31n, utm:23s
    gk:<zone>           Gauss-Kruger 3 deg belt
    merc                ellipsoidal Mercator, central meridian 0
    webmerc             Web (Pseudo) Mercator

Usage:
    uv run examples/convert.py [OPTIONS] [VALUES]...

Examples:
    # Paris to UTM 31N
    uv run examples/convert.py --source geographic --target utm:31n 2.35 48.85 35

    # Geocentric to geographic on the Bessel ellipsoid
    uv run examples/convert.py --source xyz --ellipsoid bessel1841 \\
        4202779.0 172341.0 4780226.0

    # A file of UTM points to Web Mercator
    uv run examples/convert.py --source utm:32n --target webmerc --input points.txt
"""

import enum
import sys
from pathlib import Path
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

import projax
from projax import (
    Geographic,
    Mercator,
    WebMercator,
    gauss_kruger,
    set_default_ellipsoid,
    set_dtype,
    transform,
    utm,
)

# ── JAX setup ────────────────────────────────────────────────────────────────

set_dtype(jnp.float64)  # Must be before any JIT compilation


class EllipsoidName(str, enum.Enum):
    """Named reference ellipsoids."""

    wgs84 = "wgs84"
    grs80 = "grs80"
    wgs72 = "wgs72"
    bessel1841 = "bessel1841"
    krassowsky1940 = "krassowsky1940"
    international1924 = "international1924"
    clarke1866 = "clarke1866"
    airy1830 = "airy1830"


class _Geocentric:
    """Stand-in for the geocentric Cartesian frame itself."""


def parse_system(spec: str):
    """Resolve a ``name[:arg]`` system string."""
    name, _, arg = spec.lower().partition(":")
    if name == "geographic":
        return Geographic()
    if name == "xyz":
        return _Geocentric()
    if name == "merc":
        return Mercator()
    if name == "webmerc":
        return WebMercator()
    if name == "utm" and arg:
        northern = not arg.endswith("s")
        return utm(int(arg.rstrip("ns")), northern=northern)
    if name == "gk" and arg:
        return gauss_kruger(int(arg))
    raise typer.BadParameter(f"Unknown coordinate system '{spec}'")


def _read_points(values: list[float], path: Path | None) -> jax.Array:
    if path is not None:
        rows = [
            [float(v) for v in line.split()]
            for line in path.read_text().splitlines()
            if line.strip() and not line.lstrip().startswith("#")
        ]
    else:
        rows = [values[i:i + 3] for i in range(0, len(values), 3)]

    if not rows or any(len(row) != 3 for row in rows):
        print("ERROR: coordinates must be given as triples.")
        sys.exit(1)
    return jnp.array(rows)


def main(
    values: Annotated[
        list[float] | None, typer.Argument(help="Coordinate triples", show_default=False)
    ] = None,
    source: Annotated[str, typer.Option(help="Source coordinate system")] = "geographic",
    target: Annotated[str, typer.Option(help="Target coordinate system")] = "xyz",
    ellipsoid: Annotated[
        EllipsoidName, typer.Option(help="Reference ellipsoid")
    ] = EllipsoidName.wgs84,
    input: Annotated[
        Path | None, typer.Option(help="Text file with one triple per line")
    ] = None,
    precision: Annotated[int, typer.Option(help="Decimal places to print")] = 4,
) -> None:
    """Convert coordinate triples from one system to another."""
    ell = getattr(projax, ellipsoid.value.upper())
    set_default_ellipsoid(ell)

    src = parse_system(source)
    dst = parse_system(target)
    x = _read_points(values or [], input)

    # Systems and ellipsoid are closed over, only the points are traced
    if isinstance(src, _Geocentric) and isinstance(dst, _Geocentric):
        out = x
    elif isinstance(src, _Geocentric):
        out = jax.jit(lambda p: dst.from_xyz(p, ell))(x)
    elif isinstance(dst, _Geocentric):
        out = jax.jit(lambda p: src.to_xyz(p, ell))(x)
    else:
        out = jax.jit(lambda p: transform(p, src, dst, ell))(x)

    for row in out.tolist():
        print(" ".join(f"{v:.{precision}f}" for v in row))


if __name__ == "__main__":
    typer.run(main)
