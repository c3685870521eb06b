"""Escape-time iteration for the supported fractals."""

from enum import Enum

import numpy as np

ESCAPE_RADIUS_SQUARED = 4.0
DEFAULT_JULIA_C = complex(-0.7, 0.27015)


class FractalType(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3


def _quadratic(zr: float, zi: float, cr: float, ci: float, max_iter: int) -> int:
    for i in range(max_iter):
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED:
            return i
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
    return max_iter


def mandelbrot(c: complex, max_iter: int) -> int:
    """Iterations before z -> z*z + c escapes, starting from zero."""
    return _quadratic(0.0, 0.0, c.real, c.imag, max_iter)


def julia(z: complex, c: complex, max_iter: int) -> int:
    """Iterations before z -> z*z + c escapes, starting from ``z``."""
    return _quadratic(z.real, z.imag, c.real, c.imag, max_iter)


def burning_ship(c: complex, max_iter: int) -> int:
    """Iterations before the Burning Ship map escapes, starting from zero."""
    zr = zi = 0.0
    for i in range(max_iter):
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED:
            return i
        temp = zr * zr - zi * zi + c.real
        zi = abs(2.0 * abs(zr) * abs(zi) + c.imag)
        zr = abs(temp)
    return max_iter


def escape_counts(
    kind: FractalType,
    points,
    max_iter: int,
    julia_c: complex = DEFAULT_JULIA_C,
) -> np.ndarray:
    """Iteration counts for every point of an array of complex numbers.

    For the Julia set the points are starting values and ``julia_c`` is the
    constant; for the others the points are the constants.
    """
    grid = np.asarray(points, dtype=complex)
    if kind is FractalType.JULIA:
        zr = grid.real.copy()
        zi = grid.imag.copy()
        cr = np.full(grid.shape, julia_c.real)
        ci = np.full(grid.shape, julia_c.imag)
    else:
        zr = np.zeros(grid.shape)
        zi = np.zeros(grid.shape)
        cr = grid.real.copy()
        ci = grid.imag.copy()

    counts = np.full(grid.shape, max_iter, dtype=np.int64)
    active = np.ones(grid.shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(max_iter):
            escaped = active & (zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED)
            counts[escaped] = i
            active &= ~escaped
            if not active.any():
                break
            temp = zr * zr - zi * zi + cr
            if kind is FractalType.BURNING_SHIP:
                zi = np.abs(2.0 * np.abs(zr) * np.abs(zi) + ci)
                zr = np.abs(temp)
            else:
                zi = 2.0 * zr * zi + ci
                zr = temp
    return counts