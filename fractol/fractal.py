"""Fractal state, escape-time iteration, colour maps and image rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

import numpy as np

WIDTH = 900
HEIGHT = 900
INITIAL_ESCAPE_LIMIT = 80
ESCAPE_LIMIT_STEP = 20
INITIAL_VERTEX = complex(-2.15, 1.5)
INITIAL_COMPLEX_WIDTH = 3.0
INITIAL_COMPLEX_HEIGHT = 3.0
ZOOM_FACTOR = 1.05
ERROR_MESSAGE = "Valid inputs:\nmandelbrot\njulia c.re c.im\ntricorn\n"

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
NEON_ORANGE = 0xFFFF6600
PSYCHEDELIC_PURPLE = 0xFF660066
AQUA_DREAM = 0xFF33CCCC
HOT_PINK = 0xFFE55982
CYAN_ELECTRIC = 0xFFFF2CFF
MCDONALDS = 0xFFFFC72C
SUPER_YELLOW = 0xFFFCBE11
PNKY_PASTEL = 0xFFFFC4D6
CUTE_GREEN = 0xFFC1E378
BRAT_GREEN = 0xFF8ACE00
NOMAI_PURPLE = 0xFF787EFE

_ALPHA = 0xFF000000

# Colour stops of the temperature map, as (red, green, blue) fractions.
_TEMPERATURE_PATH = np.array(
    [
        [1.0, 1.0, 1.0],
        [0.0, 0.5, 1.0],
        [1.0, 1.0, 0.0],
        [1.0, 0.5, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 0.0],
    ]
)


class FractalType(Enum):
    """The family of fractal being drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    TRICORN = "tricorn"


class ColorMap(Enum):
    """How an escape count is turned into a colour."""

    CLASSIC = "classic"
    GRAY_SCALE = "gray_scale"
    TEMPERATURE = "temperature"


_NEXT_COLOR_MAP = {
    ColorMap.CLASSIC: ColorMap.GRAY_SCALE,
    ColorMap.GRAY_SCALE: ColorMap.TEMPERATURE,
    ColorMap.TEMPERATURE: ColorMap.CLASSIC,
}


@dataclass
class Fractal:
    """The view onto the complex plane and the settings used to draw it.

    ``vertex`` is the complex number at the top-left pixel; the view spans
    ``complex_width`` to the right and ``complex_height`` downwards.
    """

    kind: FractalType = FractalType.MANDELBROT
    julia_constant: complex = 0j
    escape_limit: int = INITIAL_ESCAPE_LIMIT
    vertex: complex = INITIAL_VERTEX
    complex_width: float = INITIAL_COMPLEX_WIDTH
    complex_height: float = INITIAL_COMPLEX_HEIGHT
    zoom: float = ZOOM_FACTOR
    color_map: ColorMap = ColorMap.CLASSIC
    last_x: int = 0
    last_y: int = 0
    button4_counter: int = 2
    button5_counter: int = 2

    def __post_init__(self) -> None:
        _checked_limit(self)

    def reset_view(self) -> None:
        """Return the view to its initial position and size."""
        self.vertex = INITIAL_VERTEX
        self.complex_width = INITIAL_COMPLEX_WIDTH
        self.complex_height = INITIAL_COMPLEX_HEIGHT

    def reset_escape_limit(self) -> None:
        """Return the escape limit to its initial value."""
        self.escape_limit = INITIAL_ESCAPE_LIMIT

    def increase_escape_limit(self) -> None:
        """Raise the escape limit by one step."""
        self.escape_limit += ESCAPE_LIMIT_STEP

    def decrease_escape_limit(self) -> bool:
        """Lower the escape limit by one step if it stays positive.

        Returns True when the limit changed.
        """
        if self.escape_limit > ESCAPE_LIMIT_STEP:
            self.escape_limit -= ESCAPE_LIMIT_STEP
            return True
        return False

    def cycle_color_map(self) -> ColorMap:
        """Switch to the next colour map and return it."""
        self.color_map = _NEXT_COLOR_MAP[self.color_map]
        return self.color_map


def _checked_limit(fractal: Fractal) -> int:
    limit = fractal.escape_limit
    if limit < 1:
        raise ValueError(f"escape limit must be at least 1, got {limit}")
    return limit


def escape_time(point: complex, fractal: Fractal) -> int:
    """Return the number of iterations before ``point`` escapes, up to the limit.

    For Mandelbrot and tricorn ``point`` is the parameter and iteration starts
    at zero; for Julia ``point`` is the starting value and the fractal's
    constant is the parameter. The tricorn conjugates before each step.
    """
    limit = _checked_limit(fractal)
    point = complex(point)
    if fractal.kind is FractalType.JULIA:
        zr, zi = point.real, point.imag
        constant = complex(fractal.julia_constant)
        cr, ci = constant.real, constant.imag
    else:
        zr = zi = 0.0
        cr, ci = point.real, point.imag
    tricorn = fractal.kind is FractalType.TRICORN
    for i in range(1, limit):
        if tricorn:
            zi = -zi
        if zr * zr + zi * zi >= 4.0:
            return i - 1
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
    return limit


def _escape_counts(re: np.ndarray, im: np.ndarray, fractal: Fractal) -> np.ndarray:
    limit = _checked_limit(fractal)
    if fractal.kind is FractalType.JULIA:
        zr, zi = re.copy(), im.copy()
        constant = complex(fractal.julia_constant)
        cr = np.full_like(re, constant.real)
        ci = np.full_like(im, constant.imag)
    else:
        zr, zi = np.zeros_like(re), np.zeros_like(im)
        cr, ci = re, im
    tricorn = fractal.kind is FractalType.TRICORN
    counts = np.full(re.shape, limit, dtype=np.int64)
    active = np.ones(re.shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(1, limit):
            if tricorn:
                zi = -zi
            escaped = active & (zr * zr + zi * zi >= 4.0)
            counts[escaped] = i - 1
            active &= ~escaped
            if not active.any():
                break
            zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
    return counts


def _fraction(counts: np.ndarray, limit: int) -> np.ndarray:
    return np.asarray(counts, dtype=np.float64) / float(limit)


def _classic_colors(counts: np.ndarray, limit: int) -> np.ndarray:
    value = (float(BLACK) - float(WHITE)) * _fraction(counts, limit) + float(WHITE)
    return value.astype(np.uint32)


def _gray_colors(counts: np.ndarray, limit: int) -> np.ndarray:
    intensity = (255.0 * _fraction(counts, limit)).astype(np.uint8).astype(np.uint32)
    return np.uint32(_ALPHA) | (intensity << 16) | (intensity << 8) | intensity


def _temperature_colors(counts: np.ndarray, limit: int) -> np.ndarray:
    last = len(_TEMPERATURE_PATH) - 1
    scaled = _fraction(counts, limit) * last
    segment = scaled.astype(np.int64)
    # The blend weight is kept as a whole number, so each segment is a flat band.
    local = (scaled - segment).astype(np.int64).astype(np.float64)
    begin = _TEMPERATURE_PATH[segment]
    end = _TEMPERATURE_PATH[np.minimum(segment + 1, last)]
    channels = (end - begin) * local[..., np.newaxis] + begin
    red, green, blue = (
        (channels[..., k] * 255).astype(np.uint8).astype(np.uint32) for k in range(3)
    )
    return (red << 16) | (green << 8) | blue | np.uint32(_ALPHA)


_COLORIZERS: Dict[ColorMap, Callable[[np.ndarray, int], np.ndarray]] = {
    ColorMap.CLASSIC: _classic_colors,
    ColorMap.GRAY_SCALE: _gray_colors,
    ColorMap.TEMPERATURE: _temperature_colors,
}


def _point_color(point: complex, fractal: Fractal, color_map: ColorMap) -> int:
    count = escape_time(point, fractal)
    return int(_COLORIZERS[color_map](np.asarray(count), fractal.escape_limit))


def classic_color(point: complex, fractal: Fractal) -> int:
    """Blend from white to black by escape count, as ARGB."""
    return _point_color(point, fractal, ColorMap.CLASSIC)


def gray_scale(point: complex, fractal: Fractal) -> int:
    """Return an opaque grey whose brightness grows with the escape count."""
    return _point_color(point, fractal, ColorMap.GRAY_SCALE)


def temperature_map(point: complex, fractal: Fractal) -> int:
    """Return an opaque colour from white through blue, yellow, orange, red to black."""
    return _point_color(point, fractal, ColorMap.TEMPERATURE)


def render(fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """Return a ``(height, width)`` array of ARGB colours for the current view.

    Row 0 is the top of the view, at ``fractal.vertex``.
    """
    if width < 2 or height < 2:
        raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
    limit = _checked_limit(fractal)
    vertex = complex(fractal.vertex)
    step_re = fractal.complex_width / float(width - 1)
    step_im = -(fractal.complex_height / float(height - 1))
    re_axis = vertex.real + np.arange(width) * step_re
    im_axis = vertex.imag + np.arange(height) * step_im
    re, im = np.meshgrid(re_axis, im_axis)
    counts = _escape_counts(re, im, fractal)
    return _COLORIZERS[fractal.color_map](counts, limit)