import numpy as np
import pytest

from fractol.fractal import (
    BLACK,
    INITIAL_COMPLEX_HEIGHT,
    INITIAL_COMPLEX_WIDTH,
    INITIAL_ESCAPE_LIMIT,
    INITIAL_VERTEX,
    WHITE,
    ColorMap,
    Fractal,
    FractalType,
    classic_color,
    escape_time,
    gray_scale,
    render,
    temperature_map,
)


def julia_far() -> tuple:
    return Fractal(kind=FractalType.JULIA, julia_constant=complex(-0.8, 0.156)), 10 + 10j


def test_origin_never_escapes_mandelbrot():
    fractal = Fractal()
    assert escape_time(0j, fractal) == fractal.escape_limit


def test_far_point_escapes_mandelbrot_after_one_step():
    assert escape_time(10 + 10j, Fractal()) == 1


def test_far_point_escapes_julia_immediately():
    fractal, point = julia_far()
    assert escape_time(point, fractal) == 0


def test_escape_time_bounded_by_limit():
    fractal = Fractal(escape_limit=30)
    for point in (0.3 + 0.5j, -0.75 + 0.1j, 0.25 + 0j, -1.5 + 0.2j):
        assert 0 <= escape_time(point, fractal) <= 30


@pytest.mark.parametrize("kind", [FractalType.MANDELBROT, FractalType.TRICORN])
def test_conjugate_symmetry(kind):
    fractal = Fractal(kind=kind)
    for point in (0.3 + 0.5j, -0.75 + 0.1j, -1.2 + 0.3j, 0.1 + 0.7j):
        assert escape_time(point, fractal) == escape_time(point.conjugate(), fractal)


def test_julia_point_symmetry():
    fractal = Fractal(kind=FractalType.JULIA, julia_constant=complex(-0.4, 0.6))
    for point in (0.3 + 0.5j, -0.1 + 0.2j, 0.9 - 0.4j):
        assert escape_time(point, fractal) == escape_time(-point, fractal)


def test_tricorn_differs_from_mandelbrot_somewhere():
    mandel = Fractal(escape_limit=50)
    tricorn = Fractal(kind=FractalType.TRICORN, escape_limit=50)
    points = [complex(x / 10, y / 10) for x in range(-20, 6) for y in range(-12, 13)]
    assert any(escape_time(p, mandel) != escape_time(p, tricorn) for p in points)


def test_interior_colors():
    fractal = Fractal()
    assert classic_color(0j, fractal) == BLACK
    assert gray_scale(0j, fractal) == WHITE
    assert temperature_map(0j, fractal) == BLACK


def test_immediate_escape_colors():
    fractal, point = julia_far()
    assert classic_color(point, fractal) == WHITE
    assert gray_scale(point, fractal) == BLACK
    assert temperature_map(point, fractal) == WHITE


def test_classic_color_lies_between_white_and_black():
    fractal = Fractal()
    for point in (0.3 + 0.5j, -0.75 + 0.1j, 0.4 + 0.4j):
        assert BLACK <= classic_color(point, fractal) <= WHITE


def test_gray_scale_channels_equal():
    fractal = Fractal()
    for point in (0.3 + 0.5j, -0.75 + 0.1j, 0.4 + 0.4j):
        color = gray_scale(point, fractal)
        assert color >> 24 == 0xFF
        assert (color >> 16) & 0xFF == (color >> 8) & 0xFF == color & 0xFF


def test_render_shape_and_alpha():
    image = render(Fractal(escape_limit=20), 12, 9)
    assert image.shape == (9, 12)
    assert image.dtype == np.uint32
    assert np.all(image >> 24 == 0xFF)


def test_render_corner_matches_point_color():
    fractal = Fractal(escape_limit=40)
    image = render(fractal, 16, 16)
    assert int(image[0, 0]) == classic_color(fractal.vertex, fractal)


@pytest.mark.parametrize(
    "color_map, func",
    [
        (ColorMap.CLASSIC, classic_color),
        (ColorMap.GRAY_SCALE, gray_scale),
        (ColorMap.TEMPERATURE, temperature_map),
    ],
)
def test_render_uses_color_map(color_map, func):
    fractal = Fractal(vertex=complex(-0.5, 0.2), escape_limit=40, color_map=color_map)
    image = render(fractal, 10, 10)
    assert int(image[0, 0]) == func(fractal.vertex, fractal)


def test_render_matches_pointwise_escape_for_julia():
    fractal = Fractal(
        kind=FractalType.JULIA, julia_constant=complex(-0.8, 0.156), vertex=complex(-0.1, 0.1)
    )
    image = render(fractal, 5, 5)
    assert int(image[0, 0]) == classic_color(fractal.vertex, fractal)


def test_temperature_render_is_banded():
    fractal = Fractal(escape_limit=60, color_map=ColorMap.TEMPERATURE)
    image = render(fractal, 40, 40)
    assert len(np.unique(image)) <= 6


def test_render_rejects_tiny_image():
    with pytest.raises(ValueError):
        render(Fractal(), 1, 10)


def test_zero_escape_limit_rejected():
    with pytest.raises(ValueError):
        Fractal(escape_limit=0)


def test_defaults():
    fractal = Fractal()
    assert fractal.vertex == INITIAL_VERTEX
    assert fractal.complex_width == INITIAL_COMPLEX_WIDTH
    assert fractal.complex_height == INITIAL_COMPLEX_HEIGHT
    assert fractal.escape_limit == INITIAL_ESCAPE_LIMIT
    assert fractal.color_map is ColorMap.CLASSIC


def test_reset_view_restores_initial_view():
    fractal = Fractal(vertex=complex(1, 1), complex_width=0.5, complex_height=0.25)
    fractal.reset_view()
    assert fractal.vertex == INITIAL_VERTEX
    assert fractal.complex_width == INITIAL_COMPLEX_WIDTH
    assert fractal.complex_height == INITIAL_COMPLEX_HEIGHT


def test_reset_escape_limit():
    fractal = Fractal()
    fractal.increase_escape_limit()
    fractal.increase_escape_limit()
    fractal.reset_escape_limit()
    assert fractal.escape_limit == INITIAL_ESCAPE_LIMIT


def test_increase_then_decrease_round_trip():
    fractal = Fractal()
    fractal.increase_escape_limit()
    assert fractal.escape_limit > INITIAL_ESCAPE_LIMIT
    assert fractal.decrease_escape_limit() is True
    assert fractal.escape_limit == INITIAL_ESCAPE_LIMIT


def test_decrease_stops_at_lowest_step():
    fractal = Fractal()
    while fractal.decrease_escape_limit():
        pass
    lowest = fractal.escape_limit
    assert lowest >= 1
    assert fractal.decrease_escape_limit() is False
    assert fractal.escape_limit == lowest


def test_cycle_color_map_order():
    fractal = Fractal()
    assert fractal.cycle_color_map() is ColorMap.GRAY_SCALE
    assert fractal.cycle_color_map() is ColorMap.TEMPERATURE
    assert fractal.cycle_color_map() is ColorMap.CLASSIC
    assert fractal.color_map is ColorMap.CLASSIC