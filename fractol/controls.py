"""Keyboard and mouse controls that move, zoom and restyle a fractal view."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Dict

from fractol.fractal import Fractal

QUIT_KEY = "escape"

BUTTON_LEFT = 1
BUTTON_WHEEL_UP = 4
BUTTON_WHEEL_DOWN = 5

# Fraction of the view shifted by one arrow key press.
_MOVE_DIVISOR = 50
# Wheel events needed before the view is zoomed once.
_ZOOM_EVERY = 3


class Movement(Enum):
    """A direction the view can be shifted in."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"


_BASIC_MOVE_KEYS: Dict[str, Movement] = {
    "right": Movement.RIGHT,
    "left": Movement.LEFT,
    "up": Movement.UP,
    "down": Movement.DOWN,
}

_BONUS_MOVE_KEYS: Dict[str, Movement] = {
    **_BASIC_MOVE_KEYS,
    "l": Movement.RIGHT,
    "d": Movement.RIGHT,
    "h": Movement.LEFT,
    "a": Movement.LEFT,
    "k": Movement.UP,
    "w": Movement.UP,
    "j": Movement.DOWN,
    "s": Movement.DOWN,
}


def move(fractal: Fractal, movement: Movement) -> None:
    """Shift the view by a fiftieth of its size in the given direction."""
    vertex = complex(fractal.vertex)
    re, im = vertex.real, vertex.imag
    if movement is Movement.RIGHT:
        re += fractal.complex_width / _MOVE_DIVISOR
    elif movement is Movement.LEFT:
        re -= fractal.complex_width / _MOVE_DIVISOR
    elif movement is Movement.UP:
        im += fractal.complex_height / _MOVE_DIVISOR
    elif movement is Movement.DOWN:
        im -= fractal.complex_height / _MOVE_DIVISOR
    else:
        raise ValueError(f"unknown movement: {movement!r}")
    fractal.vertex = complex(re, im)


def _lerp(target: float, old_start: float, old_end: float, new_start: float, new_end: float) -> float:
    return (new_end - new_start) * ((target - old_start) / (old_end - old_start)) + new_start


def pixel_to_complex(fractal: Fractal, x: int, y: int, width: int, height: int) -> complex:
    """Return the point of the complex plane under pixel (x, y)."""
    vertex = complex(fractal.vertex)
    re = _lerp(x, 0, width, vertex.real, vertex.real + fractal.complex_width)
    im = _lerp(y, 0, height, vertex.imag, vertex.imag - fractal.complex_height)
    return complex(re, im)


def _scale_view(
    fractal: Fractal, cursor: complex, apply: Callable[[float, float], float]
) -> None:
    vertex = complex(fractal.vertex)
    cursor = complex(cursor)
    re = apply(vertex.real - cursor.real, fractal.zoom) + cursor.real
    im = apply(vertex.imag - cursor.imag, fractal.zoom) + cursor.imag
    fractal.vertex = complex(re, im)
    fractal.complex_width = apply(fractal.complex_width, fractal.zoom)
    fractal.complex_height = apply(fractal.complex_height, fractal.zoom)


def zoom_in(fractal: Fractal, cursor: complex) -> bool:
    """Count a wheel-up event; every few events widen the view about ``cursor``.

    Returns True when the view changed.
    """
    count = fractal.button4_counter
    fractal.button4_counter = count + 1
    if count < _ZOOM_EVERY:
        return False
    fractal.button4_counter = 0
    _scale_view(fractal, cursor, operator.mul)
    return True


def zoom_out(fractal: Fractal, cursor: complex) -> bool:
    """Count a wheel-down event; every few events narrow the view about ``cursor``.

    Returns True when the view changed.
    """
    count = fractal.button5_counter
    fractal.button5_counter = count + 1
    if count < _ZOOM_EVERY:
        return False
    fractal.button5_counter = 0
    _scale_view(fractal, cursor, operator.truediv)
    return True


def begin_drag(fractal: Fractal, x: int, y: int) -> None:
    """Remember the pixel where a drag started."""
    fractal.last_x = x
    fractal.last_y = y


def end_drag(fractal: Fractal, x: int, y: int, width: int, height: int) -> None:
    """Pan the view so the point under the drag start follows the pointer."""
    vertex = complex(fractal.vertex)
    re = vertex.real - (x - fractal.last_x) * fractal.complex_width / (width - 1)
    im = vertex.imag + (y - fractal.last_y) * fractal.complex_height / (height - 1)
    fractal.vertex = complex(re, im)


def handle_key(fractal: Fractal, key: str, bonus: bool = True) -> bool:
    """Apply the action bound to a released key; return True when a redraw is due.

    Keys are named as lower-case key names ("right", "c", ...). The quit key is
    handled by the caller and changes nothing here.
    """
    moves = _BONUS_MOVE_KEYS if bonus else _BASIC_MOVE_KEYS
    if key in moves:
        move(fractal, moves[key])
        return True
    if key == "c":
        fractal.cycle_color_map()
        return True
    if not bonus:
        return False
    if key == "r":
        fractal.reset_view()
        return True
    if key == "x":
        fractal.increase_escape_limit()
        return True
    if key == "z":
        return fractal.decrease_escape_limit()
    if key == "p":
        fractal.reset_escape_limit()
        return True
    return False


def handle_button_press(
    fractal: Fractal, button: int, x: int, y: int, width: int, height: int, bonus: bool = True
) -> bool:
    """React to a mouse button press; return True when a redraw is due.

    With ``bonus`` the left button starts a drag and the wheel zooms about the
    pointer; otherwise the wheel zooms about a point derived from the view.
    """
    if bonus:
        if button == BUTTON_LEFT:
            begin_drag(fractal, x, y)
            return False
        cursor = pixel_to_complex(fractal, x, y, width, height)
    else:
        vertex = complex(fractal.vertex)
        cursor = complex(
            vertex.real + fractal.complex_width / 2,
            vertex.imag + fractal.complex_height / 2,
        )
    if button == BUTTON_WHEEL_UP:
        zoom_in(fractal, cursor)
    elif button == BUTTON_WHEEL_DOWN:
        zoom_out(fractal, cursor)
    return True


def handle_button_release(
    fractal: Fractal, button: int, x: int, y: int, width: int, height: int, bonus: bool = True
) -> bool:
    """React to a mouse button release; return True when a redraw is due."""
    if bonus and button == BUTTON_LEFT:
        end_drag(fractal, x, y, width, height)
        return True
    return False