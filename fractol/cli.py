"""Command-line entry points that parse the fractal choice and open a viewer."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import numpy as np

from fractol.controls import (
    QUIT_KEY,
    handle_button_press,
    handle_button_release,
    handle_key,
)
from fractol.fractal import ERROR_MESSAGE, HEIGHT, WIDTH, Fractal, FractalType, render
from fractol.ft.numeric import atod_signal

WINDOW_TITLE = "fractal"
INIT_ERROR_MESSAGE = "Fallo de malloc\n"


class UsageError(ValueError):
    """The command-line arguments do not name a valid fractal."""

    def __init__(self, message: str = ERROR_MESSAGE) -> None:
        super().__init__(message)


def parse_args(argv: Sequence[str], allow_tricorn: bool = True) -> Fractal:
    """Build a fractal from the arguments that follow the program name.

    Accepted forms are ``mandelbrot``, ``julia RE IM`` and, when allowed,
    ``tricorn``. Anything else raises UsageError.
    """
    args = list(argv)
    if args == ["mandelbrot"]:
        return Fractal(kind=FractalType.MANDELBROT)
    if allow_tricorn and args == ["tricorn"]:
        return Fractal(kind=FractalType.TRICORN)
    if len(args) == 3 and args[0] == "julia":
        try:
            constant = complex(atod_signal(args[1]), atod_signal(args[2]))
        except ValueError:
            raise UsageError() from None
        return Fractal(kind=FractalType.JULIA, julia_constant=constant)
    raise UsageError()


def _to_rgb_bytes(pixels: np.ndarray) -> bytes:
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.tobytes()


def run(fractal: Fractal, bonus: bool = True) -> int:
    """Show ``fractal`` in a window and handle input until it is closed.

    Returns the process exit status.
    """
    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error:
            sys.stderr.write(INIT_ERROR_MESSAGE)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)

        def redraw() -> None:
            data = _to_rgb_bytes(render(fractal, WIDTH, HEIGHT))
            surface = pygame.image.frombuffer(data, (WIDTH, HEIGHT), "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        redraw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYUP:
                name = pygame.key.name(event.key)
                if name == QUIT_KEY:
                    break
                if handle_key(fractal, name, bonus):
                    redraw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                if handle_button_press(fractal, event.button, x, y, WIDTH, HEIGHT, bonus):
                    redraw()
            elif event.type == pygame.MOUSEBUTTONUP:
                x, y = event.pos
                if handle_button_release(fractal, event.button, x, y, WIDTH, HEIGHT, bonus):
                    redraw()
        return 0
    finally:
        pygame.quit()


def _start(argv: Optional[Sequence[str]], bonus: bool) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        fractal = parse_args(args, allow_tricorn=bonus)
    except UsageError as error:
        sys.stderr.write(str(error))
        return 1
    return run(fractal, bonus=bonus)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the full viewer: tricorn, drag, pointer zoom and extra keys."""
    return _start(argv, bonus=True)


def main_basic(argv: Optional[Sequence[str]] = None) -> int:
    """Run the basic viewer: Mandelbrot or Julia, arrows, wheel and colour keys."""
    return _start(argv, bonus=False)