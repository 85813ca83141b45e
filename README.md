# fractol

An interactive explorer for escape-time fractals: the Mandelbrot set, Julia
sets and the Tricorn. It draws a 900 × 900 window with pygame and lets you
pan, zoom, change the iteration limit and switch between colour maps.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running

```
fractol mandelbrot
fractol julia -0.8 0.156
fractol tricorn
```

A Julia set takes the real and imaginary parts of its constant as two
decimal numbers. Any other input prints the list of valid inputs to standard
error and exits with status 1. If the window cannot be opened, an error
message is printed and the status is also 1.

`fractol-basic` is the simpler viewer. It accepts `mandelbrot` and
`julia c.re c.im` only:

```
fractol-basic mandelbrot
fractol-basic julia 0.285 0.01
```

`pollock` opens a black 1920 × 1080 window with a single red pixel, a minimal
check that drawing to a window works; close the window to exit:

```
pollock
```

## Controls

In `fractol`:

| Input                                    | Action                                        |
|------------------------------------------|-----------------------------------------------|
| Arrows, `h` `j` `k` `l`, `w` `a` `s` `d` | Move the view by 1/50 of its size             |
| Scroll wheel                             | Scale the view around the pointer             |
| Left button drag                         | Pan the view by the distance dragged          |
| `x` / `z`                                | Raise / lower the escape limit by 20 (not below 20) |
| `p`                                      | Restore the escape limit to 80                |
| `r`                                      | Restore the initial view                      |
| `c`                                      | Cycle colour map: classic, grey, temperature  |
| `Esc` or closing the window              | Quit                                          |

In `fractol-basic`, only the arrow keys, `c`, `Esc` and the scroll wheel are
active, and the wheel scales the view around a point fixed relative to the
view rather than around the pointer.

Scaling is applied once every few wheel steps, by a factor of 1.05, so
scrolling gives a gradual change of scale.

## As a library

The rendering core lives in `fractol.fractal`: the `Fractal` dataclass,
`FractalType`, `ColorMap`, `escape_time`, the per-point colour functions
`classic_color`, `gray_scale` and `temperature_map`, and `render`, which
returns a NumPy array of ARGB colours:

```python
from fractol.fractal import Fractal, FractalType, render

image = render(Fractal(kind=FractalType.JULIA, julia_constant=-0.8 + 0.156j), 200, 200)
image.shape  # (200, 200)
```

Input handling is in `fractol.controls` (`move`, `zoom_in`, `zoom_out`,
`handle_key`, `handle_button_press`, `handle_button_release`, ...), and the
command-line entry points are `main` and `main_basic` in `fractol.cli`, with
`parse_args` for turning arguments into a `Fractal`.

The `fractol.ft` sub-package holds small general helpers:

- `fractol.ft.ctype`: ASCII character classes and case conversion
- `fractol.ft.memory`: filling, copying, searching and comparing byte buffers
- `fractol.ft.strings`: string routines with NUL-terminated semantics
- `fractol.ft.convert`: `atoi` and `itoa`
- `fractol.ft.lists`: a singly linked list (`LinkedList`, `Node`)
- `fractol.ft.gnl`: `LineReader`, reading a file descriptor or binary stream line by line
- `fractol.ft.printf`: a small `printf` and `format_printf`
- `fractol.ft.numeric`: bounded parsing (`atoi_signal`, `atod_signal`), `lerp` and sorting

```python
from fractol.ft.numeric import lerp

lerp(5, (0, 10), (0, 100))  # 50.0
```

## What it does not do

There are no helpers for writing characters, strings or numbers straight to
a file descriptor; use `printf` for standard output or Python's own I/O.