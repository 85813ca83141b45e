"""Interactive explorer for Mandelbrot, Julia and Tricorn fractals."""

__version__ = "0.1.0"