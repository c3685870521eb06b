"""Interactive Mandelbrot, Julia and Burning Ship fractal viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]