"""Command-line entry point and window loop."""

import os
import sys

import numpy as np

from .fractals import DEFAULT_JULIA_C, FractalType
from .numbers import is_valid_number, parse_float
from .view import View, Key

_NAMES = {kind.name.lower(): kind for kind in FractalType}

_USAGE = """\
Usage:
  fractview mandelbrot
  fractview julia <real> <imaginary>
  fractview burning_ship

Examples:
  fractview julia -0.33 0.67
  fractview julia -0.7 0.27015

Controls:
  ESC: Exit
  Arrow keys: Move
  Mouse wheel: Zoom
  C: Shift colors
  R: Reset view
"""


class UsageError(Exception):
    """Raised when the command line is not understood."""


def usage() -> str:
    """Help text describing arguments and controls."""
    return _USAGE


def parse_args(argv) -> tuple[FractalType, complex]:
    """Return the fractal to draw and the Julia constant to use."""
    args = list(argv)
    if not 1 <= len(args) <= 3:
        raise UsageError("expected one to three arguments")
    kind = _NAMES.get(args[0])
    if kind is None:
        raise UsageError(f"unknown fractal: {args[0]!r}")
    julia_c = DEFAULT_JULIA_C
    if kind is FractalType.JULIA:
        if len(args) != 3 or not all(is_valid_number(a) for a in args[1:]):
            raise UsageError("julia needs a real and an imaginary part")
        julia_c = complex(parse_float(args[1]), parse_float(args[2]))
    return kind, julia_c


def _to_surface_array(packed: np.ndarray) -> np.ndarray:
    rgb = np.stack(
        ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF), axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def _run_window(view: View) -> None:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption("Fractol")
        keymap = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
        }

        def draw() -> None:
            pygame.surfarray.blit_array(screen, _to_surface_array(view.render()))
            pygame.display.flip()

        draw()
        running = True
        while running:
            event = pygame.event.wait()
            redraw = False
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = view.handle_key(keymap.get(event.key, event.key))
                redraw = running
            elif event.type == pygame.MOUSEBUTTONDOWN:
                redraw = view.handle_scroll(event.button, *event.pos)
            elif event.type == pygame.MOUSEMOTION:
                view.track_mouse(*event.pos)
            if redraw:
                draw()
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Parse arguments, then show the fractal until the window is closed."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        kind, julia_c = parse_args(argv)
    except UsageError:
        print(usage(), end="")
        return 1
    _run_window(View(kind, julia_c=julia_c))
    return 0


if __name__ == "__main__":
    sys.exit(main())