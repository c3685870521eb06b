"""Viewport state, input handling and image rendering."""

import math
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from .fractals import DEFAULT_JULIA_C, FractalType, escape_counts
from .numbers import create_rgb

WIDTH = 800
HEIGHT = 800
MAX_ITER = 100
ZOOM_IN = 4
ZOOM_OUT = 5
ZOOM_FACTOR = 1.5
COLOR_STEP = 10
PLANE_SPAN = 4.0


class Key(IntEnum):
    """Key codes of the navigation keys."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


_COLOR_KEYS = {ord("c"), ord("C")}
_RESET_KEYS = {ord("r"), ord("R")}


@dataclass
class View:
    """What part of the plane is shown, and how it is coloured."""

    kind: FractalType
    julia_c: complex = DEFAULT_JULIA_C
    width: int = WIDTH
    height: int = HEIGHT
    max_iter: int = MAX_ITER
    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    color_shift: int = 0
    mouse_x: int | None = None
    mouse_y: int | None = None

    def __post_init__(self) -> None:
        if self.mouse_x is None:
            self.mouse_x = self.width // 2
        if self.mouse_y is None:
            self.mouse_y = self.height // 2

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return False when the view should close."""
        step = 1.0 / self.zoom
        if key == Key.ESC:
            return False
        if key == Key.LEFT:
            self.offset_x -= step
        elif key == Key.RIGHT:
            self.offset_x += step
        elif key == Key.UP:
            self.offset_y -= step
        elif key == Key.DOWN:
            self.offset_y += step
        elif key in _COLOR_KEYS:
            self.shift_colors()
        elif key in _RESET_KEYS:
            self.reset()
        return True

    def handle_scroll(self, button: int, x: int, y: int) -> bool:
        """Zoom around the pixel (x, y); return True if the view changed."""
        if button not in (ZOOM_IN, ZOOM_OUT):
            return False
        mouse_re = (x - self.width / 2.0) * (
            PLANE_SPAN / (self.zoom * self.width)
        ) + self.offset_x
        mouse_im = (y - self.height / 2.0) * (
            PLANE_SPAN / (self.zoom * self.height)
        ) + self.offset_y
        if button == ZOOM_IN:
            self.offset_x = mouse_re + (self.offset_x - mouse_re) / ZOOM_FACTOR
            self.offset_y = mouse_im + (self.offset_y - mouse_im) / ZOOM_FACTOR
            self.zoom *= ZOOM_FACTOR
        else:
            self.offset_x = mouse_re + (self.offset_x - mouse_re) * ZOOM_FACTOR
            self.offset_y = mouse_im + (self.offset_y - mouse_im) * ZOOM_FACTOR
            self.zoom /= ZOOM_FACTOR
        return True

    def track_mouse(self, x: int, y: int) -> None:
        """Remember the last pointer position."""
        self.mouse_x = x
        self.mouse_y = y

    def shift_colors(self) -> None:
        """Rotate the palette, wrapping back to zero past 255."""
        self.color_shift += COLOR_STEP
        if self.color_shift > 255:
            self.color_shift = 0

    def reset(self) -> None:
        """Return to the initial zoom, position and palette."""
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.color_shift = 0

    def color_for(self, iterations: int) -> int:
        """Packed 0xRRGGBB colour of a pixel with this iteration count."""
        if iterations == self.max_iter:
            return 0x000000
        phase = 0.1 * iterations + self.color_shift
        r = int(math.sin(phase) * 127 + 128)
        g = int(math.cos(phase) * 127 + 128)
        b = int(math.sin(phase + 3) * 127 + 128)
        return create_rgb(r, g, b)

    def plane_points(self) -> np.ndarray:
        """Complex value of every pixel, indexed as [row, column]."""
        scale = PLANE_SPAN / (self.zoom * self.width)
        xs = (np.arange(self.width) - self.width // 2) * scale + self.offset_x
        ys = (np.arange(self.height) - self.height // 2) * scale + self.offset_y
        return xs[np.newaxis, :] + 1j * ys[:, np.newaxis]

    def iteration_counts(self) -> np.ndarray:
        """Escape iteration count of every pixel."""
        return escape_counts(
            self.kind, self.plane_points(), self.max_iter, self.julia_c
        )

    def render(self) -> np.ndarray:
        """Packed 0xRRGGBB colour of every pixel, indexed as [row, column]."""
        palette = np.array(
            [self.color_for(i) for i in range(self.max_iter + 1)], dtype=np.int64
        )
        return palette[self.iteration_counts()]