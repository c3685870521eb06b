# fractview

An interactive viewer for three escape-time fractals: the Mandelbrot set,
Julia sets and the Burning Ship. It opens an 800×800 window titled
"Fractol" and lets you pan, zoom and cycle colours. Every point is iterated
at most 100 times; points that never escape are drawn black.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
fractview mandelbrot
fractview julia <real> <imaginary>
fractview burning_ship
```

A Julia set needs both parts of its constant, written as plain decimal
numbers with an optional sign and at most one dot (no exponents):

```
fractview julia -0.33 0.67
fractview julia -0.7 0.27015
```

With missing, extra or malformed arguments the program prints a usage
summary to standard output and exits with status 1.

## Controls

| Input        | Action                                            |
|--------------|---------------------------------------------------|
| ESC          | Exit                                              |
| Arrow keys   | Move the view by one unit divided by the zoom     |
| Mouse wheel  | Zoom in or out by 1.5× around the pointer         |
| C            | Shift colours (wraps back to the start)           |
| R            | Reset zoom, position and colours                  |

Closing the window also exits.

## Using it from Python

The computation works without opening a window:

```python
from fractview.fractals import FractalType, mandelbrot, julia, burning_ship
from fractview.view import View

mandelbrot(complex(0, 0), 100)        # 100: the origin never escapes
view = View(FractalType.MANDELBROT)
counts = view.iteration_counts()      # 800×800 array of escape counts
pixels = view.render()                # 800×800 array of packed 0xRRGGBB ints
```

- `fractview.fractals.escape_counts(kind, points, max_iter, julia_c)` computes
  escape counts for a whole NumPy array of complex points at once.
- `View` holds the zoom, offsets and colour shift. `handle_key`,
  `handle_scroll`, `shift_colors` and `reset` change them; `plane_points`
  gives the complex value of every pixel and `color_for` the colour of one
  iteration count.
- `fractview.app.parse_args(argv)` turns command-line arguments into a
  `FractalType` and a Julia constant, raising `UsageError` when they are
  not understood; `usage()` returns the help text.
- `fractview.numbers` has `is_valid_number`, `parse_float` and `create_rgb`.