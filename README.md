# isowire

isowire reads height maps and turns them into coloured points on an isometric
view sized for a 1280×720 picture. It provides these stages:

- parsing a map file into grid points;
- colouring each point by its height;
- scaling, projecting and centring the points;
- an in-memory 32-bit pixel buffer to draw into.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Map files

A map is a text file. Each line is one row of the grid. Each integer in a row,
separated by spaces, is the height of one point:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Every row must hold the same number of values, and each value must be a 32-bit
signed integer. Leading whitespace and a single `+` or `-` sign are allowed.
Blank lines at the end of the file are ignored. An empty file raises
`isowire.parsing.MapFormatError`, and so does a blank line before the last
row. A file that cannot be opened raises `OSError`.

## Library use

```python
from isowire.args import check_args
from isowire.canvas import Canvas
from isowire.parsing import parse_map
from isowire.projection import compute_dots

path = check_args(["map.fdf"])   # raises ArgumentError unless exactly one *.fdf name
dots = parse_map(path)           # list of Dot, with index_z and color filled in
compute_dots(dots)               # scale, isometric projection and centring, in place

canvas = Canvas()                # 1280 x 720 by default
for dot in dots:
    canvas.put_pixel(dot.x, dot.y, dot.color)
```

### Modules

- `isowire.args`: `check_args(argv)` takes the arguments without the program
  name. It returns the single map path, or raises `ArgumentError` with the
  message `Args: Too few arguments`, `Args: Too many arguments` or
  `Args: Invalid filename`.
- `isowire.parsing` provides these functions:
  - `read_map_lines(path)` returns the map's rows.
  - `parse_lines(lines)` turns rows into `Dot` values and colours them.
  - `parse_map(path)` does both.
  - `fill_colors(dots)` ranks the distinct heights. It then gives the lowest
    `LOW_COLOR` (`0xFB335B`) and steps each higher level towards `HIGH_COLOR`
    (`0x3585CD`).
- `isowire.projection` provides these names:
  - `compute_dots(dots)` scales the grid to the picture, projects it
    isometrically and centres it. A map of a single row or column raises
    `ZeroDivisionError`.
  - `get_extreme(which, dots)` returns a bound of the points' `x` or `y`
    values. The `Extreme` enum chooses the bound.
- `isowire.colors` provides these functions:
  - `get_t`, `get_r`, `get_g` and `get_b` read the channels of a packed TRGB
    integer.
  - `increment_color` and `decrease_color` step a colour's channels.
  - `compute_gradient` and `compute_color` give the per-pixel colour steps
    along a segment between two dots.
- `isowire.canvas`: `Canvas(width, height)` is a row-major buffer of unsigned
  32-bit colours. It provides `put_pixel` and `get_pixel`. Pixels are addressed
  as `y * width + x`. Writes outside the buffer are dropped. Reads outside it
  raise `IndexError`.
- `isowire.dot`: `Dot` holds a point's position, height, grid indices and
  colour. `Rgb` holds a per-channel colour step.
- `isowire.textutil`: `parse_int`, `split_words` and `count_words` are the
  text helpers used by the parser.

## What it does not do

isowire does not draw the lines between neighbouring points, and it does not
open a window to show a canvas. There is no command-line program. The package
stops at projected, coloured points and a pixel buffer that callers fill and
display themselves.