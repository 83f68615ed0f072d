# fdfview

`fdfview` shows `.fdf` height maps as wireframes. A map is a grid of heights
separated by spaces, with one row per line. A cell can set its own colour by
adding a hexadecimal value after a comma, as in `10,0xFF0000`. The viewer
projects the grid and draws a line between each cell and its right-hand and
lower neighbours.

## Installing

```
pip install .
```

This installs the `fdfview` command. The window is drawn with `pygame`.

## Usage

```
fdfview maps/42.fdf
fdfview --bonus maps/42.fdf
```

Give exactly one map. The file name must contain `.fdf`, and the file must have
at least one line. Every row must hold the same number of values, and the map
must be at least 2 × 2. If any check fails, the command prints an error message
and exits with a non-zero status. When the window closes normally, the command
prints a closing message and exits with 0.

The window is 1300 × 900. A menu panel down the left side lists the keys.

### Keys

In both modes:

| Key   | Action                    |
|-------|---------------------------|
| `Esc` | Quit                      |
| `x`   | Increase the height scale |
| `z`   | Decrease the height scale |

With `--bonus` you also get:

| Key             | Action                                    |
|-----------------|-------------------------------------------|
| `=` / `-`       | Zoom in / out                             |
| Arrow keys      | Shift the drawing                         |
| `w` / `s`       | Rotate about the X axis                   |
| `a` / `d`       | Rotate about the Y axis                   |
| `q` / `e`       | Rotate about the Z axis                   |
| `1` / `2` / `3` | Isometric / oblique / top-down projection |
| `r`             | Reset the camera                          |

In plain mode, cells without a colour of their own are drawn white. With
`--bonus` they are coloured by height, with one colour each for cells above
zero, at zero and below zero.

## Library use

You can use the modules without opening a window:

```python
from fdfview.mapfile import read_map
from fdfview.camera import Camera
from fdfview.canvas import Canvas
from fdfview.render import render

heightmap = read_map("maps/42.fdf", height_colors=True)
camera = Camera.for_map(heightmap)
canvas = Canvas(1300, 900)
labels = render(canvas, heightmap, camera, bonus=True)
pixels = canvas.to_bytes()  # little-endian 32-bit pixels, row by row
```

- `fdfview.mapfile`: `read_map`, `parse_map`, `valid_map_name`, and the
  `HeightMap` and `Point` classes.
- `fdfview.camera`: `Camera` (with `for_map`, `reset` and `handle_key`),
  `Projection`, `scale_factor` and `project`.
- `fdfview.canvas`: `Canvas` (with `put_pixel`, `get_pixel`, `fill` and
  `to_bytes`) and `draw_line`, which draws lines with Bresenham's algorithm.
- `fdfview.render`: `render`, `render_background`, `render_menu_bar` and
  `menu_labels`.
- `fdfview.app`: `Viewer` (with `press`, `frame` and `run`) and `main`.
- `fdfview.errors`: `ExitCode`, `FdfError` and `message`.
- `fdfview.xpm`: `xpm_to_image` and `xpm_file_to_image` read XPM images into a
  `Canvas`. `XpmError` is raised on bad data.
- `fdfview.colors`: `lookup_color` gives the 0xRRGGBB value of an X11 colour
  name. Case is ignored.
- `fdfview.visual`: `color_shifts` and `good_color` convert colours to pixel
  values for visuals with fewer than 24 bits.

## Limits

- `render` does not draw text onto the canvas. It returns the menu lines as
  `Label` values, and only `Viewer.run` draws them in the window.
- The window has a fixed size and cannot be resized.
- The viewer does not save images.
- XPM loading is available to library users only. The viewer itself does not
  use it.