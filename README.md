# rawrxd

A tiny software rasterizer. It projects triangle meshes with a perspective
camera (60° field of view), fills triangles with an edge-function coverage
test and a depth buffer, and draws the result either to a true-colour
terminal or to a pygame window.

## Installation

```
pip install .
```

## Modules

- `rawrxd.lin`: frozen dataclasses `Vec2`, `Vec3`, `Triangle2`, `Triangle3`
  and `Transform`. Vectors support `+`, `-`, `*` by a number and `dot`;
  `Vec2` also has `perp`, `perp_cc` and `transpose`, `Vec3` has `recip` and
  `trunc`. `Triangle2.depth_at(point)` returns the normalised weights of a
  point inside the triangle, or `None` when the point is outside, on an edge,
  or the triangle winds the wrong way. `Transform(yaw, pitch, roll,
  translation)` rotates a point and then translates it with `apply`.
- `rawrxd.color`: `Color(r, g, b)` with channels checked to be in 0..255,
  `as_u32()` packing to `0xRRGGBB`, `perceived_luminance()` in 0..1, and
  `Color.random()`. `Color.from_u32(packed)` recovers the red channel only;
  green and blue always come back as 255.
- `rawrxd.model`: `Model.from_faces(verts, faces)` builds a mesh from a list
  of `Vec3` vertices and 1-based polygon faces. Each polygon is fanned into
  triangles around its first vertex, and each triangle gets a random colour.
  An out-of-range or empty face raises `IndexError`.
  `Model.as_projected_triangles(transform, screen_size)` projects every
  triangle to screen space, and `world_to_screen_and_depth(point, transform,
  fov, screen_size)` projects a single point, keeping its depth as `z`.
- `rawrxd.renderer`: the abstract `Renderer` base class. It owns the depth
  buffer (`get_depth`, `set_depth`, `reset_depth_buffer`), `clear`, and the
  rasterising methods `draw_triangle(tri, color)` and
  `draw_model(model, transform)`. Subclasses provide `set_pixel`,
  `clear_pixels`, `size` and `commit`.
- `rawrxd.terminal`: `TerminalRenderer(cols=0, rows=0, stream=None)` draws
  each pixel as a coloured `█` cell with ANSI escape codes, queued with
  `push_code` and written on `commit`. `fit()` sizes it to the terminal of
  its output stream (raising `OSError` if there is none), `init()` switches
  to the alternate screen and hides the cursor, and `close()` switches back.
  It can be used as a context manager.
- `rawrxd.window`: `WindowRenderer(width, height, title="RAWR")` draws into a
  `0xRRGGBB` frame buffer shown in a pygame window. `commit()` presents the
  frame and processes window events; `is_open` turns false when the window
  is closed. `close()` shuts the display down. It can be used as a context
  manager.

## Example

```python
import math

from rawrxd.lin import Transform, Vec3
from rawrxd.model import Model
from rawrxd.terminal import TerminalRenderer

verts = [Vec3(-1, -1, 0), Vec3(1, -1, 0), Vec3(1, 1, 0), Vec3(-1, 1, 0)]
faces = [[1, 2, 3, 4]]
model = Model.from_faces(verts, faces)

with TerminalRenderer() as renderer:
    renderer.fit()
    renderer.init()
    angle = 0.0
    while True:
        angle = (angle + 0.007) % math.tau
        renderer.clear()
        renderer.draw_model(
            model,
            Transform(yaw=angle, translation=Vec3(0, 0, 3)),
        )
        renderer.commit()
```

Triangles whose projected vertices wind the other way are culled, so a
spinning flat shape is only visible from one side.

## What it does not do

The package has no mesh file loader and no command-line program: meshes are
built in code with `Model.from_faces`, and the render loop is yours to write.
There is no lighting or texturing; each triangle is filled with one flat
colour.

## Tests

```
pip install .[test]
pytest
```