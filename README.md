# softrender

softrender draws wireframe meshes entirely in software. Vertices are taken
step by step through the classic pipeline:

1. **local space**: the mesh's own coordinates
2. **world space**: after rotation (yaw, then pitch, then roll), scale and translation
3. **view space**: relative to a camera at a given position and orientation
4. **clip space**: after perspective projection through a viewing frustum
5. **screen space**: pixel coordinates on a canvas

Each stage is a plain function. The same scene can also be built with 4×4
model, view and projection matrices.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The `softrender` command

```
softrender --help
```

opens nothing; it lists the options. Running `softrender` opens a window and
renders one demo scene each frame until the window is closed.

| option | meaning |
| --- | --- |
| `--demo NAME` | the scene to show (default `local`, see below) |
| `--model PATH` | OBJ file for the `model` and `matrices` demos (default `models/bunny.obj`) |
| `--width N`, `--height N` | window size (default 1280×720); must be positive |
| `--fullscreen` | use a fullscreen window at the display's size |
| `--frames N` | stop after N frames; 0 (the default) runs until the window is closed |
| `--no-fps` | do not print the frame rate to standard output each frame |

The demos:

- `static2d`: a house outline given in pixel coordinates
- `clip`: the same house given in clip coordinates
- `vertex3d`: a unit cube in clip coordinates (its z is ignored)
- `view`: a cube in view space, projected through a 60° frustum
- `world`: a red cube in world space seen by a camera
- `local`: three cubes (red, green, blue), each placed by its own transform; the red one slowly turns
- `model`: the mesh from `--model`, scaled by 9, drifting slowly along +z
- `matrices`: the mesh from `--model`, turning about y, drawn with a model matrix, an identity view matrix and a perspective projection matrix

In the `world` and `local` demos, the number keys 1 to 4 move the camera to
preset positions. If the model file cannot be read, the command prints an
error and exits with status 1.

## Using the library

### The pipeline, one vertex at a time (`softrender.geometry`)

```python
from softrender.geometry import (
    Vertex3D, Frustum, local_to_world, world_to_view, view_to_clip, clip_to_screen,
)

frustum = Frustum.from_fov(60.0, 16 / 9, 0.1, 100.0)

local = Vertex3D(0.5, 0.5, 0.5)
world = local_to_world((0, 0, -3), (0, 0, 0), (2, 2, 2), local)
view = world_to_view((0, 0, 3), (0, 0, 0), world)
clip = view_to_clip(frustum, view)
x, y = clip_to_screen(1920, 1080, clip)
```

Orientations are `(pitch, yaw, roll)` in radians. `view_to_clip` raises
`ZeroDivisionError` for a vertex with `z == 0`.

### Meshes (`softrender.meshes`)

`Mesh` holds vertices and a flat tuple of face indices, three per triangle;
`Mesh.triangles()` yields each face as three vertices. Built-in shapes are
`house_screen()`, `house_clip()`, `cube()` and `cube_view_space()`.

`load_obj(path)` and `parse_obj(lines)` read the `v` and `f` statements of a
Wavefront OBJ document; polygons are split into triangle fans, negative
indices are supported and other statements are ignored. Problems raise
`MeshLoadError`.

### Drawing (`softrender.raster`, `softrender.scenes`)

`Canvas(width, height, background)` is an RGBA pixel grid with the origin at
the top left. It has `clear`, `get_pixel`, `draw_pixel`, `draw_line` and
`draw_triangle`, and a read-only `pixels` array shaped `(height, width, 4)`.
Drawing off the canvas is dropped. `Color` is an RGBA colour with constants
`BLACK`, `WHITE`, `RED`, `GREEN` and `BLUE`. `line_points(start, end)` yields
the pixels of a line, both ends included.

`softrender.scenes` draws a whole mesh at any stage with `draw_screen_mesh`,
`draw_clip_mesh`, `draw_view_mesh`, `draw_world_mesh`, `draw_local_mesh` and
`draw_matrix_mesh`. Each returns the number of triangles drawn; a triangle with
a vertex that cannot be projected is skipped. `Transform` and `Camera` place a
mesh and a camera, and `camera_preset(number)` returns the presets 1 to 4.

```python
from softrender.geometry import Frustum
from softrender.meshes import cube
from softrender.raster import Canvas, Color
from softrender.scenes import Transform, camera_preset, draw_local_mesh

canvas = Canvas(640, 480)
frustum = Frustum.from_fov(60.0, 640 / 480, 0.1, 100.0)
draw_local_mesh(canvas, frustum, camera_preset(1), Transform(), cube(), Color.WHITE)
```

`softrender.app.render_frame(demo, canvas, state)` advances and draws one frame
of a `Demo` on any canvas, without opening a window.

### Matrices (`softrender.matrices`)

`build_model_matrix`, `build_view_matrix` and `build_projection_matrix`
return numpy 4×4 arrays. `build_mvp(model, view, projection)` combines them so
the model is applied first, and `transform_point(matrix, vertex)` transforms a
point and divides by w.

## What it does not do

Triangles are drawn as outlines only: there is no filling, shading, depth
buffer or back-face removal, and no clipping against the near or far planes.
The OBJ reader takes geometry only, not normals, textures or materials.