# glrhi

Building blocks for a batched 2D renderer. None of them needs a window system or a GPU.

- `glrhi.color.Color` and `glrhi.brush.Brush` hold RGBA colours. A brush also carries a `depth` value and a `type` tag.
  - Both have `set`, `set_rgb`, `rgb`, `rgba`, `clamp` and `blend`.
  - Equality compares values within a tolerance of 1e-6.
- `glrhi.march_camera.MarchCamera` and `glrhi.orthographic_camera.OrthographicCamera` handle the view.
  - Both offer `screen_to_world`, `translate`, `scale` (zoom about a screen point) and `zoom_to_range`.
  - Both hold their matrices row by row.
  - `orthographic_camera` also provides `multiply_matrices` for 4x4 matrices.
- `glrhi.render_common` holds plain data records:
  - `RectF`
  - `RenderSnap`
  - `PolylineData`
  - `TriangleData`
  - `TextureData`
  - `InstanceTexData`
  - `InstanceLineData`
  - `InstanceTriangleData`
- Random test-geometry generators:
  - `FakePolyLineData` in `glrhi.fake_polyline`.
  - `FakeTriangleData` in `glrhi.fake_triangle`.
  - `InstanceLineFakeData` and `InstanceTriangleFakeData` in `glrhi.fake_instances`.
  - `FakeTextureData` in `glrhi.fake_texture`. It paints solid, checkerboard, noise or gradient RGBA images.
  - `DataGenerator` in `glrhi.data_generator`. It builds ready-made batches of all of the above.
  - The shared random source in `glrhi.fake_base`: `seed`, `random_float`, `random_int` and `random_color`.
- `glrhi.texture_loader` loads images with Pillow:
  - `load_image`
  - `load_and_resize_image`
  - `build_texture_array`: missing or unreadable layers become a magenta placeholder.
  - `TextureLoadError`: raised for a missing or undecodable file.
- `glrhi.march_view.MarchView` is the state of a pan-and-zoom drawing view with rulers on its left and bottom edges.
  - Left clicks add world points to a polyline.
  - Middle-button drags pan the view.
  - The wheel zooms.
  - `ruler_step` and `label_position` give tick spacing and label placement.

## Install

```
pip install .
```

## Examples

Colours and brushes:

```python
from glrhi.color import Color
from glrhi.brush import Brush

red = Color(1.0, 0.0, 0.0)
mixed = red.blend(Color(0.0, 0.0, 1.0), 0.5)
print(mixed.rgba())        # (0.5, 0.0, 0.5, 1.0)

brush = Brush(0.2, 0.4, 0.6, 1.0, 0.5)
print(brush.rgb(), brush.depth)
```

Orthographic camera:

```python
from glrhi.orthographic_camera import OrthographicCamera

camera = OrthographicCamera()
camera.zoom_to_range(-10.0, -5.0, 10.0, 5.0, (800, 400))
print(camera.screen_to_world((400, 200), (800, 400)))   # the centre, (0.0, 0.0)
```

Test geometry:

```python
from glrhi.fake_base import seed
from glrhi.fake_polyline import FakePolyLineData

lines = FakePolyLineData()
seed(42)
lines.generate_lines(10, 2, 15)
print(lines.line_infos)
```

Creating any generator reseeds the shared random source from system entropy. To make output repeatable, call `glrhi.fake_base.seed` after creating the generator and before generating.

`DataGenerator.gen_line_data`, `gen_random_triangle_data` and `gen_random_texture_data` each create generators internally. Their output is therefore not made repeatable by an earlier `seed` call.

Textures are not created by this package. `FakeTextureData.generate_textures` and `DataGenerator.gen_random_texture_data` take an `upload(width, height, rgba_bytes)` callable that returns a texture id. `FakeTextureData.clear_texture` takes a matching `delete(texture_id)` callable.

## What it does not do

- It draws nothing.
  - There is no window, no OpenGL context, no shader and no renderer.
  - `MarchView` keeps the view's size, zoom, pan, points and ruler geometry. It also gives the projection matrix and label positions. Presenting them is left to the caller.
- It has no command-line program.

## Tests

```
pip install .[test]
pytest
```