# boardtrace

boardtrace is a compact ray tracer written in pure Python with no third-party
dependencies. It comes with a ready-made scene, a checkered reversi board
covered by an 8 by 8 grid of flat black stones, and renders it into in-memory
frame buffers of packed 32-bit RGB pixels that can be saved as PPM images.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

Installing the package provides the `boardtrace` command. It builds the board
scene, renders the requested number of frames and, when asked, saves the last
finished frame:

```
boardtrace --size 320 --frames 1 --output board.ppm
```

- `--size` – screen width in pixels (default 640); the height follows from a
  16:9 aspect ratio.
- `--frames` – number of frames to render (default 1).
- `--output` – path of a binary PPM (P6) file to write the last frame to.
  Without it nothing is written.

## Library use

The building blocks can be used on their own:

- `Vec3` (`boardtrace.vec3`) is an immutable vector for points, directions and
  colours; `Ray` (`boardtrace.ray`) keeps a normalised copy of its direction.
- `Sphere`, `Plane` and `Cylinder` (`boardtrace.shapes`) are scene objects,
  collected in a `HittableList` (`boardtrace.hittable`) and arranged in a
  `BvhNode` tree (`boardtrace.bvh`). Hits are reported as `HitRecord` objects,
  or `None` for a miss.
- `SolidColor` and `CheckerTexture` (`boardtrace.texture`) feed a `Lambertian`
  material (`boardtrace.material`), lit by a directional `LightSpace`
  (`boardtrace.light`). `Metal` exists but always shades black.
- `Camera` (`boardtrace.camera`) produces rays for normalised screen
  coordinates with the origin at the top left; `RayTraceSpace`
  (`boardtrace.raytrace_space`) ties the world, camera and light together.
  Call `build_bvh()` after adding objects; `ray_color()` and
  `ray_hit_record()` raise `RuntimeError` until then.
- `FrameBuffer`, `BMPFormatFrameBuffer` (stored bottom-up, addressed top-down)
  and `WindowFrameBuffer` (filled by `flash()`, a raw copy of another buffer)
  live in `boardtrace.frame_buffer`.
- `WindowModel` (`boardtrace.window_model`) double-buffers drawing, and
  `WindowController` with `WindowView` (`boardtrace.controller`) run the frame
  loop.
- `Stone`, `Point` and `StoneTypeDataStorage` (`boardtrace.board`) are plain
  board data types.

A complete render in a few lines:

```python
from boardtrace.scene import RayTraceWindowModel, build_board_space, write_ppm

space = build_board_space(320)
model = RayTraceWindowModel(space)
model.update_render()
write_ppm(model.presented_frame_buffer, "board.ppm")
```

`update_render()` clears the frame to gray and traces it in horizontal bands,
one per CPU reported by `os.cpu_count()`, each band `height // cpus` rows
tall. Rows left over after the last band keep the gray background.

Rays that miss every object take a colour blended from white to light blue
according to the vertical part of their direction; surfaces are shaded with a
single directional light using Lambert's cosine law. Each pixel gets one ray
and rays are not bounced.

## What it does not do

- There is no on-screen window. `WindowView` runs the frame loop headlessly,
  keeps the last frame as bytes and records the frame rate in its `title`;
  showing an image means writing it to a file with `write_ppm`.
- There is no reversi game: no move rules, players or computer opponent. The
  scene only draws a fixed board, and `boardtrace.board` holds data types
  without game logic.