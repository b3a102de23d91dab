"""The board scene rendered by ray tracing into a window model."""

from __future__ import annotations

import argparse
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .controller import WindowController, WindowView
from .frame_buffer import BMPFormatFrameBuffer, FrameBuffer, WindowFrameBuffer
from .material import Lambertian
from .raytrace_space import RayTraceSpace
from .shapes import Cylinder, Plane
from .texture import CheckerTexture, SolidColor
from .utility import rgb01_to_255
from .vec3 import Color, Point3, Vec3

_BACKGROUND_GRAY = 128
_MAX_DEPTH = 1
STONE_COUNT = 8


class RayTraceWindowModel:
    """Double-buffered window model whose frames are ray traced from a space."""

    def __init__(self, space: RayTraceSpace) -> None:
        if space.width < 2 or space.height < 2:
            raise ValueError(
                f"screen must be at least 2x2 pixels, got {space.width}x{space.height}"
            )
        self.space = space
        self.width = space.width
        self.height = space.height
        self._inv_width = 1.0 / (self.width - 1)
        self._inv_height = 1.0 / (self.height - 1)
        self.frame_buffers = (
            BMPFormatFrameBuffer(self.width, self.height),
            BMPFormatFrameBuffer(self.width, self.height),
        )
        self.frame_buffer_index = 0
        self.window_frame_buffer = WindowFrameBuffer(self.width, self.height)

    @property
    def current_frame_buffer(self) -> BMPFormatFrameBuffer:
        """The buffer the next frame is drawn into."""
        return self.frame_buffers[self.frame_buffer_index]

    @property
    def presented_frame_buffer(self) -> BMPFormatFrameBuffer:
        """The buffer holding the most recently finished frame."""
        return self.frame_buffers[1 - self.frame_buffer_index]

    def update_render(self) -> None:
        """Trace a frame in horizontal bands, one per CPU, then present it."""
        buffer = self.current_frame_buffer
        buffer.clear(_BACKGROUND_GRAY)

        workers = os.cpu_count() or 1
        band = self.height // workers
        with ThreadPoolExecutor(max_workers=workers) as pool:
            list(
                pool.map(
                    lambda i: self.render_rows(0, self.width, band * i, band * (i + 1)),
                    range(workers),
                )
            )

        self.window_frame_buffer.flash(buffer)
        self.frame_buffer_index = (self.frame_buffer_index + 1) % 2

    def render_rows(self, x0: int, x1: int, y0: int, y1: int) -> None:
        """Trace columns x0..x1-1 of rows y0..y1-1 into the current buffer."""
        buffer = self.current_frame_buffer
        camera = self.space.camera
        for y in range(y0, y1):
            v = y * self._inv_height
            for x in range(x0, x1):
                ray = camera.get_ray(x * self._inv_width, v)
                color = self.space.ray_color(ray, _MAX_DEPTH)
                buffer.set_rgb(
                    x,
                    y,
                    rgb01_to_255(color.x),
                    rgb01_to_255(color.y),
                    rgb01_to_255(color.z),
                )


def build_board_space(screen_size: int) -> RayTraceSpace:
    """Create the reversi board with a full grid of stones, ready to trace."""
    space = RayTraceSpace(screen_size, 16.0, 9.0)

    checker = CheckerTexture(
        SolidColor(Color(0.0, 1.0, 1.0)),
        SolidColor(Color(0.0, 1.0, 0.0)),
        8,
    )
    black = SolidColor(Color(0.0, 0.0, 0.0))

    space.world.add(Plane(-0.85, 0.85, -0.7, 1.0, 0.0, Lambertian(checker)))

    for y in range(STONE_COUNT):
        for x in range(STONE_COUNT):
            center = Point3(-1.0 + 0.25 + x * 0.215, 0.0, -1.0 + 0.4 + y * 0.21)
            space.world.add(
                Cylinder(center, Vec3(0.0, 0.01, 0.0), 0.1, Lambertian(black))
            )

    space.build_bvh()
    return space


def write_ppm(frame_buffer: FrameBuffer, path) -> None:
    """Save a frame buffer as a binary PPM image, top row first."""
    width, height = frame_buffer.width, frame_buffer.height
    data = bytearray(f"P6\n{width} {height}\n255\n".encode("ascii"))
    for y in range(height):
        for x in range(width):
            pixel = frame_buffer.get_pixel(x, y)
            data += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    Path(path).write_bytes(bytes(data))


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def main(argv=None) -> int:
    """Render the board scene and optionally save the last frame."""
    parser = argparse.ArgumentParser(
        prog="boardtrace", description="Ray trace the reversi board scene."
    )
    parser.add_argument("--size", type=_positive_int, default=640,
                        help="screen width in pixels")
    parser.add_argument("--frames", type=_positive_int, default=1,
                        help="number of frames to render")
    parser.add_argument("--output", type=Path, default=None,
                        help="write the last frame to this PPM file")
    args = parser.parse_args(argv)

    model = RayTraceWindowModel(build_board_space(args.size))
    view = WindowView(args.frames)
    controller = WindowController(model, view)
    if not controller.start():
        return 1
    controller.end()

    if args.output is not None:
        write_ppm(model.presented_frame_buffer, args.output)
    return 0