"""A small ray tracer that renders a reversi board scene into a frame buffer."""

__version__ = "0.1.0"