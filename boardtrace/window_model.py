"""Double-buffered drawing model for a window."""

from __future__ import annotations

from .frame_buffer import BMPFormatFrameBuffer, FrameBuffer, WindowFrameBuffer


class WindowModel:
    """Holds two drawing buffers and the buffer handed to the display.

    The application draws into the current buffer. ``update_render`` copies it
    to the window buffer and switches to the other one.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._frame_buffers = (
            BMPFormatFrameBuffer(width, height),
            BMPFormatFrameBuffer(width, height),
        )
        self._frame_buffer_index = 0
        self._last_index: int | None = None
        self._window_frame_buffer = WindowFrameBuffer(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def window_frame_buffer(self) -> WindowFrameBuffer:
        """The buffer whose contents are shown in the window."""
        return self._window_frame_buffer

    @property
    def current_frame_buffer(self) -> FrameBuffer:
        """The buffer to draw the next frame into."""
        return self._frame_buffers[self._frame_buffer_index]

    @property
    def last_frame_buffer(self) -> FrameBuffer | None:
        """The buffer most recently copied to the window, or None before the first frame."""
        if self._last_index is None:
            return None
        return self._frame_buffers[self._last_index]

    def update_render(self) -> None:
        """Copy the current buffer to the window buffer and switch buffers."""
        self._window_frame_buffer.flash(self.current_frame_buffer)
        self._last_index = self._frame_buffer_index
        self._frame_buffer_index = (self._frame_buffer_index + 1) % 2