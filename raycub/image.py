"""RGBA pixel buffers and drawing primitives."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four channel values into a 32-bit RGBA colour."""
    return (r << 24 | g << 16 | b << 8 | a) & _MASK


class Image:
    """A width x height image stored as RGBA bytes, row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * 4)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y * self.width + x) * 4

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel to a 32-bit RGBA colour."""
        offset = self._offset(x, y)
        self.pixels[offset:offset + 4] = (color & _MASK).to_bytes(4, "big")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit RGBA colour of one pixel."""
        offset = self._offset(x, y)
        return int.from_bytes(self.pixels[offset:offset + 4], "big")

    def fill(self, color: int) -> None:
        """Set every pixel to one colour."""
        self.pixels[:] = (color & _MASK).to_bytes(4, "big") * (self.width * self.height)


def draw_line(image: Image, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Draw a Bresenham line, skipping points that fall outside the image."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        if 0 <= x0 < image.width and 0 <= y0 < image.height:
            image.put_pixel(x0, y0, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy