"""Draw a single pixel into an image and show it in a window."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

WIDTH = 1920
HEIGHT = 1080
TITLE = "Hello world!"


class Image:
    """A 32-bit little-endian pixel buffer with rows ``line_length`` bytes apart."""

    bits_per_pixel = 32
    endian = 0

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.line_length = width * (self.bits_per_pixel // 8)
        self.buffer = bytearray(self.line_length * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.line_length + x * (self.bits_per_pixel // 8)

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Store ``color`` as an unsigned 32-bit value at pixel (x, y)."""
        offset = self._offset(x, y)
        self.buffer[offset : offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, "little")

    def __getitem__(self, position: Tuple[int, int]) -> int:
        x, y = position
        offset = self._offset(x, y)
        return int.from_bytes(self.buffer[offset : offset + 4], "little")


def _rgb_bytes(image: Image) -> bytes:
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = image.buffer[2::4]
    rgb[1::3] = image.buffer[1::4]
    rgb[2::3] = image.buffer[0::4]
    return bytes(rgb)


def _show(image: Image, title: str) -> None:
    import pygame

    pygame.init()
    try:
        size = (image.width, image.height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        surface = pygame.image.frombuffer(_rgb_bytes(image), size, "RGB")
        screen.blit(surface, (0, 0))
        pygame.display.flip()
        clock = pygame.time.Clock()
        while not any(event.type == pygame.QUIT for event in pygame.event.get()):
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window showing one red pixel until it is closed."""
    image = Image(WIDTH, HEIGHT)
    image.pixel_put(5, 5, 0x00FF0000)
    _show(image, TITLE)
    return 0