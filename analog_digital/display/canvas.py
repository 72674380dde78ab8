"""PIL-backed raster surface with the drawing primitives the scenes call into."""

from PIL import Image, ImageDraw

# Classic 5x7 glyphs, one byte per column, LSB is the top row.
_GLYPHS = {
    "0": (0x3E, 0x51, 0x49, 0x45, 0x3E),
    "1": (0x00, 0x42, 0x7F, 0x40, 0x00),
    "2": (0x42, 0x61, 0x51, 0x49, 0x46),
    "3": (0x21, 0x41, 0x45, 0x4B, 0x31),
    "4": (0x18, 0x14, 0x12, 0x7F, 0x10),
    "5": (0x27, 0x45, 0x45, 0x45, 0x39),
    "6": (0x3C, 0x4A, 0x49, 0x49, 0x30),
    "7": (0x01, 0x71, 0x09, 0x05, 0x03),
    "8": (0x36, 0x49, 0x49, 0x49, 0x36),
    "9": (0x06, 0x49, 0x49, 0x29, 0x1E),
}

CHAR_WIDTH = 6
CHAR_HEIGHT = 8

BLACK = (0, 0, 0)


class Canvas:
    """Renders one frame into an RGB image; show() hands it to the display."""

    def __init__(self, width: int, height: int, display=None):
        self._width = width
        self._height = height
        self._display = display
        # Pre-allocate image and draw context (reused every frame)
        self._img = Image.new("RGB", (width, height), BLACK)
        self._draw = ImageDraw.Draw(self._img)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    @property
    def image(self) -> Image.Image:
        """The internal frame image (reused, copy before keeping)."""
        return self._img

    @staticmethod
    def color(r: int, g: int, b: int) -> tuple:
        """Build a color at the panel's RGB565 precision."""
        return (r & 0xF8, g & 0xFC, b & 0xF8)

    def fill_screen(self, color: tuple):
        self._draw.rectangle([0, 0, self._width - 1, self._height - 1], fill=color)

    def draw_pixel(self, x: int, y: int, color: tuple):
        self._draw.point((x, y), fill=color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: tuple):
        self._draw.line([(x0, y0), (x1, y1)], fill=color)

    def draw_fast_hline(self, x: int, y: int, w: int, color: tuple):
        if w <= 0:
            return
        self._draw.line([(x, y), (x + w - 1, y)], fill=color)

    def draw_fast_vline(self, x: int, y: int, h: int, color: tuple):
        if h <= 0:
            return
        self._draw.line([(x, y), (x, y + h - 1)], fill=color)

    def draw_circle(self, cx: int, cy: int, r: int, color: tuple):
        if r < 0:
            return
        if r == 0:
            self.draw_pixel(cx, cy, color)
            return
        self._draw.ellipse([cx - r, cy - r, cx + r, cy + r], outline=color)

    def fill_circle(self, cx: int, cy: int, r: int, color: tuple):
        if r < 0:
            return
        if r == 0:
            self.draw_pixel(cx, cy, color)
            return
        self._draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=color)

    def draw_char(self, x: int, y: int, char: str, color: tuple, bg: tuple,
                  scale: int = 1):
        """Draw one character cell (6x8 base) scaled by an integer factor.

        Only digits have glyphs; anything else draws a blank background cell.
        """
        cell = Image.new("RGB", (CHAR_WIDTH, CHAR_HEIGHT), bg)
        pixels = cell.load()
        for col, bits in enumerate(_GLYPHS.get(char, ())):
            for row in range(CHAR_HEIGHT):
                if bits & (1 << row):
                    pixels[col, row] = color
        if scale > 1:
            cell = cell.resize((CHAR_WIDTH * scale, CHAR_HEIGHT * scale),
                               Image.NEAREST)
        self._img.paste(cell, (x, y))

    def show(self):
        """Present the finished frame."""
        if self._display is not None:
            self._display.update(self._img)
