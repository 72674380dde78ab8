from analog_digital.display.canvas import Canvas


class FakeDisplay:
    def __init__(self):
        self.frames = []

    def update(self, image):
        self.frames.append(image.copy())


def test_color_is_quantized_to_rgb565():
    assert Canvas.color(255, 255, 255) == (248, 252, 248)
    assert Canvas.color(15, 3, 7) == (8, 0, 0)


def test_fill_and_pixels():
    canvas = Canvas(8, 6)
    canvas.fill_screen((8, 0, 0))
    canvas.draw_pixel(2, 3, (248, 252, 248))
    # Off-screen writes are clipped, not errors
    canvas.draw_pixel(-1, 100, (248, 0, 0))

    img = canvas.image
    assert img.getpixel((0, 0)) == (8, 0, 0)
    assert img.getpixel((2, 3)) == (248, 252, 248)
    assert (canvas.width(), canvas.height()) == (8, 6)


def test_fast_lines_cover_exact_length():
    canvas = Canvas(10, 10)
    canvas.draw_fast_hline(2, 4, 3, (248, 0, 0))
    canvas.draw_fast_vline(7, 1, 2, (0, 252, 0))
    canvas.draw_fast_hline(0, 0, 0, (248, 0, 0))

    img = canvas.image
    assert [img.getpixel((x, 4)) for x in range(1, 6)] == [
        (0, 0, 0), (248, 0, 0), (248, 0, 0), (248, 0, 0), (0, 0, 0),
    ]
    assert [img.getpixel((7, y)) for y in range(0, 4)] == [
        (0, 0, 0), (0, 252, 0), (0, 252, 0), (0, 0, 0),
    ]
    assert img.getpixel((0, 0)) == (0, 0, 0)


def test_circles():
    canvas = Canvas(40, 40)
    canvas.fill_screen((248, 252, 248))
    canvas.draw_circle(20, 20, 8, (0, 0, 0))
    img = canvas.image
    assert img.getpixel((20, 20)) == (248, 252, 248)
    assert (0, 0, 0) in [img.getpixel((x, 20)) for x in range(26, 30)]

    canvas.fill_circle(20, 20, 4, (248, 0, 0))
    assert img.getpixel((20, 20)) == (248, 0, 0)
    assert img.getpixel((20, 20 + 10)) == (248, 252, 248)


def test_draw_char_scales_glyph_over_background():
    canvas = Canvas(20, 20)
    canvas.draw_char(0, 0, "1", (248, 252, 248), (8, 0, 0), 2)

    img = canvas.image
    # Column 2 of '1' is solid for rows 0-6, row 7 is background
    assert img.getpixel((4, 0)) == (248, 252, 248)
    assert img.getpixel((5, 13)) == (248, 252, 248)
    assert img.getpixel((4, 14)) == (8, 0, 0)
    # Sixth column is spacing
    assert img.getpixel((10, 6)) == (8, 0, 0)
    # Outside the 12x16 cell is untouched
    assert img.getpixel((12, 0)) == (0, 0, 0)


def test_draw_char_without_glyph_is_blank_cell():
    canvas = Canvas(20, 20)
    canvas.draw_char(2, 2, "x", (248, 252, 248), (8, 0, 0), 2)

    img = canvas.image
    cell = [img.getpixel((x, y)) for x in range(2, 14) for y in range(2, 18)]
    assert set(cell) == {(8, 0, 0)}
    assert img.getpixel((14, 2)) == (0, 0, 0)


def test_show_hands_frame_to_display():
    display = FakeDisplay()
    canvas = Canvas(4, 4, display)
    canvas.fill_screen((248, 0, 0))

    canvas.show()
    canvas.show()

    assert len(display.frames) == 2
    assert display.frames[0].getpixel((3, 3)) == (248, 0, 0)
