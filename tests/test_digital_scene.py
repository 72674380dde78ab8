import random

from analog_digital.config import Config, DigitConfig
from analog_digital.digital.digits import DigitColumn
from analog_digital.digital.scene import DigitalScene

from conftest import RecordingCanvas


def make_scene(height=400, seed=42):
    scene = DigitalScene(Config(), random.Random(seed))
    scene.init(64, height)
    return scene


def test_first_frame_populates_two_eyes():
    scene = make_scene()
    canvas = RecordingCanvas(64, 400)

    scene.render(canvas)

    assert scene.eyes.active_count() >= 2
    assert canvas.shown == 1
    assert canvas.calls[0][0] == "fill_screen"


def test_background_red_stays_near_band():
    scene = make_scene()
    canvas = RecordingCanvas(64, 400)

    for _ in range(2000):
        scene.render(canvas)
        assert 14 <= scene.bg_red <= 51


def test_blinks_produce_ripples():
    scene = make_scene()
    canvas = RecordingCanvas(64, 400)

    seen = 0
    for _ in range(600):
        scene.render(canvas)
        seen = max(seen, scene.ripples.active_count())
    assert seen > 0


def test_digit_spacing_tiles_the_height(rng):
    column = DigitColumn(DigitConfig(), rng)
    column.init(64, 192)

    assert column.char_offset == -18
    assert [d.y_offset for d in column.digits] == [-18 * i for i in range(12)]
    assert all(d.character in "01" for d in column.digits)


def test_digits_scroll_and_wrap(rng):
    column = DigitColumn(DigitConfig(), rng)
    column.init(64, 192)
    column.digits[0].y_offset = 191
    canvas = RecordingCanvas()

    column.update_and_draw(canvas, (8, 0, 0))

    assert column.digits[0].y_offset == -18
    assert column.digits[1].y_offset == -16
    # Wrapped digit sits at the spawn row and is not drawn yet
    drawn = canvas.of("draw_char")
    assert [args[1] for args in drawn] == [-16]
    x, y, char, color, bg, scale = drawn[0]
    assert (x, color, bg, scale) == (6, (255, 255, 255), (8, 0, 0), 4)
