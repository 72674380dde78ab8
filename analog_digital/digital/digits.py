"""Scrolling column of binary digits ("Matrix" rain)."""

import random
from dataclasses import dataclass

from analog_digital.config import DigitConfig
from analog_digital.display.canvas import CHAR_HEIGHT
from analog_digital.utils.math_helpers import trunc_div

DIGIT_COLOR = (255, 255, 255)


@dataclass
class DigitChar:
    character: str
    color: tuple
    y_offset: int


class DigitColumn:
    """Fixed ring of characters that wrap from the bottom back to the top."""

    def __init__(self, config: DigitConfig, rng: random.Random | None = None):
        self._cfg = config
        self._rng = rng or random.Random()
        self._height = 0
        self.char_offset = 0
        self.digits: list[DigitChar] = []

    def init(self, width: int, height: int):
        # Negative spacing that tiles count characters over the height
        # so wrap-around leaves no gap.
        cfg = self._cfg
        self._height = height
        char_height = CHAR_HEIGHT * cfg.scale
        gaps = max(1, cfg.count - 1)
        gap = trunc_div(height - char_height * gaps, gaps)
        self.char_offset = -(gap + char_height)
        self.digits = [self._new_digit(self.char_offset * i) for i in range(cfg.count)]

    def _new_digit(self, y_offset: int) -> DigitChar:
        return DigitChar(character=self._rng.choice("01"), color=DIGIT_COLOR,
                         y_offset=y_offset)

    def update_and_draw(self, canvas, bg: tuple):
        cfg = self._cfg
        for i, digit in enumerate(self.digits):
            digit.y_offset += cfg.speed
            if digit.y_offset > self._height:
                digit = self.digits[i] = self._new_digit(self.char_offset)
            # Still above the visible area
            if digit.y_offset > self.char_offset:
                canvas.draw_char(cfg.x, digit.y_offset, digit.character,
                                 canvas.color(*digit.color), bg, cfg.scale)
