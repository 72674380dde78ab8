"""Digital scene: drifting red background, binary rain, eyes and ripples."""

import logging
import random

from analog_digital.config import Config
from analog_digital.digital.digits import DigitColumn
from analog_digital.digital.eyes import EyeLifecycleManager
from analog_digital.digital.ripples import RippleSystem

log = logging.getLogger("analog-digital")

BG_RED_MIN = 15
BG_RED_MAX = 50


class DigitalScene:
    """Composes one digital frame per call to render()."""

    name = "digital"

    def __init__(self, config: Config, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self.ripples = RippleSystem(config.ripples, self._rng)
        self.eyes = EyeLifecycleManager(config.eyes, self.ripples, self._rng)
        self.digits = DigitColumn(config.digits, self._rng)
        self.bg_red = BG_RED_MIN

    def init(self, width: int, height: int):
        self.ripples.init(width, height)
        self.eyes.init(width, height)
        self.digits.init(width, height)
        self.bg_red = BG_RED_MIN
        log.info(f"Digital scene ready ({width}x{height})")

    def _drift_background(self):
        """Random walk of the red channel, kept roughly within 15-50."""
        up = self._rng.random() < 0.5
        if self.bg_red > BG_RED_MAX:
            up = False
        if self.bg_red < BG_RED_MIN:
            up = True
        step = self._rng.randrange(2)
        self.bg_red += step if up else -step

    def render(self, canvas):
        self._drift_background()
        bg = canvas.color(self.bg_red, 0, 0)
        canvas.fill_screen(bg)

        self.digits.update_and_draw(canvas, bg)

        self.eyes.update()
        self.eyes.draw(canvas)
        self.eyes.ensure_population()

        self.ripples.update()
        self.ripples.draw(canvas)

        canvas.show()
