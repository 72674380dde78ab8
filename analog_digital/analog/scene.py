"""Analog scene: colored waveforms scrolling top to bottom."""

import logging
import math
import random
from dataclasses import dataclass

from analog_digital.config import AnalogConfig
from analog_digital.analog.waveforms import GENERATORS, Waveform
from analog_digital.utils.math_helpers import random_range

log = logging.getLogger("analog-digital")

BLACK = (0, 0, 0)


@dataclass
class Wave:
    cur_y: int = 0            # leading edge, advances by speed each frame
    length: int = 0           # visible tail in rows
    speed: int = 0
    radian_offset: float = 0.0
    waveform: Waveform = Waveform.SINE
    color: tuple = BLACK
    active: bool = False


class AnalogScene:
    """Draws a moving window of each active wave and keeps the pool topped up."""

    name = "analog"

    def __init__(self, config: AnalogConfig, rng: random.Random | None = None):
        self._cfg = config
        self._rng = rng or random.Random()
        self._width = 0
        self._height = 0
        self.waves = [Wave() for _ in range(config.max_waves)]

    def init(self, width: int, height: int):
        self._width = width
        self._height = height
        for wave in self.waves:
            wave.active = False
        log.info(f"Analog scene ready ({width}x{height})")

    def active_count(self) -> int:
        return sum(1 for w in self.waves if w.active)

    def spawn_wave(self) -> Wave | None:
        rng = self._rng
        for wave in self.waves:
            if wave.active:
                continue
            wave.cur_y = 0
            wave.radian_offset = rng.randrange(2, 40) * math.pi
            wave.length = random_range(rng, 40, self._height)
            wave.speed = rng.randrange(1, 6)
            wave.waveform = rng.choice(list(Waveform))
            wave.color = (rng.randrange(255), rng.randrange(255), rng.randrange(255))
            wave.active = True
            log.debug(f"Spawned {wave.waveform.value} wave (speed {wave.speed})")
            return wave
        return None

    def _draw_wave(self, canvas, wave: Wave):
        width, height = self._width, self._height
        generator = GENERATORS[wave.waveform]
        color = canvas.color(*wave.color)
        start = max(0, wave.cur_y - wave.length)
        end = min(wave.cur_y, height)

        for y in range(start, end + 1):
            x = generator(y, wave.radian_offset, width, height)
            canvas.draw_pixel(x, y, color)
            if y >= end:
                continue
            # Join snap-backs and high/low flips with a full-width line,
            # the way a scope trace looks.
            if wave.waveform is Waveform.SAWTOOTH:
                x_next = generator(y + 1, wave.radian_offset, width, height)
                if x_next < x - width // 2:
                    canvas.draw_fast_hline(0, y, width, color)
            elif wave.waveform is Waveform.SQUARE:
                x_next = generator(y + 1, wave.radian_offset, width, height)
                if x_next != x:
                    canvas.draw_fast_hline(0, y, width, color)

        wave.cur_y += wave.speed

    def render(self, canvas):
        canvas.fill_screen(BLACK)

        active = 0
        for wave in self.waves:
            if not wave.active:
                continue
            self._draw_wave(canvas, wave)
            # Off-screen once the trailing edge passes the bottom
            if wave.cur_y - wave.length > self._height:
                wave.active = False
            else:
                active += 1

        for _ in range(max(0, self._cfg.min_active - active)):
            self.spawn_wave()
        if (active < self._cfg.max_active
                and self._rng.randrange(self._cfg.extra_spawn_chance) == 0):
            self.spawn_wave()

        canvas.show()
