"""Expanding black rings that carve through the digital scene when an eye blinks."""

import logging
import random
from dataclasses import dataclass

from analog_digital.config import RippleConfig

log = logging.getLogger("analog-digital")

RIPPLE_COLOR = (0, 0, 0)


@dataclass
class Ripple:
    cx: int = 0
    cy: int = 0
    radius: int = 0
    speed: int = 0
    active: bool = False


class RippleSystem:
    """Fixed pool of ripples. Slots are reused in place, never reallocated."""

    def __init__(self, config: RippleConfig, rng: random.Random | None = None):
        self._cfg = config
        self._rng = rng or random.Random()
        self._width = 0
        self._height = 0
        self.ripples = [Ripple() for _ in range(config.max_ripples)]

    def init(self, width: int, height: int):
        self._width = width
        self._height = height
        for ripple in self.ripples:
            ripple.active = False

    def active_count(self) -> int:
        return sum(1 for r in self.ripples if r.active)

    def spawn(self, x: int, y: int, half_height: int) -> int:
        """Start 1-3 rings at (x, y). Returns how many found a free slot."""
        count = self._rng.randint(self._cfg.min_count, self._cfg.max_count)
        created = 0
        for _ in range(count):
            slot = self._free_slot()
            if slot is None:
                log.debug("Ripple pool full, dropping ripple")
                continue
            slot.cx = x
            slot.cy = y
            slot.radius = half_height
            slot.speed = self._rng.randint(self._cfg.min_speed, self._cfg.max_speed)
            slot.active = True
            created += 1
        return created

    def update(self):
        max_dim = max(self._width, self._height)
        for ripple in self.ripples:
            if not ripple.active:
                continue
            ripple.radius += ripple.speed
            if ripple.radius > max_dim:
                ripple.active = False

    def draw(self, canvas):
        # Double ring reads better against the busy background
        for ripple in self.ripples:
            if not ripple.active:
                continue
            canvas.draw_circle(ripple.cx, ripple.cy, ripple.radius, RIPPLE_COLOR)
            if ripple.radius > 0:
                canvas.draw_circle(ripple.cx, ripple.cy, ripple.radius - 1, RIPPLE_COLOR)

    def _free_slot(self) -> Ripple | None:
        for ripple in self.ripples:
            if not ripple.active:
                return ripple
        return None
