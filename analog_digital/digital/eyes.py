"""Diamond-shaped eyes that open, look around, blink, and close.

Lifecycle of one slot:
    INACTIVE -> OPENING -> OPEN -> (BLINK_CLOSING -> BLINK_OPENING -> OPEN)* -> CLOSING -> INACTIVE

Each blink sends out ripple rings. The eye closes for good once its
random blink budget is spent, which frees the slot for a new eye.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto

from analog_digital.config import EyeConfig
from analog_digital.digital.ripples import RippleSystem
from analog_digital.utils.math_helpers import random_range, step_toward, trunc_div

log = logging.getLogger("analog-digital")

FILL_COLOR = (0, 0, 0)

# Frames to hold fully open between blinks (1-3 s at 60 fps)
OPEN_HOLD_MIN = 60
OPEN_HOLD_MAX = 180


class EyePhase(Enum):
    INACTIVE = auto()
    OPENING = auto()
    OPEN = auto()
    BLINK_CLOSING = auto()
    BLINK_OPENING = auto()
    CLOSING = auto()


@dataclass
class Eye:
    """One pool slot. Fields stay meaningful only while state != INACTIVE."""

    x: int = 0
    y: int = 0
    state: EyePhase = EyePhase.INACTIVE
    open_amount: int = 0      # horizontal half-width, 0 = closed
    max_open: int = 0
    half_height: int = 0
    timer: int = 0            # frames left in OPEN
    blinks_left: int = 0
    iris_x: int = 0
    iris_y: int = 0
    iris_target_x: int = 0
    iris_target_y: int = 0
    look_timer: int = 0

    @property
    def active(self) -> bool:
        return self.state is not EyePhase.INACTIVE


class EyeLifecycleManager:
    """Owns the eye pool: advances, draws, retires and replenishes eyes."""

    def __init__(self, config: EyeConfig, ripples: RippleSystem,
                 rng: random.Random | None = None):
        self._cfg = config
        self._ripples = ripples
        self._rng = rng or random.Random()
        self._width = 0
        self._height = 0
        self.eyes = [Eye() for _ in range(config.max_eyes)]

    def init(self, width: int, height: int):
        self._width = width
        self._height = height
        for eye in self.eyes:
            eye.state = EyePhase.INACTIVE
            eye.open_amount = 0

    def active_count(self) -> int:
        return sum(1 for e in self.eyes if e.active)

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def update(self):
        for index, eye in enumerate(self.eyes):
            if eye.active:
                self._update_eye(index, eye)

    def _update_eye(self, index: int, eye: Eye):
        cfg = self._cfg
        state = eye.state

        if state is EyePhase.OPENING or state is EyePhase.BLINK_OPENING:
            eye.open_amount += cfg.open_speed
            if eye.open_amount >= eye.max_open:
                eye.open_amount = eye.max_open
                eye.state = EyePhase.OPEN
                eye.timer = self._rng.randrange(OPEN_HOLD_MIN, OPEN_HOLD_MAX)
            self._update_iris(eye)

        elif state is EyePhase.OPEN:
            eye.timer -= 1
            if eye.timer <= 0:
                if eye.blinks_left > 0:
                    eye.blinks_left -= 1
                    self._ripples.spawn(eye.x, eye.y, eye.half_height)
                    eye.state = EyePhase.BLINK_CLOSING
                else:
                    eye.state = EyePhase.CLOSING
            self._update_iris(eye)

        elif state is EyePhase.BLINK_CLOSING:
            eye.open_amount -= cfg.open_speed
            if eye.open_amount <= 0:
                eye.open_amount = 0
                eye.state = EyePhase.BLINK_OPENING

        elif state is EyePhase.CLOSING:
            eye.open_amount -= cfg.open_speed
            if eye.open_amount <= 0:
                eye.open_amount = 0
                eye.state = EyePhase.INACTIVE
                log.debug(f"Eye {index} closed at y={eye.y}")

    def _update_iris(self, eye: Eye):
        """Wander the iris: pick a new target now and then, step 1px toward it."""
        if eye.open_amount <= self._cfg.iris_threshold:
            return
        eye.look_timer -= 1
        if eye.look_timer <= 0:
            max_h = eye.open_amount // 3
            max_v = eye.half_height // 5
            eye.iris_target_x = self._rng.randint(-max_h, max_h)
            eye.iris_target_y = self._rng.randint(-max_v, max_v)
            eye.look_timer = self._rng.randrange(30, 120)
        eye.iris_x = step_toward(eye.iris_x, eye.iris_target_x)
        eye.iris_y = step_toward(eye.iris_y, eye.iris_target_y)

    # ------------------------------------------------------------------
    # Spawning
    # ------------------------------------------------------------------

    def ensure_population(self):
        """Top up to min_active eyes, then maybe add one more (up to max_active)."""
        cfg = self._cfg
        missing = cfg.min_active - self.active_count()
        for _ in range(max(0, missing)):
            self.spawn_eye()

        if (self.active_count() < cfg.max_active
                and self._rng.randrange(cfg.extra_spawn_chance) == 0):
            self.spawn_eye()

    def spawn_eye(self) -> int | None:
        """Place a new eye in the first free slot. Returns its index, or None."""
        cfg = self._cfg
        index = next((i for i, e in enumerate(self.eyes) if not e.active), None)
        if index is None:
            log.debug("Eye pool full, skipping spawn")
            return None

        y = self._place(index)
        if y is None:
            log.debug(f"No room for another eye after {cfg.placement_attempts} attempts")
            return None

        eye = self.eyes[index]
        eye.x = self._width // 2
        eye.y = y
        eye.half_height = cfg.half_height
        eye.max_open = self._width // 2 - cfg.open_margin
        eye.state = EyePhase.OPENING
        eye.open_amount = 0
        eye.blinks_left = self._rng.randint(1, 4)
        eye.timer = 0
        eye.iris_x = eye.iris_y = 0
        eye.iris_target_x = eye.iris_target_y = 0
        eye.look_timer = self._rng.randrange(20, 60)
        log.debug(f"Eye {index} spawned at y={y} ({eye.blinks_left} blinks)")
        return index

    def _place(self, index: int) -> int | None:
        """Rejection-sample a y far enough from every other active eye."""
        cfg = self._cfg
        low = cfg.half_height + 2
        high = self._height - cfg.half_height - 2
        taken = [e.y for i, e in enumerate(self.eyes) if i != index and e.active]
        for _ in range(cfg.placement_attempts):
            y = random_range(self._rng, low, high)
            if all(abs(y - other) >= cfg.min_spacing for other in taken):
                return y
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def draw(self, canvas):
        for eye in self.eyes:
            if eye.active:
                self._draw_eye(canvas, eye)

    def _draw_eye(self, canvas, eye: Eye):
        cfg = self._cfg
        cx, cy = eye.x, eye.y
        hh = eye.half_height
        open_ = eye.open_amount
        lid = canvas.color(*cfg.lid_color)

        if open_ <= 0:
            canvas.draw_fast_vline(cx, cy - hh, hh * 2 + 1, lid)
            return

        # 1. Interior: half-width shrinks linearly from the center row to the tips
        for dy in range(-hh, hh + 1):
            half_width = open_ * (hh - abs(dy)) // hh
            if half_width > 0:
                canvas.draw_fast_hline(cx - half_width, cy + dy, half_width * 2 + 1,
                                       FILL_COLOR)

        # 2. Lids: top -> left -> bottom, top -> right -> bottom
        canvas.draw_line(cx, cy - hh, cx - open_, cy, lid)
        canvas.draw_line(cx - open_, cy, cx, cy + hh, lid)
        canvas.draw_line(cx, cy - hh, cx + open_, cy, lid)
        canvas.draw_line(cx + open_, cy, cx, cy + hh, lid)

        if open_ <= cfg.iris_threshold:
            return

        # 3. Lashes, fanning up near the top tip and down near the bottom
        span = hh - 4
        length = cfg.lash_length
        steps = max(1, cfg.lash_count - 1)
        for i in range(cfg.lash_count):
            dy = -span + i * (2 * span) // steps
            half_width = open_ * (hh - abs(dy)) // hh
            fan = trunc_div(dy * length, hh)
            canvas.draw_line(cx - half_width, cy + dy,
                             cx - half_width - length, cy + dy + fan, lid)
            canvas.draw_line(cx + half_width, cy + dy,
                             cx + half_width + length, cy + dy + fan, lid)

        # 4. Iris and pupil on top
        ix = cx + eye.iris_x
        iy = cy + eye.iris_y
        canvas.fill_circle(ix, iy, open_ // 3, canvas.color(*cfg.iris_color))
        canvas.fill_circle(ix, iy, open_ // 6, canvas.color(*cfg.pupil_color))
