#!/usr/bin/env python3
"""Analog/Digital visualizer - main entry point and frame loop."""

import argparse
import logging
import random
import signal
import time

from analog_digital.config import load_config
from analog_digital.display.canvas import Canvas
from analog_digital.display.display_manager import DisplayManager, make_sink
from analog_digital.analog.scene import AnalogScene
from analog_digital.digital.scene import DigitalScene

log = logging.getLogger("analog-digital")

MODES = ("analog", "digital", "cycle")


class App:
    def __init__(self, config_path: str = "config.yaml", mode: str | None = None,
                 seed: int | None = None):
        self.config = load_config(config_path)
        if mode is not None:
            self.config.mode.initial = mode
        self._rng = random.Random(seed)
        self._running = False
        self._render_fps = 0.0

        disp = self.config.display
        out = self.config.output
        self.display = DisplayManager(make_sink(out.sink, out.path, out.png_every))
        self.canvas = Canvas(disp.width, disp.height, self.display)

        # Both scenes keep their pools across mode switches
        self.scenes = {
            "analog": AnalogScene(self.config.analog, self._rng),
            "digital": DigitalScene(self.config, self._rng),
        }
        for scene in self.scenes.values():
            scene.init(disp.width, disp.height)

        initial = self.config.mode.initial
        if initial not in MODES:
            log.warning(f"Unknown mode '{initial}', cycling instead")
            initial = "cycle"
        self._cycle = initial == "cycle"
        self.active = "analog" if self._cycle else initial

    def switch_mode(self):
        """Hand the display to the other scene."""
        self.active = "digital" if self.active == "analog" else "analog"
        log.info(f"Switched to {self.active} mode")

    def step(self):
        """Render exactly one frame of the active scene."""
        self.scenes[self.active].render(self.canvas)

    def start(self, max_frames: int | None = None):
        self._running = True

        logging.basicConfig(
            level=getattr(logging, self.config.log_level, logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        target_fps = self.config.display.fps_target
        frame_time = 1.0 / target_fps
        frames = 0
        frame_count = 0
        fps_timer = time.monotonic()
        mode_timer = time.monotonic()

        log.info(f"Entering render loop in {self.active} mode at {target_fps} FPS target")

        try:
            while self._running:
                now = time.monotonic()

                if self._cycle and now - mode_timer >= self.config.mode.mode_seconds:
                    mode_timer = now
                    self.switch_mode()

                self.step()
                frames += 1

                # FPS counting
                frame_count += 1
                if now - fps_timer >= 1.0:
                    self._render_fps = frame_count / (now - fps_timer)
                    frame_count = 0
                    fps_timer = now
                    log.debug(f"{self._render_fps:.1f} FPS")

                if max_frames is not None and frames >= max_frames:
                    break

                # Frame rate limiting
                elapsed = time.monotonic() - now
                sleep_time = frame_time - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            log.info("Interrupted")
        except OSError as e:
            log.error(f"Display output failed: {e}", exc_info=True)
            raise
        finally:
            self._running = False
            log.info("Shutting down display...")
            disp = self.config.display
            self.display.cleanup(disp.width, disp.height)
            log.info(f"Done after {frames} frames")

    def stop(self):
        self._running = False


def main():
    parser = argparse.ArgumentParser(description="Analog/Digital LED matrix visualizer")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--mode", choices=MODES, help="Override the starting mode")
    parser.add_argument("--frames", type=int, help="Stop after this many frames")
    parser.add_argument("--seed", type=int, help="Seed the random source")
    args = parser.parse_args()

    app = App(config_path=args.config, mode=args.mode, seed=args.seed)

    # Handle SIGTERM gracefully (for systemd)
    signal.signal(signal.SIGTERM, lambda *_: app.stop())

    app.start(max_frames=args.frames)


if __name__ == "__main__":
    main()
