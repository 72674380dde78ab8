#!/usr/bin/env python3
"""Renders scene frames to PNG files for checking on a desktop (no matrix needed)."""

import argparse
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analog_digital.config import Config
from analog_digital.display.canvas import Canvas
from analog_digital.display.display_manager import DisplayManager, PngSink
from analog_digital.analog.scene import AnalogScene
from analog_digital.digital.scene import DigitalScene


def main():
    parser = argparse.ArgumentParser(description="Save preview frames as PNG")
    parser.add_argument("scene", choices=("analog", "digital"))
    parser.add_argument("--frames", type=int, default=600)
    parser.add_argument("--every", type=int, default=30, help="Save every Nth frame")
    args = parser.parse_args()

    config = Config()
    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           "preview_output", args.scene)
    display = DisplayManager(PngSink(out_dir, args.every))
    canvas = Canvas(config.display.width, config.display.height, display)

    if args.scene == "analog":
        scene = AnalogScene(config.analog)
    else:
        scene = DigitalScene(config)
    scene.init(config.display.width, config.display.height)

    for _ in range(args.frames):
        scene.render(canvas)

    print(f"Rendered {display.frames_sent} frames, previews saved to {out_dir}/")


if __name__ == "__main__":
    main()
