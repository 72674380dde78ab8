import logging
from pathlib import Path

import numpy as np
from PIL import Image

log = logging.getLogger("analog-digital")


def rgb888_to_rgb565(image: Image.Image, big_endian: bool = True) -> bytes:
    """Convert an RGB PIL Image to packed RGB565 bytes."""
    arr = np.asarray(image, dtype=np.uint16)
    r = (arr[:, :, 0] >> 3) & 0x1F
    g = (arr[:, :, 1] >> 2) & 0x3F
    b = (arr[:, :, 2] >> 3) & 0x1F
    rgb565 = (r << 11) | (g << 5) | b
    return rgb565.astype(">u2" if big_endian else "<u2").tobytes()


class NullSink:
    """Discards frames (headless runs and benchmarks)."""

    def send(self, image: Image.Image):
        pass

    def close(self):
        pass


class FramebufferSink:
    """Writes RGB565 frames to a Linux framebuffer device."""

    blank_on_exit = True

    def __init__(self, path: str = "/dev/fb0", big_endian: bool = False):
        self._path = path
        self._big_endian = big_endian
        self._fb = None

    def send(self, image: Image.Image):
        if self._fb is None:
            self._fb = open(self._path, "wb")
            log.info(f"Opened framebuffer {self._path}")
        self._fb.seek(0)
        self._fb.write(rgb888_to_rgb565(image, self._big_endian))
        self._fb.flush()

    def close(self):
        if self._fb is not None:
            self._fb.close()
            self._fb = None


class PngSink:
    """Saves every Nth frame as a numbered PNG for previewing on a desktop."""

    def __init__(self, directory: str, every: int = 1):
        self._dir = Path(directory)
        self._every = max(1, every)
        self._count = 0

    def send(self, image: Image.Image):
        if self._count % self._every == 0:
            self._dir.mkdir(parents=True, exist_ok=True)
            image.save(self._dir / f"frame_{self._count:05d}.png")
        self._count += 1

    def close(self):
        pass


def make_sink(kind: str, path: str, every: int = 1):
    """Build an output sink by name. Unknown names fall back to NullSink."""
    if kind == "framebuffer":
        return FramebufferSink(path)
    if kind == "png":
        return PngSink(path, every)
    if kind != "null":
        log.warning(f"Unknown output sink '{kind}', frames will be discarded")
    return NullSink()


class DisplayManager:
    """Presents finished frames on the configured output."""

    def __init__(self, sink):
        self._sink = sink
        self.frames_sent = 0

    def update(self, image: Image.Image):
        """Push one finished frame to the output."""
        self._sink.send(image)
        self.frames_sent += 1

    def clear(self, width: int, height: int):
        """Send an all-black frame."""
        self._sink.send(Image.new("RGB", (width, height), (0, 0, 0)))

    def cleanup(self, width: int, height: int):
        """Blank the output (physical panels only) and release it."""
        try:
            if getattr(self._sink, "blank_on_exit", False):
                self.clear(width, height)
        finally:
            self._sink.close()
