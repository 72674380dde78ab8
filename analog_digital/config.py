import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

log = logging.getLogger("analog-digital")


@dataclass
class DisplayConfig:
    width: int = 64
    height: int = 192
    fps_target: int = 60


@dataclass
class EyeConfig:
    max_eyes: int = 8
    half_height: int = 25
    min_spacing: int = 55
    open_speed: int = 2
    open_margin: int = 2
    placement_attempts: int = 20
    min_active: int = 2
    max_active: int = 5
    extra_spawn_chance: int = 90    # 1-in-N per frame
    iris_threshold: int = 3
    lash_count: int = 5
    lash_length: int = 5
    lid_color: tuple = (180, 180, 140)
    iris_color: tuple = (180, 60, 60)
    pupil_color: tuple = (60, 10, 10)


@dataclass
class RippleConfig:
    max_ripples: int = 12
    min_count: int = 1
    max_count: int = 3
    min_speed: int = 1
    max_speed: int = 3


@dataclass
class DigitConfig:
    count: int = 12
    x: int = 6
    scale: int = 4
    speed: int = 2


@dataclass
class AnalogConfig:
    max_waves: int = 5
    min_active: int = 1
    max_active: int = 4
    extra_spawn_chance: int = 120   # 1-in-N per frame


@dataclass
class ModeConfig:
    initial: str = "cycle"          # analog | digital | cycle
    mode_seconds: float = 30.0


@dataclass
class OutputConfig:
    sink: str = "null"              # null | framebuffer | png
    path: str = "/dev/fb0"
    png_every: int = 1


@dataclass
class Config:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    eyes: EyeConfig = field(default_factory=EyeConfig)
    ripples: RippleConfig = field(default_factory=RippleConfig)
    digits: DigitConfig = field(default_factory=DigitConfig)
    analog: AnalogConfig = field(default_factory=AnalogConfig)
    mode: ModeConfig = field(default_factory=ModeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"


# Used as divisors, ranges or sizes; zero or negative breaks rendering
_POSITIVE = {
    "width", "height", "fps_target", "half_height", "open_speed",
    "extra_spawn_chance", "scale", "max_eyes", "max_ripples", "max_waves",
    "placement_attempts",
}


def _merge_section(current, data: dict, section: str):
    """Return a copy of a config section with known keys from data applied."""
    if not isinstance(data, dict):
        log.warning(f"Config section '{section}' is not a mapping, using defaults")
        return current
    known = {f.name: f for f in fields(current)}
    updates = {}
    for key, value in data.items():
        if key not in known:
            log.warning(f"Unknown config key '{section}.{key}' ignored")
            continue
        default = getattr(current, key)
        if isinstance(default, tuple):
            try:
                value = tuple(value)
            except TypeError:
                log.warning(f"Config key '{section}.{key}' must be a list, using default")
                continue
        if key in _POSITIVE and not (isinstance(value, (int, float))
                                     and not isinstance(value, bool) and value > 0):
            log.warning(f"Config key '{section}.{key}' must be positive, using default")
            continue
        updates[key] = value
    return replace(current, **updates)


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        log.warning(f"Could not load config file {path}: {e}")
        return config

    if not isinstance(data, dict):
        log.warning(f"Config file {path} is not a mapping, using defaults")
        return config

    for section in ("display", "eyes", "ripples", "digits", "analog", "mode", "output"):
        if section in data:
            merged = _merge_section(getattr(config, section), data[section], section)
            setattr(config, section, merged)

    if "logging" in data and isinstance(data["logging"], dict):
        config.log_level = str(data["logging"].get("level", config.log_level)).upper()

    return config
