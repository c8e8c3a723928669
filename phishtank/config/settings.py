"""Configuration constants for the phishtank animation."""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

import yaml

from .constants import DEFAULTS

_PATH_FIELDS = {"LOG_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL"}
_BOOL_FIELDS = {"FEEDING_MODE"}
_FLOAT_FIELDS = {
    "FISH_SCALE",
    "BORDER_PADDING",
    "DETECTION_RADIUS",
    "EAT_RADIUS",
    "STEER_BLEND",
    "FOOD_DECAY_RATE",
}

WINDOW_WIDTH = DEFAULTS["WINDOW_WIDTH"]
WINDOW_HEIGHT = DEFAULTS["WINDOW_HEIGHT"]
N_FISH = DEFAULTS["N_FISH"]
FPS = DEFAULTS["FPS"]

WHITE = (255, 255, 255)
BUTTON_IDLE = (18, 60, 84)
BUTTON_ACTIVE = (255, 140, 180)

# Steering. These are the values the animation was tuned by eye with; there is
# no derivation behind them.
WANDER_JITTER = 0.08
WANDER_STRENGTH = 0.15
MAX_WANDER_SPEED = 1.0
DETECTION_RADIUS = float(os.getenv("PHISHTANK_DETECTION_RADIUS", "350"))
EAT_RADIUS = float(os.getenv("PHISHTANK_EAT_RADIUS", "25"))
CHASE_SPEED_MIN = 2.0
CHASE_SPEED_MAX = 6.0
STEER_BLEND = float(os.getenv("PHISHTANK_STEER_BLEND", "0.2"))
BORDER_PADDING = float(os.getenv("PHISHTANK_BORDER_PADDING", "150"))

SPAWN_VELOCITY_X = 0.5
SPAWN_VELOCITY_Y = 1.5

FOOD_SIZE = 8.0
FOOD_SPEED = 1.5
FOOD_DECAY_RATE = float(os.getenv("PHISHTANK_FOOD_DECAY_RATE", "1.5"))
FOOD_START_ALPHA = 255.0

FISH_SCALE = float(os.getenv("PHISHTANK_FISH_SCALE", "0.15"))
SEED = int(os.getenv("PHISHTANK_SEED", "0"))
SPARKLE_COUNT = int(os.getenv("PHISHTANK_SPARKLE_COUNT", "200"))
FEEDING_MODE = os.getenv("PHISHTANK_FEEDING_MODE", "0") in {"1", "true", "True"}

CONFIG_ENV_VAR = "PHISHTANK_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/default.yaml")
LOG_DIRECTORY = Path(os.getenv("PHISHTANK_LOG_DIR", "logs"))
DEBUG_LOG_FILE = os.getenv("PHISHTANK_DEBUG_LOG", "phishtank_debug.log")
DEBUG_LOG_LEVEL = os.getenv("PHISHTANK_DEBUG_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class SimulationSettings:
    WINDOW_WIDTH: int = WINDOW_WIDTH
    WINDOW_HEIGHT: int = WINDOW_HEIGHT
    N_FISH: int = N_FISH
    FPS: int = FPS
    SEED: int = SEED
    SPARKLE_COUNT: int = SPARKLE_COUNT
    FISH_SCALE: float = FISH_SCALE
    BORDER_PADDING: float = BORDER_PADDING
    DETECTION_RADIUS: float = DETECTION_RADIUS
    EAT_RADIUS: float = EAT_RADIUS
    STEER_BLEND: float = STEER_BLEND
    FOOD_DECAY_RATE: float = FOOD_DECAY_RATE
    FEEDING_MODE: bool = FEEDING_MODE
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL

    def with_updates(self, overrides: Dict[str, Any]) -> "SimulationSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return SimulationSettings(**merged)


_ACTIVE_SETTINGS = SimulationSettings()
_ENV_VARS: Dict[str, str] = {
    "WINDOW_WIDTH": "PHISHTANK_WINDOW_WIDTH",
    "WINDOW_HEIGHT": "PHISHTANK_WINDOW_HEIGHT",
    "N_FISH": "PHISHTANK_N_FISH",
    "FPS": "PHISHTANK_FPS",
    "SEED": "PHISHTANK_SEED",
    "SPARKLE_COUNT": "PHISHTANK_SPARKLE_COUNT",
    "FISH_SCALE": "PHISHTANK_FISH_SCALE",
    "BORDER_PADDING": "PHISHTANK_BORDER_PADDING",
    "DETECTION_RADIUS": "PHISHTANK_DETECTION_RADIUS",
    "EAT_RADIUS": "PHISHTANK_EAT_RADIUS",
    "STEER_BLEND": "PHISHTANK_STEER_BLEND",
    "FOOD_DECAY_RATE": "PHISHTANK_FOOD_DECAY_RATE",
    "FEEDING_MODE": "PHISHTANK_FEEDING_MODE",
}


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _BOOL_FIELDS:
        return value in {"1", "true", "True"}
    if field in _FLOAT_FIELDS:
        return float(value)
    return int(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in {"1", "true", "True", "TRUE"}
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError("Invalid boolean value in config")


def _normalize_numeric(value: Any, caster: type[float | int]) -> float | int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return caster(value)
    if isinstance(value, str):
        return caster(float(value) if caster is float else int(float(value)))
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _BOOL_FIELDS:
        return _normalize_bool(value)
    if field in _FLOAT_FIELDS:
        return float(_normalize_numeric(value, float))
    return int(_normalize_numeric(value, int))


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "WINDOW_WIDTH": (200, 7680),
    "WINDOW_HEIGHT": (200, 4320),
    "N_FISH": (0, 200),
    "FPS": (1, 360),
    "SEED": (0, 2**63 - 1),
    "SPARKLE_COUNT": (0, 5000),
    "FISH_SCALE": (0.01, 2.0),
    "BORDER_PADDING": (0.0, 1000.0),
    "DETECTION_RADIUS": (1.0, 5000.0),
    "EAT_RADIUS": (0.0, 500.0),
    "STEER_BLEND": (0.0, 1.0),
    "FOOD_DECAY_RATE": (0.01, 255.0),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")
    _validate_relationships(values)


def _validate_relationships(values: Mapping[str, Any]) -> None:
    eat_radius = values.get("EAT_RADIUS")
    detection_radius = values.get("DETECTION_RADIUS")
    if eat_radius is not None and detection_radius is not None and eat_radius >= detection_radius:
        raise ValueError("EAT_RADIUS must be smaller than DETECTION_RADIUS")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(SimulationSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the phishtank animation with runtime overrides")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--window-width", type=int, help="Initial window width")
    parser.add_argument("--window-height", type=int, help="Initial window height")
    parser.add_argument("--n-fish", type=int, help="Number of fish spawned at startup")
    parser.add_argument("--fps", type=int, help="Target frames per second")
    parser.add_argument("--seed", type=int, help="Random seed (0 seeds from the OS)")
    parser.add_argument("--sparkle-count", type=int, help="Number of background sparkles")
    parser.add_argument("--fish-scale", type=float, help="Size multiplier for every fish")
    parser.add_argument("--border-padding", type=float, help="Off-screen margin fish may roam into")
    parser.add_argument("--detection-radius", type=float, help="Distance at which fish notice food")
    parser.add_argument("--eat-radius", type=float, help="Distance at which fish eat food")
    parser.add_argument("--steer-blend", type=float, help="Blend factor when steering towards food")
    parser.add_argument("--food-decay-rate", type=float, help="Alpha lost by food per tick")
    parser.add_argument(
        "--feeding",
        dest="feeding_mode",
        action="store_true",
        help="Start with feeding mode switched on",
    )
    parser.add_argument(
        "--no-feeding",
        dest="feeding_mode",
        action="store_false",
        help="Start with feeding mode switched off",
    )
    parser.set_defaults(feeding_mode=None)
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> SimulationSettings:
    env_mapping = env if env is not None else os.environ
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "WINDOW_WIDTH": parsed.window_width,
        "WINDOW_HEIGHT": parsed.window_height,
        "N_FISH": parsed.n_fish,
        "FPS": parsed.fps,
        "SEED": parsed.seed,
        "SPARKLE_COUNT": parsed.sparkle_count,
        "FISH_SCALE": parsed.fish_scale,
        "BORDER_PADDING": parsed.border_padding,
        "DETECTION_RADIUS": parsed.detection_radius,
        "EAT_RADIUS": parsed.eat_radius,
        "STEER_BLEND": parsed.steer_blend,
        "FOOD_DECAY_RATE": parsed.food_decay_rate,
        "FEEDING_MODE": parsed.feeding_mode,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: SimulationSettings) -> SimulationSettings:
    global _ACTIVE_SETTINGS
    global WINDOW_WIDTH, WINDOW_HEIGHT, N_FISH, FPS, SEED, SPARKLE_COUNT
    global FISH_SCALE, BORDER_PADDING, DETECTION_RADIUS, EAT_RADIUS, STEER_BLEND
    global FOOD_DECAY_RATE, FEEDING_MODE
    global LOG_DIRECTORY, DEBUG_LOG_FILE, DEBUG_LOG_LEVEL

    _ACTIVE_SETTINGS = new_settings
    WINDOW_WIDTH = new_settings.WINDOW_WIDTH
    WINDOW_HEIGHT = new_settings.WINDOW_HEIGHT
    N_FISH = new_settings.N_FISH
    FPS = new_settings.FPS
    SEED = new_settings.SEED
    SPARKLE_COUNT = new_settings.SPARKLE_COUNT
    FISH_SCALE = new_settings.FISH_SCALE
    BORDER_PADDING = new_settings.BORDER_PADDING
    DETECTION_RADIUS = new_settings.DETECTION_RADIUS
    EAT_RADIUS = new_settings.EAT_RADIUS
    STEER_BLEND = new_settings.STEER_BLEND
    FOOD_DECAY_RATE = new_settings.FOOD_DECAY_RATE
    FEEDING_MODE = new_settings.FEEDING_MODE
    LOG_DIRECTORY = new_settings.LOG_DIRECTORY
    DEBUG_LOG_FILE = new_settings.DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL = new_settings.DEBUG_LOG_LEVEL
    return _ACTIVE_SETTINGS


def current_settings() -> SimulationSettings:
    return _ACTIVE_SETTINGS
