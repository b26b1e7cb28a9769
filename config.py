"""Load/save sandbox settings. Configs live in configs/ as {name}.json; grid contents are never saved."""

import json
import logging
import re
from pathlib import Path

from sand.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from sand.materials import MaterialPreset, MaterialRegistry, new_registry

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
DEFAULT_NAME = "settings"


class ConfigError(ValueError):
    """Settings that cannot start a session (zero-sized grid, bad material entry, ...)."""


def _sanitize_name(name: str) -> str:
    s = (name or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or DEFAULT_NAME


def get_config_path(name: str = DEFAULT_NAME) -> Path:
    return CONFIG_DIR / f"{_sanitize_name(name)}.json"


def _preset_materials() -> list[dict]:
    out = []
    for preset in MaterialPreset:
        name, weight, spread, bias, color = preset.value
        out.append({
            "name": name,
            "weight": weight,
            "horizontal_spread": spread,
            "vertical_bias": bias,
            "color": list(color),
        })
    return out


def default_config() -> dict:
    return {
        "world": {"width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT},
        "pixel_scale": 4,
        "target_fps": 200,
        "steps_per_frame": 1,
        "brush_radius": 3,
        "brush_min": 0,
        "brush_max": 16,
        "allow_overwrite": False,
        "seed": -1,
        "benchmark_frames": 500,
        "spawn_density": 1.0,
        "log_level": "INFO",
        "materials": _preset_materials(),
    }


def _merge_defaults(data: dict) -> dict:
    d = default_config()
    if isinstance(data.get("world"), dict):
        d["world"] = {**d["world"], **data["world"]}
    for k in (
        "pixel_scale", "target_fps", "steps_per_frame", "brush_radius", "brush_min",
        "brush_max", "allow_overwrite", "seed", "benchmark_frames", "spawn_density",
        "log_level", "materials",
    ):
        if k in data:
            d[k] = data[k]
    return d


def load_config(path: Path | str | None = None) -> dict:
    """Read and merge with defaults. Missing file -> defaults; unreadable JSON -> defaults with a warning."""
    p = Path(path) if path is not None else get_config_path()
    if not p.exists():
        logger.debug("No config at %s, using defaults", p)
        return default_config()
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read config %s (%s); using defaults", p, exc)
        return default_config()
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object; using defaults", p)
        return default_config()
    logger.debug("Loaded config %s", p)
    return _merge_defaults(data)


def save_config(cfg: dict, path: Path | str | None = None) -> Path:
    p = Path(path) if path is not None else get_config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(cfg, f, indent=2)
    logger.debug("Saved config %s", p)
    return p


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int(value, key: str, minimum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value!r}")
    return value


def _positive_int(value, key: str) -> int:
    return _int(value, key, minimum=1)


def validate_config(cfg: dict) -> dict:
    """Raise ConfigError for settings that cannot start a session. Returns cfg unchanged."""
    world = cfg.get("world") or {}
    _positive_int(world.get("width"), "world.width")
    _positive_int(world.get("height"), "world.height")
    for key in ("pixel_scale", "target_fps", "steps_per_frame", "benchmark_frames"):
        _positive_int(cfg.get(key), key)
    brush_min = _int(cfg.get("brush_min", 0), "brush_min", minimum=0)
    if brush_min > _int(cfg.get("brush_max", 0), "brush_max"):
        raise ConfigError("brush_min must not exceed brush_max")
    materials = cfg.get("materials")
    if not materials:
        raise ConfigError("at least one material is required")
    if not isinstance(materials, list):
        raise ConfigError("materials must be a list")
    if len(materials) > 255:
        raise ConfigError("at most 255 materials fit in a uint8 grid")
    for i, m in enumerate(materials):
        if not isinstance(m, dict):
            raise ConfigError(f"materials[{i}] must be an object")
        for key in ("weight", "horizontal_spread", "vertical_bias", "color"):
            if key not in m:
                raise ConfigError(f"materials[{i}] is missing {key!r}")
        _int(m["weight"], f"materials[{i}].weight")
        _int(m["horizontal_spread"], f"materials[{i}].horizontal_spread", minimum=0)
        _int(m["vertical_bias"], f"materials[{i}].vertical_bias")
        color = m["color"]
        if (
            not isinstance(color, (list, tuple))
            or len(color) != 3
            or any(isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255 for c in color)
        ):
            raise ConfigError(f"materials[{i}].color must be three 0-255 values")
    if str(cfg.get("log_level", "INFO")).upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {cfg.get('log_level')!r}")
    return cfg


def log_level(cfg: dict) -> int:
    """Numeric logging level for a validated config."""
    return logging.getLevelName(str(cfg.get("log_level", "INFO")).upper())


def registry_from_config(cfg: dict) -> MaterialRegistry:
    entries = []
    for i, m in enumerate(cfg["materials"], start=1):
        entries.append((
            m["weight"],
            m["horizontal_spread"],
            m["vertical_bias"],
            tuple(m["color"]),
            m.get("name") or f"Material {i}",
        ))
    return new_registry(entries)
