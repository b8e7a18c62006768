"""
Load and expose app config (YAML). Used by the session and scripts to get palette
defaults, storage backend and export options.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _merge(_defaults(), data)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Section-wise merge: nested dicts are merged one level at a time, other values replaced."""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _defaults() -> dict[str, Any]:
    return {
        "palette": {
            "count": 5,
            "mode": "random",
            "ranges": {
                "hue_min": 0,
                "hue_max": 360,
                "sat_min": 30,
                "sat_max": 90,
                "light_min": 40,
                "light_max": 80,
            },
        },
        "history": {"max_entries": 20},
        "storage": {"backend": "file", "dir": "data", "api_base": None},
        "export": {"dir": "output", "swatch_width": 100, "swatch_height": 100},
        "logging": {"level": "INFO"},
    }


def get_ranges(config: dict[str, Any]):
    """GenerationRanges from the palette.ranges section."""
    from .generation import GenerationRanges
    return GenerationRanges.from_dict(config.get("palette", {}).get("ranges"))


def _resolve_dir(d: str) -> Path:
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p


def get_storage_dir(config: dict[str, Any]) -> Path:
    """Directory for the file storage backend (relative to project root if needed)."""
    return _resolve_dir(config.get("storage", {}).get("dir", "data"))


def get_export_dir(config: dict[str, Any]) -> Path:
    """Directory where exports are written (relative to project root if needed)."""
    return _resolve_dir(config.get("export", {}).get("dir", "output"))
