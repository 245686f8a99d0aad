"""Named presets for the words command: count, lengths and dictionary directory."""

from __future__ import annotations

from pathlib import Path

import yaml


_BUNDLED_DIR = Path(__file__).parent / "presets"

PRESET_KEYS = ("count", "lengths", "dict_dir")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_preset(name: str, data) -> dict:
    """Check a parsed preset's shape. Raises ValueError describing the first problem."""
    if not isinstance(data, dict):
        raise ValueError(f"Preset '{name}' must be a mapping, got {type(data).__name__}.")
    unknown = sorted(set(data) - set(PRESET_KEYS))
    if unknown:
        raise ValueError(f"Preset '{name}' has unknown keys: {', '.join(unknown)}")
    if "count" in data and not _is_int(data["count"]):
        raise ValueError(f"Preset '{name}': 'count' must be an integer, got {data['count']!r}.")
    if "lengths" in data:
        lengths = data["lengths"]
        if not isinstance(lengths, list) or not all(_is_int(n) for n in lengths):
            raise ValueError(f"Preset '{name}': 'lengths' must be a list of integers, got {lengths!r}.")
    if "dict_dir" in data and not isinstance(data["dict_dir"], str):
        raise ValueError(f"Preset '{name}': 'dict_dir' must be a path string, got {data['dict_dir']!r}.")
    return data


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Find <name>.yaml in search_dirs, falling back to the presets shipped with the package.

    Raises FileNotFoundError when no directory has it and ValueError when
    its contents fail validate_preset.
    """
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    for d in dirs:
        path = Path(d) / f"{name}.yaml"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return validate_preset(name, data if data is not None else {})
    raise FileNotFoundError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def merge_config(preset: dict, overrides: dict) -> dict:
    """Apply command-line values on top of a preset; options left unset (None) keep the preset value."""
    return {**preset, **{k: v for k, v in overrides.items() if v is not None}}


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """Sorted names of every preset visible from search_dirs and the bundled directory."""
    dirs = [Path(d) for d in (search_dirs or [])] + [_BUNDLED_DIR]
    return sorted({f.stem for d in dirs if d.is_dir() for f in d.glob("*.yaml")})
