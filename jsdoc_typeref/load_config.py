"""Logic for loading the resolver configuration."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from jsdoc_typeref.exceptions import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "typescript": {
        "moduleRoot": None,
        "extension": ".js",
    },
}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge ``update`` over ``base``; nested mappings merge, anything else replaces."""
    result = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load a YAML (or JSON) configuration file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config
    p = Path(path)
    if not p.exists():
        msg = f'Configuration file "{p}" does not exist.'
        raise ConfigurationError(msg)
    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        msg = f'Configuration file "{p}" must contain a mapping.'
        raise ConfigurationError(msg)
    return merge_config(config, user_config)


def module_root(config: dict[str, Any], cwd: Path | None = None) -> Path:
    """Return the absolute module root, failing before any file is processed."""
    section = config.get("typescript")
    if not isinstance(section, dict):
        msg = 'Configuration "typescript" for jsdoc-typeref missing.'
        raise ConfigurationError(msg)
    root = section.get("moduleRoot")
    if not root:
        msg = 'Configuration "typescript.moduleRoot" for jsdoc-typeref missing.'
        raise ConfigurationError(msg)
    absolute = Path(os.path.abspath((cwd or Path.cwd()) / root))
    if not absolute.is_dir():
        msg = (
            f'Directory "{absolute}" does not exist. Check the '
            '"typescript.moduleRoot" config option for jsdoc-typeref'
        )
        raise ConfigurationError(msg)
    return absolute
