"""Logic for loading the YAML configuration over the defaults."""

import copy
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "declaration_kinds": ["class_declaration"],
    "sections": {
        "exceptions": False,
    },
    "links": {
        "namespace_qualified_bases": False,
    },
    "source_encoding": "utf-8",
}

TABLE_KEYS = ("sections", "links")


def _config_error(path: Path, problem: str) -> SystemExit:
    return SystemExit(f"Invalid configuration {path}: {problem}")


def apply_user_config(
    config: dict[str, Any], user_config: object, path: Path
) -> dict[str, Any]:
    """Overlay a parsed user document onto ``config``.

    `sections` and `links` are updated key by key; `declaration_kinds`
    replaces the default list so classes can be left out.
    """
    if not isinstance(user_config, dict):
        raise _config_error(path, "expected a mapping at the top level")

    for key, value in user_config.items():
        if key in TABLE_KEYS:
            if not isinstance(value, dict):
                raise _config_error(path, f"'{key}' must be a mapping")
            config[key].update(value)
        elif key == "declaration_kinds":
            if not isinstance(value, list) or not all(
                isinstance(kind, str) for kind in value
            ):
                raise _config_error(path, "'declaration_kinds' must be a list")
            config[key] = list(dict.fromkeys(value))
        else:
            config[key] = value
    return config


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8"))
            if user_config is not None:
                config = apply_user_config(config, user_config, p)
    return config
