"""YAML-based configuration for cmd-palette.

Config file: ~/.config/cmd-palette/config.yaml (honors XDG_CONFIG_HOME,
or CMD_PALETTE_CONFIG to point at a specific file).

    max_visible_items: 10
    trigger_characters: [" ", "\\t"]
    submenu_indicator: "»"
    close_on_empty: false
    registry_path: ~/.config/cmd-palette/registry.yaml
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CMD_PALETTE_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "max_visible_items": 10,
    "trigger_characters": [" ", "\t"],
    "submenu_indicator": "»",
    "close_on_empty": False,
    "registry_path": None,
}


@dataclass
class PaletteConfig:
    """Recognized palette options.

    Attributes:
        max_visible_items: Window size of the projected view.
        trigger_characters: Characters that open a palette at line start.
        submenu_indicator: Display-only marker appended to submenu labels.
        close_on_empty: Close the session when a root-level query matches nothing.
        registry_path: Default registry file for the CLI.
    """

    max_visible_items: int = 10
    trigger_characters: frozenset[str] = field(default_factory=lambda: frozenset({" ", "\t"}))
    submenu_indicator: str = "»"
    close_on_empty: bool = False
    registry_path: Path | None = None

    def __post_init__(self):
        if isinstance(self.max_visible_items, bool) or not isinstance(self.max_visible_items, int):
            raise ConfigError(
                f"max_visible_items must be an integer, got {self.max_visible_items!r}"
            )
        if self.max_visible_items < 1:
            raise ConfigError(f"max_visible_items must be positive, got {self.max_visible_items}")
        self.trigger_characters = frozenset(self.trigger_characters)
        if self.registry_path is not None:
            self.registry_path = Path(os.path.expanduser(str(self.registry_path)))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaletteConfig":
        return cls(
            max_visible_items=data["max_visible_items"],
            trigger_characters=frozenset(data["trigger_characters"] or []),
            submenu_indicator=str(data["submenu_indicator"]),
            close_on_empty=bool(data["close_on_empty"]),
            registry_path=data["registry_path"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_visible_items": self.max_visible_items,
            "trigger_characters": sorted(self.trigger_characters),
            "submenu_indicator": self.submenu_indicator,
            "close_on_empty": self.close_on_empty,
            "registry_path": str(self.registry_path) if self.registry_path else None,
        }


def get_config_dir() -> Path:
    """Get the cmd-palette config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "cmd-palette"


def get_config_path() -> Path:
    """Get the config file path (CMD_PALETTE_CONFIG overrides)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(os.path.expanduser(override))
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> PaletteConfig:
    """Load config, falling back to defaults for missing or unreadable files.

    Raises:
        ConfigError: If the file parses but holds an invalid value.
    """
    config_path = Path(path) if path is not None else get_config_path()
    data: Any = None
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        pass
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring invalid config {config_path}: {e}")
    except OSError as e:
        logger.warning(f"Could not read config {config_path}: {e}")

    if not isinstance(data, dict):
        return PaletteConfig.from_dict(copy.deepcopy(DEFAULT_CONFIG))
    return PaletteConfig.from_dict(_deep_merge(copy.deepcopy(DEFAULT_CONFIG), data))


def save_config(cfg: PaletteConfig, path: Path | None = None) -> None:
    """Save config as YAML."""
    config_path = Path(path) if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(cfg.to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
