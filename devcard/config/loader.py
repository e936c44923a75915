"""
Configuration loading for devcard.

Handles loading configuration from ~/.devcard/config.json with sensible defaults.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG: Dict[str, Any] = {
    "default_card_path": "~/.devcard/devcard.yaml",

    # Local web server (--serve)
    "server": {
        "host": "127.0.0.1",
        "port": 3456,
        "open_browser": True
    },

    # Display options
    "display": {
        "color_enabled": True,
        "card_width": 62
    }
}


def get_config_path() -> Path:
    """Get path to config file."""
    return Path.home() / ".devcard" / "config.json"


def get_default_card_path(config: Dict[str, Any]) -> Path:
    """Get expanded default card path from config."""
    return Path(config["default_card_path"]).expanduser()


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file, merging with defaults.

    Returns a complete configuration with all default values filled in.
    User config overrides defaults where specified.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = config_path or get_config_path()

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                print(f"Warning: Ignoring config file {config_path}: expected a JSON object")
                return config

            # Shallow merge sections
            for key in ['server', 'display']:
                if key in user_config and isinstance(user_config[key], dict):
                    config[key].update(user_config[key])

            # Direct override for simple values
            for key in ['default_card_path']:
                if key in user_config:
                    config[key] = user_config[key]

        except json.JSONDecodeError as e:
            print(f"Warning: Could not parse config file: {e}")
        except OSError as e:
            print(f"Warning: Error loading config: {e}")

    return config
