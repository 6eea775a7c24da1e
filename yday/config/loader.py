"""
Configuration loading for yday.

Handles loading configuration from ~/.yday/config.json with sensible defaults.
"""

import json
from pathlib import Path
from typing import Dict, Any
import copy

from yday.utils.progress import print_warning

DEFAULT_CONFIG: Dict[str, Any] = {
    # Directory whose immediate subdirectories are git repositories
    "parent_dir": "~/workspace",

    # Log collection
    "git": {
        "command": "git",
        "timeout_seconds": 30,
        "author": None,
        # Days added each side of the git query (committer vs author date)
        "query_padding_days": 7
    },

    # Display options
    "display": {
        "color_enabled": True,
        "show_legend": False
    },

    # Web API (--serve)
    "server": {
        "host": "127.0.0.1",
        "port": 8080
    }
}

NESTED_SECTIONS = ['git', 'display', 'server']


def get_config_path() -> Path:
    """Get path to config file."""
    return Path.home() / ".yday" / "config.json"


def get_parent_dir(config: Dict[str, Any]) -> Path:
    """Get expanded parent directory from config."""
    return Path(config["parent_dir"]).expanduser()


def load_config() -> Dict[str, Any]:
    """
    Load configuration from file, merging with defaults.

    Returns a complete configuration with all default values filled in.
    User config overrides defaults where specified.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            # Shallow merge nested sections
            for key in NESTED_SECTIONS:
                if key in user_config and isinstance(user_config[key], dict):
                    config[key].update(user_config[key])

            # Direct override for simple values
            if 'parent_dir' in user_config:
                config['parent_dir'] = user_config['parent_dir']

        except json.JSONDecodeError as e:
            print_warning(f"Could not parse config file: {e}")
        except (OSError, AttributeError, TypeError) as e:
            print_warning(f"Error loading config: {e}")

    return config


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)
