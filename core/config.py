"""
config.py
==========
Loads the checker configuration from a YAML file (config.yaml).

Keys:
    separator      - entry separator inside alias content (default: newline)
    country_table  - path to an iso3166.tab style file (default: bundled copy)
    log_dir        - directory for log files (default: none, console only)
    log_level      - console log level (default: INFO)
"""

import os
from typing import Any, Dict, Optional

import yaml

from core.country_codes import DEFAULT_TABLE_PATH
from core.tokenizer import DEFAULT_SEPARATOR

DEFAULTS: Dict[str, Any] = {
    "separator": DEFAULT_SEPARATOR,
    "country_table": DEFAULT_TABLE_PATH,
    "log_dir": None,
    "log_level": "INFO",
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Return the defaults merged with the contents of config_path.
    With config_path=None the defaults are returned unchanged.
    """
    config = dict(DEFAULTS)
    if config_path is None:
        return config

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"[ERROR] Invalid YAML format in {config_path}: {e}")

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ValueError(
            f"[ERROR] Config '{config_path}' must be a mapping, got {type(data).__name__}"
        )

    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"[ERROR] Unknown config keys in {config_path}: {unknown}")

    config.update(data)
    if config["country_table"] is None:
        config["country_table"] = DEFAULT_TABLE_PATH

    separator = config["separator"]
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(
            f"[ERROR] 'separator' in {config_path} must be a single character, got {separator!r}"
        )

    return config
