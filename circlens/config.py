"""
Configuration management for Circlens
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from circlens.types import DetectionParams

DEFAULT_CONFIG = {
    "detection": {
        "r_min": 20,
        "r_max": 180,
        "edge_thresh": 45,
        "acc_thresh": 55,  # % of the circumference that must vote
        "proc_width": 320
    },
    "tracking": {
        "alpha": 0.5
    },
    "logging": {
        "level": "INFO",
        "log_dir": "logs"
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file on top of the defaults.

    Args:
        config_path: Path to YAML file (optional)

    Returns:
        Complete configuration dictionary
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, 'r') as f:
        user_config = yaml.safe_load(f) or {}

    if not isinstance(user_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return _merge(DEFAULT_CONFIG, user_config)


def params_from_config(config: Optional[Dict[str, Any]] = None) -> DetectionParams:
    """Build DetectionParams from the 'detection' section of a config."""
    section = _merge(DEFAULT_CONFIG, config or {})["detection"]
    return DetectionParams(
        r_min=int(section["r_min"]),
        r_max=int(section["r_max"]),
        edge_thresh=int(section["edge_thresh"]),
        acc_thresh=float(section["acc_thresh"]),
        proc_width=int(section["proc_width"]),
    )
