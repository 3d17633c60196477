#!/usr/bin/env python3
"""
Settings
========
Package defaults live in ``configs/app.yaml`` beside this module:

    password    policy used by PasswordConfig.from_settings()
    wordlists   word-list directory and text encoding
    generation  limits for the word/syllable builder
    sheet       languages and random length for generate_sheet()
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
APP_CONFIG_PATH = PACKAGE_ROOT / "configs" / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parsed app.yaml, read once per process."""
    with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Value at ``section.key`` in app.yaml, or ``default`` when absent."""
    node: Any = load_app_config()
    for key in path.split('.'):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def resolve_path(value: str, base: Optional[Path] = None) -> Path:
    """Expand ``~`` and anchor relative paths at ``base`` (the package by default)."""
    path = Path(os.path.expanduser(str(value)))
    if path.is_absolute():
        return path
    return ((base or PACKAGE_ROOT) / path).resolve()


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
