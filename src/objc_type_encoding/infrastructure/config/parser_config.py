#!/usr/bin/env python3

"""Tuning knobs for the type-encoding decoder and declaration printer."""

import os
from typing import Any

ENV_PREFIX = "OBJC_ENCODING_"

# Upper bound for MAX_NESTING_DEPTH; encoding and rendering recurse about four frames per level
NESTING_DEPTH_CEILING = 128

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    # Nesting deeper than this is treated as malformed input
    "MAX_NESTING_DEPTH": 64,

    # Declaration rendering
    "FIELD_PLACEHOLDER_PREFIX": "x",
    "DEFAULT_INDENT": "    ",
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden with ``OBJC_ENCODING_<KEY>``. Values are
    converted to the type of the default; unparsable numbers keep the default.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is None:
            continue

        if isinstance(config[key], bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                config[key] = int(env_value)
            except ValueError:
                pass
        else:
            config[key] = env_value

    return config


def get_max_nesting_depth() -> int:
    """Return the configured nesting limit, clamped to 1..NESTING_DEPTH_CEILING."""
    return min(max(1, get_config()["MAX_NESTING_DEPTH"]), NESTING_DEPTH_CEILING)
