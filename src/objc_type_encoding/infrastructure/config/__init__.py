"""Infrastructure configuration module."""

from .application_config import Config
from .parser_config import get_config, get_max_nesting_depth

__all__ = ["Config", "get_config", "get_max_nesting_depth"]
