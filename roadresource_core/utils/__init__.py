"""Utils module - Configuration, logging and path helpers."""

from roadresource_core.utils.config import Config, load_config
from roadresource_core.utils.helpers import clean_path, join_path, trim_path
from roadresource_core.utils.logs import configure_logging

__all__ = [
    "Config",
    "load_config",
    "configure_logging",
    "clean_path",
    "join_path",
    "trim_path",
]
