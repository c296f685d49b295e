"""Config API module."""

from .GbuConfig import GbuConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig

__all__ = ["GbuConfig", "LinkConfig", "LogConfig"]
