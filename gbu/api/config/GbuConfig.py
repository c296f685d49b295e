"""Top-level GBU configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .LinkConfig import LinkConfig
from .LogConfig import LogConfig


class GbuConfig(BaseModel):
    """Top-level configuration for GBU layers."""

    model_config = ConfigDict(extra="forbid")

    links: LinkConfig = Field(default_factory=LinkConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get GBU home directory based on GBU_HOME or default to ~/.gbu."""
        gbu_home_env = os.environ.get("GBU_HOME")
        if gbu_home_env:
            return Path(gbu_home_env).expanduser().resolve()
        return Path.home() / ".gbu"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on GBU_HOME or default to ~/.gbu."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "GbuConfig":
        """Load and validate config from file.

        Every section has defaults, so a missing config file yields the default
        configuration.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert GbuConfig instance to a dictionary for serialization."""
        return {
            "links": self.links.model_dump(),
            "log": self.log.model_dump(),
        }
