"""Output model of the update commands."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class UpdateOutput(BaseModel):
    """Structured output of ``cmd_opendap`` and ``cmd_s3``."""

    model_config = ConfigDict(extra="forbid")

    path: str
    output_path: str | None
    format: Literal["echo10", "umm_g"] | None
    urls: list[dict[str, str]]
    links: list[str]
    errors: list[str]
