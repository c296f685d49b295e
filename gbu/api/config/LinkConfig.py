"""Link classification and canonical link values."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CLOUD_HOST_PATTERN = r"opendap(\.[a-z0-9-]+)*\.earthdata\.nasa\.gov"


class LinkConfig(BaseModel):
    """Configuration for recognizing and writing distribution links."""

    model_config = ConfigDict(extra="forbid")

    cloud_host_pattern: str = Field(
        DEFAULT_CLOUD_HOST_PATTERN,
        description="Regex that must fully match the host of a Hyrax-in-the-cloud OPeNDAP URL",
    )
    opendap_type: str = Field("GET DATA : OPENDAP DATA", description="ECHO10 OnlineResource type for OPeNDAP")
    s3_type: str = Field("GET DATA VIA DIRECT ACCESS", description="UMM-G RelatedUrl type for S3 links")
    s3_description: str = Field(
        "This link provides direct download access via S3 to the granule.",
        description="UMM-G RelatedUrl description for S3 links",
    )
    umm_g_opendap_type: str = Field("USE SERVICE API", description="UMM-G RelatedUrl type for OPeNDAP")
    umm_g_opendap_subtype: str = Field("OPENDAP DATA", description="UMM-G RelatedUrl subtype for OPeNDAP")

    @field_validator("cloud_host_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"cloud_host_pattern is not a valid regex: {e}") from e
        return value

    def is_cloud_host(self, host: str | None) -> bool:
        """Return True if host is a Hyrax-in-the-cloud host."""
        if not host:
            return False
        return re.fullmatch(self.cloud_host_pattern, host, re.IGNORECASE) is not None
