"""Category enum for distribution links."""

from enum import Enum


class Category(str, Enum):
    ON_PREM = "on_prem"
    CLOUD = "cloud"
    S3 = "s3"
