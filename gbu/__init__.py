"""GBU - granule bulk update of OPeNDAP and S3 distribution links."""

__version__ = "0.3.0"
