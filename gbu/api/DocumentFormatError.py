"""Document format error."""


class DocumentFormatError(Exception):
    """Raised when a metadata document cannot be parsed or lacks expected structure."""
