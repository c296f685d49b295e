"""URL validation error."""


class UrlValidationError(Exception):
    """Raised when caller-supplied URLs are invalid."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        super().__init__("; ".join(errors))
