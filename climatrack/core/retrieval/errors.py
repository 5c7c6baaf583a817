"""Client input errors raised before any network access."""


class RetrievalError(Exception):
    """Base class for caller-side retrieval errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameter(RetrievalError):
    """Latitude, longitude or both date forms are missing."""


class InvalidParameter(RetrievalError):
    """A parameter is present but malformed or inconsistent."""
