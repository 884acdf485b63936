"""Errors raised while reading route definitions.

Translating routes never fails; only the file-reading layer raises.
"""


class RouteFileError(ValueError):
    """A route file could not be read as web service definitions."""

    def __init__(self, message: str, file_path: str | None = None):
        self.file_path = file_path
        if file_path:
            message = f"{file_path}: {message}"
        super().__init__(message)
