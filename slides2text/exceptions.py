class ExtractionError(Exception):
    """Base class for all errors raised while extracting slide text."""

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        self.__cause__ = cause  # Optional chaining for debugging


class ExtractionFileReadError(ExtractionError):
    """Raised when the input file cannot be read. Nothing is extracted."""

    def __init__(self, file_path: str, message: str = None, *, cause: Exception = None):
        self.file_path = file_path
        if message is None:
            message = f"Unable to read input file: {file_path}"
        super().__init__(message, cause=cause)


class ExtractionFailedError(ExtractionError):
    """Raised when extraction of an already loaded document fails unexpectedly."""
