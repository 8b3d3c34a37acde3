from pathlib import Path


class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InputFileError(ProcessorError):
    """Raised when the input file cannot be opened."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Fail to open file {path}: {cause}")
        self.path = path
        self.cause = cause
