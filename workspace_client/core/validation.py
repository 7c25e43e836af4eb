from __future__ import annotations

from workspace_client.domain import SelectedFile

ALLOWED_EXTENSIONS = frozenset({"txt", "pdf"})

NO_FILE_MESSAGE = "Please select a file first."
NO_FILE_DURATION_MS = 3000
BAD_EXTENSION_MESSAGE = "Only TXT or PDF files are allowed."
BAD_EXTENSION_DURATION_MS = 4000


class ValidationError(Exception):
    """Raised when a user action fails a local precondition."""

    def __init__(self, message: str, duration_ms: int) -> None:
        super().__init__(message)
        self.message = message
        self.duration_ms = duration_ms


def validate_upload(file: SelectedFile | None) -> SelectedFile:
    if file is None:
        raise ValidationError(NO_FILE_MESSAGE, NO_FILE_DURATION_MS)
    if file.extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(BAD_EXTENSION_MESSAGE, BAD_EXTENSION_DURATION_MS)
    return file
