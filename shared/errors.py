"""
Audit error taxonomy. Every failure a submission can hit is one of these;
the workflow turns them into the message shown in the error banner.
"""


class AuditError(Exception):
    """Base class for failures surfaced to the user as a single message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(AuditError):
    """Bad address format or missing file, detected before any I/O."""


class UnsupportedFileTypeError(AuditError):
    def __init__(self, filename: str):
        super().__init__(
            f"Unsupported whitepaper file type: {filename}. Please use PDF, DOCX, TXT, or MD."
        )
        self.filename = filename


class FileReadError(AuditError):
    """An uploaded file could not be read."""


class UpstreamError(AuditError):
    """Explorer or AI service failure, message passed through where available."""


class InvalidResponseError(AuditError):
    def __init__(self, raw_text: str):
        super().__init__("AI failed to return a valid analysis. Please try again.")
        # Kept for operator logs only
        self.raw_text = raw_text


class ConfigurationError(AuditError):
    """A required credential is missing."""
