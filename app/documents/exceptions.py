from enum import Enum


class ValidationFailure(str, Enum):
    """Why an upload was rejected before classification."""

    WRONG_TYPE = "wrong_type"
    TOO_LARGE = "too_large"
    TOO_SMALL = "too_small"
    BAD_SIGNATURE = "bad_signature"
    READ_FAILURE = "read_failure"


MESSAGES: dict[ValidationFailure, str] = {
    ValidationFailure.WRONG_TYPE: "File must be a PDF document",
    ValidationFailure.TOO_LARGE: "File size exceeds 50MB limit",
    ValidationFailure.TOO_SMALL: "File is too small to be a valid PDF",
    ValidationFailure.BAD_SIGNATURE: "File does not appear to be a valid PDF",
    ValidationFailure.READ_FAILURE: "Failed to read file",
}


class DocumentError(Exception):
    """Base exception for all document-related errors."""


class PdfValidationError(DocumentError):
    """Raised when an upload fails PDF validation."""

    def __init__(self, reason: ValidationFailure, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or MESSAGES[reason])


class IngestError(DocumentError):
    """Raised when a document cannot be ingested."""


class InvalidDocumentError(IngestError):
    """Raised when ingestion is rejected by validation. No store call was made."""

    def __init__(self, reason: ValidationFailure, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or MESSAGES[reason])


class StoreFailureError(IngestError):
    """Raised when the record store fails to persist a validated document."""
