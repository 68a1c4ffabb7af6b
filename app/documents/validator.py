from typing import BinaryIO

from app.documents.exceptions import PdfValidationError, ValidationFailure

PDF_MIME_TYPE = "application/pdf"
PDF_SIGNATURE = "%PDF"
MAX_SIZE_BYTES = 50 * 1024 * 1024
MIN_SIZE_BYTES = 1024

_HEAD_LENGTH = 5


class PdfValidator:
    """Cheap pre-flight checks on an upload: MIME type, size bounds, signature."""

    def __init__(
        self,
        max_size_bytes: int = MAX_SIZE_BYTES,
        min_size_bytes: int = MIN_SIZE_BYTES,
    ) -> None:
        self._max_size_bytes = max_size_bytes
        self._min_size_bytes = min_size_bytes

    def validate(
        self,
        binary: bytes | BinaryIO,
        declared_mime_type: str,
        byte_length: int,
    ) -> None:
        """Check the upload, stopping at the first failed check.

        Args:
            binary: Payload bytes, or a readable binary file object.
            declared_mime_type: MIME type reported by the uploader.
            byte_length: Declared payload size in bytes.

        Raises:
            PdfValidationError: with the reason of the first failed check.
        """
        if declared_mime_type != PDF_MIME_TYPE:
            raise PdfValidationError(ValidationFailure.WRONG_TYPE)
        if byte_length > self._max_size_bytes:
            raise PdfValidationError(ValidationFailure.TOO_LARGE)
        if byte_length < self._min_size_bytes:
            raise PdfValidationError(ValidationFailure.TOO_SMALL)

        head = self._read_head(binary)
        if not head.decode("latin-1").startswith(PDF_SIGNATURE):
            raise PdfValidationError(ValidationFailure.BAD_SIGNATURE)

    def _read_head(self, binary: bytes | BinaryIO) -> bytes:
        if isinstance(binary, (bytes, bytearray, memoryview)):
            return bytes(binary[:_HEAD_LENGTH])
        try:
            position = binary.tell()
            binary.seek(0)
            head = binary.read(_HEAD_LENGTH)
            binary.seek(position)
        except (OSError, ValueError) as exc:
            raise PdfValidationError(ValidationFailure.READ_FAILURE) from exc
        return head
