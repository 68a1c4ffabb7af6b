from collections.abc import Callable
from typing import Any, BinaryIO

from app.database.exceptions import StoreError
from app.database.repositories.documents_repository import DocumentsRepository
from app.documents.classifier import classify
from app.documents.codec import encode_to_text
from app.documents.exceptions import (
    InvalidDocumentError,
    PdfValidationError,
    StoreFailureError,
    ValidationFailure,
)
from app.documents.models import DocumentRecord, NewDocument
from app.documents.naming import resolve_name
from app.documents.validator import PdfValidator
from app.logging.logger import Log

ProgressCallback = Callable[[int], None]


class DocumentService:
    """Upload pipeline plus CRUD and export for documents.

    Pipeline: validate -> read -> classify -> name -> persist.
    """

    def __init__(
        self,
        repository: DocumentsRepository,
        validator: PdfValidator | None = None,
    ) -> None:
        self._repository = repository
        self._validator = validator if validator is not None else PdfValidator()

    def ingest(
        self,
        binary: bytes | BinaryIO,
        filename: str,
        mime_type: str,
        byte_length: int,
        product_type: str,
        progress: ProgressCallback | None = None,
    ) -> DocumentRecord:
        """Validate, classify and persist an uploaded PDF.

        Args:
            binary: Payload bytes, or a readable binary file object.
            filename: Original upload filename, stored verbatim.
            mime_type: MIME type declared by the uploader.
            byte_length: Declared payload size in bytes.
            product_type: Category the document is filed under.
            progress: Optional callback receiving 25, 50 and 100.

        Returns:
            The stored DocumentRecord with its id populated.

        Raises:
            InvalidDocumentError: if validation fails; nothing is stored.
            StoreFailureError: if the record store rejects the insert.
        """
        Log.info(f"Ingesting {filename} ({byte_length} bytes) for {product_type}")
        try:
            self._validator.validate(binary, mime_type, byte_length)
        except PdfValidationError as exc:
            Log.warning(f"Rejected {filename}: {exc}")
            raise InvalidDocumentError(exc.reason, str(exc)) from exc

        if progress:
            progress(25)
        file_data = self._read_payload(binary)
        if progress:
            progress(50)

        doc_type = classify(filename)
        document = NewDocument(
            name=resolve_name(filename, doc_type),
            description=f"{doc_type.value} Document",
            filename=filename,
            type=doc_type,
            product_type=product_type,
            file_data=file_data,
        )

        try:
            record = self._repository.insert(document)
        except StoreError as exc:
            Log.error(f"Failed to store {filename}: {exc}")
            raise StoreFailureError(f"Failed to upload document: {exc}") from exc

        if progress:
            progress(100)
        Log.info(f"Stored {filename} as document {record.id} ({record.type.value})")
        return record

    def list_documents(self) -> list[DocumentRecord]:
        return self._repository.find_all()

    def list_documents_by_product_type(self, product_type: str) -> list[DocumentRecord]:
        return self._repository.find_by_product_type(product_type)

    def get_document(self, document_id: str) -> DocumentRecord | None:
        return self._repository.find_by_id(document_id)

    def update_document(self, document_id: str, **changes: Any) -> None:
        """Update name, description, type and/or products of a document."""
        self._repository.update(document_id, changes)
        Log.info(f"Updated document {document_id}: {sorted(changes)}")

    def delete_document(self, document_id: str) -> None:
        self._repository.delete(document_id)
        Log.info(f"Deleted document {document_id}")

    def clear_documents(self) -> int:
        """Delete every document. Returns the number removed."""
        deleted = self._repository.delete_all()
        Log.info(f"Cleared {deleted} documents")
        return deleted

    def export_document_as_base64(self, document_id: str) -> str | None:
        """Return the payload as base64, or None if there is no stored payload."""
        file_data = self._repository.find_file_data(document_id)
        if file_data is None:
            Log.debug(f"No payload stored for document {document_id}")
            return None
        return encode_to_text(file_data)

    def export_all_with_data(self) -> list[tuple[DocumentRecord, str]]:
        """Export every document with a payload, in listing order."""
        results: list[tuple[DocumentRecord, str]] = []
        for record in self.list_documents():
            encoded = self.export_document_as_base64(record.id)
            if encoded is not None:
                results.append((record, encoded))
        Log.info(f"Exported {len(results)} documents with data")
        return results

    @staticmethod
    def _read_payload(binary: bytes | BinaryIO) -> bytes:
        if isinstance(binary, (bytes, bytearray, memoryview)):
            return bytes(binary)
        try:
            binary.seek(0)
            return binary.read()
        except (OSError, ValueError) as exc:
            raise InvalidDocumentError(ValidationFailure.READ_FAILURE) from exc
