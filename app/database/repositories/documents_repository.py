from collections.abc import Mapping
from typing import Any

from app.database.base import RecordStore, Row
from app.documents.classifier import classify
from app.documents.models import UPDATABLE_FIELDS, DocumentRecord, DocumentType, NewDocument
from app.logging.logger import Log

# Everything except file_data, so listings never pull payloads.
DOCUMENT_COLUMNS = (
    "id",
    "name",
    "description",
    "filename",
    "size",
    "type",
    "required",
    "products",
    "product_type",
    "created_at",
)


def _row_type(row: Row) -> DocumentType:
    try:
        return DocumentType(row["type"])
    except ValueError:
        # Rows written outside this client may carry types we do not know.
        doc_type = classify(row["filename"])
        Log.warning(
            f"Document {row['id']} has unknown type {row['type']!r}, using {doc_type.value}"
        )
        return doc_type


def _to_record(row: Row) -> DocumentRecord:
    return DocumentRecord(
        id=str(row["id"]),
        name=row["name"],
        description=row["description"],
        filename=row["filename"],
        size=row["size"],
        type=_row_type(row),
        product_type=row["product_type"],
        required=bool(row.get("required", False)),
        products=list(row.get("products") or []),
        created_at=row.get("created_at"),
    )


class DocumentsRepository:
    """Operations on the documents table through a RecordStore."""

    def __init__(self, store: RecordStore, table: str = "documents") -> None:
        self._store = store
        self._table = table

    def insert(self, document: NewDocument) -> DocumentRecord:
        """Persist a new document and return it with its store-assigned id."""
        row = self._store.insert(self._table, document.to_fields())
        return _to_record(row)

    def find_all(self) -> list[DocumentRecord]:
        """All documents, newest first."""
        rows = self._store.select_many(
            self._table, {}, order_by="created_at", columns=DOCUMENT_COLUMNS
        )
        return [_to_record(row) for row in rows]

    def find_by_product_type(self, product_type: str) -> list[DocumentRecord]:
        rows = self._store.select_many(
            self._table,
            {"product_type": product_type},
            order_by="created_at",
            columns=DOCUMENT_COLUMNS,
        )
        return [_to_record(row) for row in rows]

    def find_by_id(self, document_id: str) -> DocumentRecord | None:
        row = self._store.select_one(
            self._table, {"id": document_id}, columns=DOCUMENT_COLUMNS
        )
        if row is None:
            return None
        return _to_record(row)

    def find_file_data(self, document_id: str) -> bytes | None:
        """Return the stored payload, or None if the row or its payload is missing."""
        row = self._store.select_one(self._table, {"id": document_id}, columns=("file_data",))
        if row is None or row["file_data"] is None:
            return None
        return bytes(row["file_data"])

    def update(self, document_id: str, changes: Mapping[str, Any]) -> None:
        """Apply a partial update.

        Raises:
            ValueError: if changes touch a field other than name, description,
                type or products.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")
        if not changes:
            return

        fields = dict(changes)
        if "type" in fields:
            fields["type"] = DocumentType(fields["type"]).value
        if "products" in fields:
            fields["products"] = list(fields["products"])
        self._store.update(self._table, document_id, fields)

    def delete(self, document_id: str) -> None:
        self._store.delete(self._table, document_id)

    def delete_all(self) -> int:
        return self._store.delete_where(self._table, {})
