import argparse
import sys
from pathlib import Path

from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.database.exceptions import StoreError
from app.database.postgres_store import PostgresRecordStore
from app.database.repositories.documents_repository import DocumentsRepository
from app.database.schema import apply_schema
from app.documents.exceptions import IngestError
from app.documents.service import DocumentService
from app.documents.validator import PDF_MIME_TYPE, PdfValidator
from app.logging.logger import Log


def build_document_service(settings: Settings) -> DocumentService:
    """Build a DocumentService over the Postgres record store."""
    repository = DocumentsRepository(PostgresRecordStore(), settings.documents_table)
    validator = PdfValidator(
        max_size_bytes=settings.upload_max_size_bytes,
        min_size_bytes=settings.upload_min_size_bytes,
    )
    return DocumentService(repository, validator)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docadmin", description="Document admin client")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create tables if missing")

    upload = commands.add_parser("upload", help="Validate, classify and store a PDF")
    upload.add_argument("path", type=Path)
    upload.add_argument("--product-type", required=True)
    upload.add_argument("--mime-type", default=PDF_MIME_TYPE)

    listing = commands.add_parser("list", help="List stored documents")
    listing.add_argument("--product-type")

    export = commands.add_parser("export", help="Print or write a document as base64")
    export.add_argument("document_id")
    export.add_argument("--output", type=Path)

    delete = commands.add_parser("delete", help="Delete one document")
    delete.add_argument("document_id")

    commands.add_parser("clear", help="Delete every document")
    return parser


def run_command(args: argparse.Namespace, settings: Settings, service: DocumentService) -> int:
    if args.command == "init-db":
        apply_schema(settings)
        Log.info("Schema applied")
    elif args.command == "upload":
        with args.path.open("rb") as fh:
            record = service.ingest(
                fh,
                filename=args.path.name,
                mime_type=args.mime_type,
                byte_length=args.path.stat().st_size,
                product_type=args.product_type,
                progress=lambda pct: Log.info(f"Upload progress: {pct}%"),
            )
        print(f"{record.id}\t{record.type.value}\t{record.name}")
    elif args.command == "list":
        if args.product_type:
            records = service.list_documents_by_product_type(args.product_type)
        else:
            records = service.list_documents()
        for record in records:
            print(f"{record.id}\t{record.type.value}\t{record.product_type}\t{record.filename}")
    elif args.command == "export":
        encoded = service.export_document_as_base64(args.document_id)
        if encoded is None:
            Log.warning(f"No payload stored for document {args.document_id}")
            return 1
        if args.output:
            args.output.write_text(encoded, encoding="ascii")
        else:
            print(encoded)
    elif args.command == "delete":
        service.delete_document(args.document_id)
    elif args.command == "clear":
        service.clear_documents()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> init pool -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        return run_command(args, settings, build_document_service(settings))
    except (IngestError, StoreError) as exc:
        Log.error(str(exc))
        return 1
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
