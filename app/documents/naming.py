import re

from app.documents.models import DocumentType

DISPLAY_NAMES: dict[DocumentType, str] = {
    DocumentType.TDS: "Technical Data Sheet",
    DocumentType.ESR: "Evaluation Report",
    DocumentType.MSDS: "Material Safety Data Sheet",
    DocumentType.LEED: "LEED Credit Guide",
    DocumentType.INSTALLATION: "Installation Guide",
    DocumentType.WARRANTY: "Limited Warranty",
    DocumentType.ACOUSTIC: "Acoustical Performance",
    DocumentType.PART_SPEC: "3-Part Specifications",
}

_PDF_EXTENSION = re.compile(r"\.pdf$", re.IGNORECASE)


def strip_pdf_extension(filename: str) -> str:
    return _PDF_EXTENSION.sub("", filename)


def resolve_name(filename: str, doc_type: DocumentType | str) -> str:
    """Return the canonical label for doc_type, else the filename without .pdf."""
    fallback = strip_pdf_extension(filename)
    try:
        return DISPLAY_NAMES[DocumentType(doc_type)]
    except (ValueError, KeyError):
        return fallback
