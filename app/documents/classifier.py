from app.documents.models import DocumentType

# Checked top to bottom; the first rule with a matching keyword wins.
RULES: tuple[tuple[tuple[str, ...], DocumentType], ...] = (
    (("tds", "technical data"), DocumentType.TDS),
    (("esr", "evaluation report"), DocumentType.ESR),
    (("msds", "safety data"), DocumentType.MSDS),
    (("leed",), DocumentType.LEED),
    (("installation", "install"), DocumentType.INSTALLATION),
    (("warranty",), DocumentType.WARRANTY),
    (("acoustic", "esl"), DocumentType.ACOUSTIC),
    (("spec", "3-part"), DocumentType.PART_SPEC),
)

DEFAULT_TYPE = DocumentType.TDS


def classify(filename: str) -> DocumentType:
    """Infer the document type from keywords in the filename (case-insensitive)."""
    lower = filename.lower()
    for keywords, doc_type in RULES:
        if any(keyword in lower for keyword in keywords):
            return doc_type
    return DEFAULT_TYPE
