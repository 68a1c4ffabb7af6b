import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate an uncompressed single-page PDF comfortably above the 1 KiB floor."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=0)
    for line in range(40):
        c.drawString(72, 740 - line * 16, f"Line {line}: technical data sheet for flooring")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_blob() -> bytes:
    """A 2000-byte payload carrying the PDF signature."""
    head = b"%PDF-1.7\n"
    return head + b"\0" * (2000 - len(head))
