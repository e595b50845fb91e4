import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"


def looks_like_pdf(data: bytes) -> bool:
    """Cheap signature check before handing bytes to the parser."""
    return data[:1024].lstrip().startswith(PDF_MAGIC)


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    logger.debug("Extracted text from %d PDF pages", len(pages))
    return "\n".join(pages).strip()
