"""PDF decoding on top of PyMuPDF."""

import logging

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


class DocumentDecodeError(Exception):
    """Raised when a PDF cannot be opened or a page cannot be read."""


class PdfDocument:
    """Decoded PDF exposing per-page plain text.

    Page numbers are 1-based to match how statements are cited.
    """

    def __init__(self, doc: "fitz.Document"):
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    async def get_page_text(self, page_number: int) -> str:
        """Return the plain text of one page in reading order.

        Args:
            page_number: 1-based page number

        Returns:
            Page text (may be empty for image-only pages)

        Raises:
            DocumentDecodeError: If the page cannot be decoded
        """
        if page_number < 1 or page_number > self.page_count:
            raise DocumentDecodeError(f"Page {page_number} out of range (1-{self.page_count})")
        try:
            page = self._doc.load_page(page_number - 1)
            return page.get_text("text", sort=True)
        except Exception as e:
            raise DocumentDecodeError(f"Failed to read page {page_number}: {e}") from e

    def close(self) -> None:
        self._doc.close()

    def __enter__(self) -> "PdfDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_pdf(raw_bytes: bytes) -> PdfDocument:
    """Decode raw PDF bytes.

    Args:
        raw_bytes: Content of the uploaded file

    Returns:
        PdfDocument ready for page retrieval

    Raises:
        DocumentDecodeError: If the bytes are not a readable, unlocked PDF
    """
    if not raw_bytes:
        raise DocumentDecodeError("Empty document")

    try:
        doc = fitz.open(stream=raw_bytes, filetype="pdf")
    except Exception as e:
        raise DocumentDecodeError(f"Failed to open PDF: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise DocumentDecodeError("PDF is password-protected")

    logger.debug("Opened PDF with %d pages", doc.page_count)
    return PdfDocument(doc)
