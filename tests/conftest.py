"""Shared fixtures: in-memory documents and generated PDFs."""

import asyncio
from typing import Dict, List, Optional

import fitz  # PyMuPDF
import pytest

from balance_sheet_pro.services.pdf_reader import DocumentDecodeError


class FakeDocument:
    """Stand-in for PdfDocument serving fixed page texts."""

    def __init__(self, pages: List[str], broken_pages: Optional[Dict[int, str]] = None):
        self.pages = pages
        self.broken_pages = broken_pages or {}
        self.requested: List[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    async def get_page_text(self, page_number: int) -> str:
        self.requested.append(page_number)
        if page_number in self.broken_pages:
            raise DocumentDecodeError(self.broken_pages[page_number])
        return self.pages[page_number - 1]

    def close(self) -> None:
        self.closed = True


def make_pdf(pages: List[str], **save_options) -> bytes:
    """Build a real PDF with one text block per page."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes(**save_options)
    doc.close()
    return data


def filler_pages(count: int, text: str = "Directors' report narrative") -> List[str]:
    return [f"{text} page {i + 1}" for i in range(count)]


@pytest.fixture
def run():
    """Run a coroutine to completion."""
    return asyncio.run
