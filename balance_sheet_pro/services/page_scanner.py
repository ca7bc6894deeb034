"""Page scanner that locates the financial statements inside long filings."""

import logging
from typing import Optional, Pattern, Sequence

from balance_sheet_pro.models.document import ScanResult
from balance_sheet_pro.services.pattern_rules import SECTION_MARKERS

logger = logging.getLogger(__name__)


class PageScanner:
    """Accumulates page text until the statement section has been covered.

    Pages are read in order from page 1. Once a page matches a section marker,
    only ``marker_window`` more pages are read. Without any marker the scan
    runs to ``page_cap`` (or the last page) and returns everything read.
    """

    def __init__(
        self,
        page_cap: int = 150,
        marker_window: int = 10,
        markers: Sequence[Pattern] = SECTION_MARKERS
    ):
        """Initialize the scanner.

        Args:
            page_cap: Hard limit on pages read per document
            marker_window: Pages read past the first marker page
            markers: Section heading patterns tested against each page
        """
        self.page_cap = page_cap
        self.marker_window = marker_window
        self.markers = markers

    async def scan(self, document) -> ScanResult:
        """Read pages from a decoded document.

        Args:
            document: Object with ``page_count`` and ``async get_page_text(n)``
                (1-based page numbers), e.g. ``PdfDocument``

        Returns:
            ScanResult with the text of every page read

        Raises:
            DocumentDecodeError: Propagated from the document on a bad page
        """
        total_pages = document.page_count
        last_page = min(total_pages, self.page_cap)
        result = ScanResult(total_pages=total_pages)
        stop_after: Optional[int] = None

        for page_number in range(1, last_page + 1):
            # Sequential on purpose: whether to read the next page depends on this one
            page_text = await document.get_page_text(page_number)
            result.pages.append(page_text)

            if result.marker_page is None and self._has_marker(page_text):
                result.marker_page = page_number
                stop_after = page_number + self.marker_window
                logger.debug("Section marker on page %d, scanning through page %d", page_number, stop_after)

            if stop_after is not None and page_number >= stop_after:
                result.stopped_early = page_number < total_pages
                break

        if result.stopped_early:
            logger.info(
                "Stopped scan at page %d of %d (marker on page %d)",
                result.pages_scanned, total_pages, result.marker_page
            )
        elif result.marker_page is None and total_pages > last_page:
            logger.info("No section marker in first %d pages, using them as-is", last_page)

        return result

    def _has_marker(self, page_text: str) -> bool:
        return any(marker.search(page_text) for marker in self.markers)
