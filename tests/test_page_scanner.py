"""Tests for the early-stopping page scanner."""

import pytest

from balance_sheet_pro.services.page_scanner import PageScanner
from balance_sheet_pro.services.pdf_reader import DocumentDecodeError
from tests.conftest import FakeDocument, filler_pages


def with_page(pages, page_number, text):
    pages = list(pages)
    pages[page_number - 1] = text
    return pages


class TestEarlyStop:

    def test_stops_marker_window_pages_after_marker(self, run):
        pages = with_page(filler_pages(40), 3, "STANDALONE BALANCE SHEET as at 31 March 2023")
        doc = FakeDocument(pages)

        scan = run(PageScanner(page_cap=150, marker_window=10).scan(doc))

        assert doc.requested == list(range(1, 14))
        assert scan.pages_scanned == 13
        assert scan.marker_page == 3
        assert scan.stopped_early is True
        assert scan.total_pages == 40

    @pytest.mark.parametrize("heading", [
        "Schedules forming part of the Balance Sheet",
        "Schedule Forming Part of the Accounts",
        "CAPITAL AND LIABILITIES",
    ])
    def test_recognizes_each_section_heading(self, run, heading):
        pages = with_page(filler_pages(30), 5, heading)
        scan = run(PageScanner(marker_window=2).scan(FakeDocument(pages)))
        assert scan.marker_page == 5
        assert scan.pages_scanned == 7

    def test_second_marker_does_not_extend_window(self, run):
        pages = filler_pages(30)
        pages = with_page(pages, 2, "Standalone Balance Sheet")
        pages = with_page(pages, 6, "Capital and Liabilities")
        scan = run(PageScanner(marker_window=5).scan(FakeDocument(pages)))
        assert scan.marker_page == 2
        assert scan.pages_scanned == 7

    def test_marker_near_end_reads_to_last_page(self, run):
        pages = with_page(filler_pages(12), 5, "Standalone Balance Sheet")
        scan = run(PageScanner(marker_window=10).scan(FakeDocument(pages)))
        assert scan.pages_scanned == 12
        assert scan.stopped_early is False

    def test_marker_on_last_allowed_page(self, run):
        pages = with_page(filler_pages(20), 15, "Standalone Balance Sheet")
        scan = run(PageScanner(marker_window=0).scan(FakeDocument(pages)))
        assert scan.pages_scanned == 15
        assert scan.stopped_early is True


class TestPageCap:

    def test_no_marker_scans_exactly_the_cap(self, run):
        doc = FakeDocument(filler_pages(200))
        scan = run(PageScanner(page_cap=100).scan(doc))
        assert scan.pages_scanned == 100
        assert doc.requested[-1] == 100
        assert scan.marker_page is None

    def test_short_document_is_read_fully(self, run):
        scan = run(PageScanner(page_cap=150).scan(FakeDocument(filler_pages(4))))
        assert scan.pages_scanned == 4
        assert scan.stopped_early is False

    def test_empty_document(self, run):
        scan = run(PageScanner().scan(FakeDocument([])))
        assert scan.pages_scanned == 0
        assert scan.text == ""


class TestScanText:

    def test_pages_joined_with_trailing_newlines(self, run):
        scan = run(PageScanner().scan(FakeDocument(["a", "b"])))
        assert scan.text == "a\nb\n"

    def test_marker_tested_per_page(self, run):
        # Heading split across a page break is not a marker
        scan = run(PageScanner(marker_window=1).scan(FakeDocument(["Standalone", "Balance Sheet", "x", "y"])))
        assert scan.marker_page is None
        assert scan.pages_scanned == 4


class TestDecodeErrors:

    def test_page_error_propagates(self, run):
        doc = FakeDocument(filler_pages(10), broken_pages={4: "corrupt content stream"})
        with pytest.raises(DocumentDecodeError):
            run(PageScanner().scan(doc))
        assert doc.requested == [1, 2, 3, 4]
