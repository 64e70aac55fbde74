"""Tests for sectext.extractor.pdf_source module."""
import asyncio

import pytest

from conftest import build_pdf
from sectext.extractor.errors import SourceUnavailable
from sectext.extractor.pdf_source import AsyncPDFFragmentSource, PDFFragmentSource
from sectext.extractor.section_extractor import extract_section, extract_section_async


class TestPDFFragmentSource:
    def test_page_count(self, act_pdf_bytes) -> None:
        with PDFFragmentSource(act_pdf_bytes) as source:
            assert source.page_count() == 2

    def test_lines_as_fragments(self, act_pdf_bytes) -> None:
        with PDFFragmentSource(act_pdf_bytes) as source:
            fragments = [f.strip() for f in source.page_fragments(2)]
        assert fragments == [
            "9. Levy and Collection",
            "Tax shall be levied...",
            "10. Next section text.",
        ]

    def test_blank_page(self) -> None:
        with PDFFragmentSource(build_pdf([[]])) as source:
            assert source.page_fragments(1) == []

    def test_out_of_range(self, act_pdf_bytes) -> None:
        with PDFFragmentSource(act_pdf_bytes) as source:
            with pytest.raises(SourceUnavailable):
                source.page_fragments(3)

    def test_not_a_pdf(self) -> None:
        with pytest.raises(SourceUnavailable):
            PDFFragmentSource(b"definitely not a pdf", "junk.pdf")

    def test_from_path(self, tmp_path, act_pdf_bytes) -> None:
        pdf_path = tmp_path / "act.pdf"
        pdf_path.write_bytes(act_pdf_bytes)
        with PDFFragmentSource.from_path(pdf_path) as source:
            assert source.page_count() == 2

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(SourceUnavailable):
            PDFFragmentSource.from_path(tmp_path / "missing.pdf")

    def test_extract_section(self, act_pdf_bytes) -> None:
        with PDFFragmentSource(act_pdf_bytes) as source:
            result = extract_section("9", source)
        assert result.text == "9. Levy and Collection Tax shall be levied..."


class TestAsyncPDFFragmentSource:
    @pytest.mark.asyncio
    async def test_extract_section(self, act_pdf_bytes) -> None:
        source = AsyncPDFFragmentSource.from_bytes(act_pdf_bytes, "act.pdf")
        try:
            result = await extract_section_async("9", source)
        finally:
            source.close()
        assert result.text == "9. Levy and Collection Tax shall be levied..."
        assert result.start_page == 2

    @pytest.mark.asyncio
    async def test_shared_source_concurrent_extractions(self) -> None:
        pages = []
        for n in range(1, 31):
            pages.append([f"{n}. Heading of section {n}", f"Body of section {n} on its own page."])
        source = AsyncPDFFragmentSource.from_bytes(build_pdf(pages), "act.pdf")

        identifiers = [str(n) for n in range(1, 31)] * 4
        try:
            results = await asyncio.gather(
                *(extract_section_async(identifier, source) for identifier in identifiers)
            )
        finally:
            source.close()

        for identifier, result in zip(identifiers, results):
            assert result.text == (
                f"{identifier}. Heading of section {identifier} "
                f"Body of section {identifier} on its own page."
            )
            assert result.start_page == int(identifier)
