"""PDF text extraction with OCR fallback for scanned documents."""
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List

import fitz  # PyMuPDF

from config import MIN_DIRECT_TEXT_LENGTH, OCR_MAX_WORKERS, OCR_RENDER_ZOOM
from services.ocr_engine import OCREngine

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when no usable text could be extracted from a PDF."""


class PDFExtractor:
    """Extracts plain text from PDF bytes, falling back to OCR for image-only pages."""

    def __init__(
        self,
        ocr_engine: OCREngine,
        min_text_length: int = MIN_DIRECT_TEXT_LENGTH,
        ocr_max_workers: int = OCR_MAX_WORKERS,
        render_zoom: float = OCR_RENDER_ZOOM
    ):
        """
        Initialize PDFExtractor.

        Args:
            ocr_engine: Initialized OCR engine used for the fallback path
            min_text_length: Direct text must be longer than this (after trimming)
                to skip OCR
            ocr_max_workers: Maximum number of pages recognized concurrently
            render_zoom: Scale factor used when rendering pages for OCR
        """
        self.ocr_engine = ocr_engine
        self.min_text_length = min_text_length
        self.ocr_max_workers = max(1, ocr_max_workers)
        self.render_zoom = render_zoom

    def extract(self, buffer: bytes) -> str:
        """
        Extract text from a PDF.

        Strategy:
        1. Read the text embedded in the PDF structure
        2. If the trimmed text is longer than min_text_length, return it as is
        3. Otherwise render every page and OCR it, joining page texts in page
           order, each followed by a newline

        Args:
            buffer: Raw PDF bytes

        Returns:
            Extracted text

        Raises:
            ExtractionError: If either path fails or neither yields any text
        """
        try:
            direct_text = self._extract_direct(buffer)
            if len(direct_text.strip()) > self.min_text_length:
                logger.info(f"Direct extraction succeeded: {len(direct_text)} chars")
                return direct_text

            logger.info(
                f"Direct extraction yielded {len(direct_text.strip())} chars "
                f"(threshold {self.min_text_length}), falling back to OCR"
            )
            ocr_text = self._extract_ocr(buffer)
        except Exception as e:
            logger.error(f"PDF extraction failed: {e}")
            raise ExtractionError(f"Processing failed: {e}") from e

        if ocr_text.strip():
            return ocr_text
        if direct_text.strip():
            logger.warning("OCR produced no text, using direct extraction result")
            return direct_text

        raise ExtractionError("No text could be extracted from the document")

    def _extract_direct(self, buffer: bytes) -> str:
        """Concatenate the embedded text of every page."""
        with fitz.open(stream=buffer, filetype="pdf") as pdf_document:
            return "".join(page.get_text() for page in pdf_document)

    def _render_pages(self, buffer: bytes) -> List[bytes]:
        """Render every page to PNG bytes, in page order."""
        matrix = fitz.Matrix(self.render_zoom, self.render_zoom)
        with fitz.open(stream=buffer, filetype="pdf") as pdf_document:
            return [page.get_pixmap(matrix=matrix).tobytes("png") for page in pdf_document]

    def _extract_ocr(self, buffer: bytes) -> str:
        """
        OCR every page and join the results in page order.

        Pages are recognized concurrently (bounded by ocr_max_workers); each
        result is stored under its page index so completion order never
        affects the output.
        """
        start_time = time.time()
        images = self._render_pages(buffer)
        if not images:
            return ""

        page_texts: List[str] = [""] * len(images)
        workers = min(self.ocr_max_workers, len(images))

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self.ocr_engine.recognize, image): index
                for index, image in enumerate(images)
            }
            for future in as_completed(futures):
                index = futures[future]
                page_texts[index] = future.result()
                logger.debug(f"OCR finished page {index + 1}/{len(images)}")

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(f"OCR processed {len(images)} pages in {latency_ms}ms")

        return "".join(text + "\n" for text in page_texts)
