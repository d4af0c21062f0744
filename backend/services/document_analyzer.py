"""Document analysis pipeline: PDF bytes to statistics and word frequencies."""
import logging
import time

from models.analysis import AnalysisResult
from services.pdf_extractor import PDFExtractor
from services.text_analyzer import TextAnalyzer

logger = logging.getLogger(__name__)


class DocumentAnalyzer:
    """Runs extraction, then analysis, for a single uploaded PDF."""

    def __init__(self, extractor: PDFExtractor, text_analyzer: TextAnalyzer):
        """
        Initialize the document analyzer.

        Args:
            extractor: PDFExtractor used to obtain the document text
            text_analyzer: TextAnalyzer used to compute stats and frequencies
        """
        self.extractor = extractor
        self.text_analyzer = text_analyzer
        logger.info("Initialized DocumentAnalyzer")

    def analyze_document(self, buffer: bytes) -> AnalysisResult:
        """
        Extract text from a PDF and analyze it.

        Args:
            buffer: Raw PDF bytes

        Returns:
            AnalysisResult with stats and word frequencies

        Raises:
            ExtractionError: If no text could be extracted
        """
        start_time = time.time()

        text = self.extractor.extract(buffer)
        result = self.text_analyzer.analyze(text)

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "Document analyzed",
            extra={"fields": {
                "document_bytes": len(buffer),
                "text_length": len(text),
                "word_count": result.stats.word_count,
                "latency_ms": latency_ms
            }}
        )
        return result
