"""OCR engine wrapping Tesseract for scanned PDF pages."""
import io
import logging
from typing import Optional

import pytesseract
from PIL import Image

from config import OCR_LANGUAGE, TESSERACT_CMD

logger = logging.getLogger(__name__)


class OCREngineError(Exception):
    """Raised when the OCR engine cannot be initialized."""


class OCREngine:
    """Ready-to-use handle for optical character recognition on page images."""

    def __init__(self, language: str = OCR_LANGUAGE, tesseract_cmd: Optional[str] = TESSERACT_CMD):
        """
        Initialize the OCR engine and verify that tesseract is usable.

        Args:
            language: Tesseract language model (e.g. "eng")
            tesseract_cmd: Path to the tesseract binary (defaults to PATH lookup)

        Raises:
            OCREngineError: If the tesseract binary cannot be found or run
        """
        self.language = language

        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

        try:
            self.version = str(pytesseract.get_tesseract_version())
        except Exception as e:
            raise OCREngineError(f"Tesseract is not available: {e}") from e

        logger.info(f"OCREngine initialized (tesseract {self.version}, language={self.language})")

    def recognize(self, image_bytes: bytes) -> str:
        """
        Recognize text in a single page image.

        Args:
            image_bytes: Encoded image (PNG) of one rendered page

        Returns:
            Recognized text, possibly empty
        """
        with Image.open(io.BytesIO(image_bytes)) as image:
            return pytesseract.image_to_string(image, lang=self.language)
