"""Services for PDF Text Analyzer."""
from .ocr_engine import OCREngine, OCREngineError
from .pdf_extractor import PDFExtractor, ExtractionError
from .text_analyzer import TextAnalyzer
from .document_analyzer import DocumentAnalyzer

__all__ = ['OCREngine', 'OCREngineError', 'PDFExtractor', 'ExtractionError', 'TextAnalyzer', 'DocumentAnalyzer']
