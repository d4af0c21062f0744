"""Main entry point for PDF Text Analyzer API."""
import logging
import time
from typing import Optional
from fastapi import FastAPI, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import (
    PORT, LOG_LEVEL, LOG_FORMAT, CORS_ORIGINS, MAX_UPLOAD_SIZE_BYTES, MAX_UPLOAD_SIZE_MB,
    STOP_WORDS, TOP_N_WORDS
)
from logger import setup_logging
from models.api import AnalyzeResponse, ErrorResponse
from services.ocr_engine import OCREngine
from services.pdf_extractor import PDFExtractor, ExtractionError
from services.text_analyzer import TextAnalyzer
from services.document_analyzer import DocumentAnalyzer

# Initialize logging
setup_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

# Initialize FastAPI app
app = FastAPI(
    title="PDF Text Analyzer",
    description="Extracts text from PDFs (with OCR fallback) and returns text statistics and word frequencies",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,  # Vite dev server by default
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services (will be done on startup)
document_analyzer: DocumentAnalyzer = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global document_analyzer

    logger.info("Initializing PDF Text Analyzer services...")

    try:
        ocr_engine = OCREngine()
        extractor = PDFExtractor(ocr_engine)
        text_analyzer = TextAnalyzer(stop_words=STOP_WORDS, top_n=TOP_N_WORDS)
        document_analyzer = DocumentAnalyzer(extractor, text_analyzer)
        logger.info("All services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


def _error(status_code: int, message: str) -> JSONResponse:
    """Build the {"error": message} body used for every failure."""
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "PDF Text Analyzer API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "pdf-text-analyzer",
        "version": "1.0.0",
        "ready": document_analyzer is not None
    }


@app.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def analyze_endpoint(file: Optional[UploadFile] = File(None)):
    """
    Analyze an uploaded PDF.

    Validates the upload, extracts its text (direct parse, OCR fallback for
    scanned documents) and returns text statistics and the top word
    frequencies.

    Args:
        file: Multipart upload in the "file" form field

    Returns:
        {"stats": {...}, "wordFrequency": [[word, count], ...]} on success,
        {"error": message} with status 400 or 500 otherwise
    """
    start_time = time.time()

    if file is None:
        return _error(400, "No file uploaded")
    if file.content_type != PDF_CONTENT_TYPE:
        return _error(400, "Only PDF files allowed")

    # Read at most one byte past the limit so oversized uploads are not held in memory
    content = await file.read(MAX_UPLOAD_SIZE_BYTES + 1)
    if not content:
        return _error(400, "Uploaded file is empty")
    if len(content) > MAX_UPLOAD_SIZE_BYTES:
        return _error(400, f"File exceeds the {MAX_UPLOAD_SIZE_MB} MB limit")

    logger.info(f"Analyzing upload: {file.filename} ({len(content)} bytes)")

    try:
        result = await run_in_threadpool(document_analyzer.analyze_document, content)
    except ExtractionError as e:
        logger.error(f"Extraction failed for {file.filename}: {e}")
        return _error(500, str(e))
    except Exception as e:
        logger.error(f"Unexpected error analyzing {file.filename}: {e}", exc_info=True)
        return _error(500, f"Internal server error: {str(e)}")

    total_latency_ms = int((time.time() - start_time) * 1000)
    logger.info(f"Upload analyzed successfully in {total_latency_ms}ms")
    return result.to_dict()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting PDF Text Analyzer API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
