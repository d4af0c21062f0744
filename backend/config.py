"""Configuration management for PDF Text Analyzer."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:5173"
).split(",")

# Upload Configuration
MAX_UPLOAD_SIZE_MB = int(os.getenv("MAX_UPLOAD_SIZE_MB", "10"))
MAX_UPLOAD_SIZE_BYTES = MAX_UPLOAD_SIZE_MB * 1024 * 1024

# Extraction Configuration
MIN_DIRECT_TEXT_LENGTH = int(os.getenv("MIN_DIRECT_TEXT_LENGTH", "50"))  # chars, after trimming
OCR_LANGUAGE = os.getenv("OCR_LANGUAGE", "eng")
OCR_MAX_WORKERS = int(os.getenv("OCR_MAX_WORKERS", "4"))
OCR_RENDER_ZOOM = float(os.getenv("OCR_RENDER_ZOOM", "2.0"))
TESSERACT_CMD = os.getenv("TESSERACT_CMD")  # None uses tesseract from PATH

# Analysis Configuration
TOP_N_WORDS = int(os.getenv("TOP_N_WORDS", "20"))
DEFAULT_STOP_WORDS = frozenset(["the", "and", "is", "in", "to", "of"])
EXTRA_STOP_WORDS = frozenset(
    word.strip().lower()
    for word in os.getenv("EXTRA_STOP_WORDS", "").split(",")
    if word.strip()
)
STOP_WORDS = DEFAULT_STOP_WORDS | EXTRA_STOP_WORDS
