"""Centralized configuration for the training data viewer.

Typed constants for pagination, uploads and the API server. Environment
variable overrides use safe defaults so the app starts without a .env file.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load environment variables from .env file before any constant reads them
load_dotenv()

# --- App ---
APP_VERSION: str = "1.0.0"
SERVICE_NAME: str = "Training Data Viewer"

# --- Pagination ---
PAGE_SIZE_OPTIONS: tuple[int, ...] = (5, 10, 20, 50)
DEFAULT_PAGE_SIZE: int = 5

# --- Messages ---
INVALID_FILE_MESSAGE: str = "Invalid file format. Please check the file."

# --- Filtering ---
ALL_LANGUAGES: str = "all"

# --- Uploads ---
MAX_UPLOAD_CHARS: int = int(os.getenv("TDVIEWER_MAX_UPLOAD_CHARS", "50000000"))

# --- API ---
API_HOST: str = os.getenv("TDVIEWER_HOST", "127.0.0.1")
API_PORT: int = int(os.getenv("TDVIEWER_PORT", "8000"))

# --- Logging ---
LOG_LEVEL: str = os.getenv("TDVIEWER_LOG_LEVEL", "INFO").upper()
