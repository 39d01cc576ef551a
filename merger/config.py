"""
Merge Configuration
Environment-driven settings for the Gemini client and upload limits
"""

import math
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import MODEL_STANDARD, MODEL_HIGH_RES, MAX_FILE_SIZE_MB

# Ensure .env variables are loaded even when this module is imported
load_dotenv()


def get_api_key() -> Optional[str]:
    """
    Return the Gemini API key from the environment.

    GEMINI_API_KEY takes precedence; GOOGLE_API_KEY is accepted for older .env files.
    Read at call time so a key added after startup is picked up.
    """
    api_key = (os.getenv('GEMINI_API_KEY') or os.getenv('GOOGLE_API_KEY') or '').strip()
    return api_key or None


def get_standard_model() -> str:
    """
    Returns the Gemini model id used for standard-quality merges.

    Override via GEMINI_IMAGE_MODEL to avoid code changes when Google retires model ids.
    """
    return os.getenv('GEMINI_IMAGE_MODEL', MODEL_STANDARD)


def get_high_res_model() -> str:
    return os.getenv('GEMINI_HIGH_RES_IMAGE_MODEL', MODEL_HIGH_RES)


def get_max_upload_bytes() -> int:
    """Per-image upload limit; an unparsable MAX_UPLOAD_SIZE_MB falls back to the default"""
    raw = os.getenv('MAX_UPLOAD_SIZE_MB', str(MAX_FILE_SIZE_MB))
    try:
        max_mb = float(raw)
    except ValueError:
        print(f"⚠️ MAX_UPLOAD_SIZE_MB={raw!r} is not a number; using the default {MAX_FILE_SIZE_MB}MB")
        max_mb = MAX_FILE_SIZE_MB
    if not (max_mb > 0 and math.isfinite(max_mb)):
        print(f"⚠️ MAX_UPLOAD_SIZE_MB={raw!r} must be positive; using the default {MAX_FILE_SIZE_MB}MB")
        max_mb = MAX_FILE_SIZE_MB
    return int(max_mb * 1024 * 1024)
