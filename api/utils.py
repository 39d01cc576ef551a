"""
API Utility Functions
Upload validation and formatting helpers for the merge endpoints
"""

import io
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from merger.config import get_max_upload_bytes
from merger.constants import ACCEPTED_IMAGE_TYPES
from merger.models import ImageInput

INVALID_TYPE_MESSAGE = "Invalid file type. Please upload JPG, PNG, or WEBP."

# Content types browsers send when they don't know better
GENERIC_CONTENT_TYPES = {'', 'application/octet-stream'}


def format_max_size(size_bytes: int) -> str:
    size_mb = size_bytes / (1024 * 1024)
    return f"{size_mb:g}MB"


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human readable format

    Args:
        size_bytes: Size in bytes

    Returns:
        str: Formatted file size
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def format_processing_time(start_time: float, end_time: float) -> str:
    """
    Format processing time in human readable format

    Args:
        start_time: Start timestamp
        end_time: End timestamp

    Returns:
        str: Formatted processing time
    """
    duration = end_time - start_time
    if duration < 1:
        return f"{duration * 1000:.0f}ms"
    elif duration < 60:
        return f"{duration:.1f}s"
    else:
        minutes = int(duration // 60)
        seconds = duration % 60
        return f"{minutes}m {seconds:.1f}s"


def detect_image_mime(data: bytes) -> Optional[str]:
    """
    Identify an image's MIME type from its bytes with Pillow

    Returns:
        str: MIME type such as 'image/png', or None if Pillow can't read it
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return None
    return Image.MIME.get(image_format) if image_format else None


def validate_image_file(file) -> Tuple[bool, str, Optional[ImageInput]]:
    """
    Validate an uploaded image and read it into memory

    Args:
        file: Uploaded werkzeug FileStorage

    Returns:
        tuple: (is_valid, error_message, image). `image` carries the bytes and the
        MIME type Pillow detected when valid.
    """
    if not file or not file.filename:
        return False, "No file provided", None

    declared_type = (file.mimetype or '').lower()
    if declared_type not in GENERIC_CONTENT_TYPES and declared_type not in ACCEPTED_IMAGE_TYPES:
        return False, INVALID_TYPE_MESSAGE, None

    # Check file size before reading it all
    file.seek(0, 2)  # Seek to end
    file_size = file.tell()
    file.seek(0)  # Reset to beginning

    max_bytes = get_max_upload_bytes()
    if file_size > max_bytes:
        return False, f"File size too large. Max {format_max_size(max_bytes)}.", None

    if file_size == 0:
        return False, "Empty file provided", None

    data = file.read()
    detected_type = detect_image_mime(data)
    if detected_type not in ACCEPTED_IMAGE_TYPES:
        return False, INVALID_TYPE_MESSAGE, None

    return True, "", ImageInput(data=data, mime_type=detected_type)
