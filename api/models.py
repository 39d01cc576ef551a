"""
API Data Models
Defines response envelopes and error codes for the merge endpoints
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any

from merger.models import ErrorCategory

# Error codes for different types of failures
ERROR_CODES = {
    'VALIDATION_001': 'Missing required parameter',
    'VALIDATION_002': 'Invalid file type',
    'VALIDATION_003': 'File too large',
    'VALIDATION_004': 'Invalid parameter value',
    'CONFIG_001': 'Gemini API key not configured',
    'GENERATION_001': 'Gemini access denied',
    'GENERATION_002': 'No image generated',
    'GENERATION_003': 'Model refused the request',
    'GENERATION_004': 'Gemini API unavailable',
    'GENERATION_005': 'Image generation failed',
    'SERVICE_003': 'Internal processing error',
}

CATEGORY_ERROR_CODES = {
    ErrorCategory.ACCESS_DENIED: 'GENERATION_001',
    ErrorCategory.NO_IMAGE_PRODUCED: 'GENERATION_002',
    ErrorCategory.MODEL_REFUSED: 'GENERATION_003',
    ErrorCategory.TRANSPORT: 'GENERATION_004',
    ErrorCategory.UNKNOWN: 'GENERATION_005',
}


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_error_response(error_code: str, details: str = None,
                          extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Create standardized error response

    Args:
        error_code: Error code from ERROR_CODES
        details: Message suitable for showing to the user
        extra: Additional fields merged into the response

    Returns:
        dict: Error response dictionary
    """
    response = {
        'success': False,
        'error': ERROR_CODES.get(error_code, 'Unknown error'),
        'error_code': error_code,
        'details': details,
        'timestamp': _timestamp()
    }
    if extra:
        response.update(extra)
    return response


def create_success_response(message: str, image: str, model: str = None, quality: str = None,
                            fallback_used: bool = False, processing_time: str = None,
                            metadata: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Create standardized success response

    Args:
        message: Success message
        image: Merged image as a data URI
        model: Model id that produced the image
        quality: Quality tier that produced the image
        fallback_used: Whether the high tier was downgraded
        processing_time: Time taken for processing
        metadata: Additional metadata

    Returns:
        dict: Success response dictionary
    """
    response = {
        'success': True,
        'message': message,
        'image': image,
        'fallback_used': fallback_used,
        'timestamp': _timestamp()
    }

    if model:
        response['model'] = model
    if quality:
        response['quality'] = quality
    if processing_time:
        response['processing_time'] = processing_time
    if metadata:
        response['metadata'] = metadata

    return response
