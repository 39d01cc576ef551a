"""
API Module for the Image Merge Service
Provides REST API endpoints for merging two images with Gemini
"""

from .endpoints import api_bp
from .models import create_error_response, create_success_response, ERROR_CODES

__all__ = ['api_bp', 'create_error_response', 'create_success_response', 'ERROR_CODES']
