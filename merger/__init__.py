"""
Merge core: merges two images into one with Google Gemini
Tier selection, request building, response extraction and tier fallback
"""

from .models import (
    AspectRatio, QualityTier, ErrorCategory, ImageInput, TierSelection,
    Success, Failure, MergeError, MissingCredentialError, GenerationError,
)
from .tiers import select_tier
from .request_builder import GenerationRequest, build_request
from .extractor import extract_image
from .errors import classify_error, user_message
from .orchestrator import generate_merged_image, merge_images

__all__ = [
    'AspectRatio', 'QualityTier', 'ErrorCategory', 'ImageInput', 'TierSelection',
    'Success', 'Failure', 'MergeError', 'MissingCredentialError', 'GenerationError',
    'select_tier', 'GenerationRequest', 'build_request', 'extract_image',
    'classify_error', 'user_message', 'generate_merged_image', 'merge_images',
]
