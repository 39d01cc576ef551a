"""
Constants for the image merge service
Model identifiers, defaults, upload limits and user-facing messages
"""

MODEL_STANDARD = 'gemini-2.5-flash-image'
MODEL_HIGH_RES = 'gemini-3-pro-image-preview'

# Only the high-res model accepts an output size
HIGH_RES_IMAGE_SIZE = '2K'

DEFAULT_ASPECT_RATIO = '1:1'
DEFAULT_QUALITY = 'Standard'

MAX_FILE_SIZE_MB = 10
ACCEPTED_IMAGE_TYPES = ['image/jpeg', 'image/png', 'image/webp']

OUTPUT_MIME_TYPE = 'image/png'

MERGE_PROMPT_TEMPLATE = (
    "Merge these two images into one based on this description: {instruction}. "
    "Ensure the result is a single cohesive image."
)

# Markers that identify an access-denied failure in an error message
ACCESS_DENIED_MARKERS = ('PERMISSION_DENIED', '403')
ACCESS_DENIED_STATUS_CODES = (403, 404)

MISSING_CREDENTIAL_MESSAGE = "API Key is missing. Please ensure GEMINI_API_KEY is set."
ACCESS_DENIED_MESSAGE = (
    "Permission denied. The API key does not have access to the generative AI models. "
    "Please check that the API key is valid and the API is enabled in your Google Cloud project."
)
NO_IMAGE_MESSAGE = "No image generated. The model might have refused the request."
GENERIC_FAILURE_MESSAGE = "Failed to generate image. Please try again."
