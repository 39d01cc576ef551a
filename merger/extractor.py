"""
Response Extractor
Turns a Gemini generate_content response into a Success or Failure outcome
"""

import base64
from typing import Optional, Union

from .constants import NO_IMAGE_MESSAGE, OUTPUT_MIME_TYPE
from .models import ErrorCategory, Failure, Success


def _first_candidate_parts(response) -> list:
    """
    Parts of the first candidate, or an empty list when any level is missing.

    Later candidates are never consulted.
    """
    if response is None:
        return []
    candidates = getattr(response, 'candidates', None)
    if not candidates:
        return []
    content = getattr(candidates[0], 'content', None)
    if content is None:
        return []
    return list(getattr(content, 'parts', None) or [])


def _inline_payload(part) -> Optional[Union[bytes, str]]:
    inline = getattr(part, 'inline_data', None)
    if inline is None:
        return None
    data = getattr(inline, 'data', None)
    return data or None


def to_data_uri(data: Union[bytes, str]) -> str:
    """
    Encode an inline payload as a PNG data URI.

    The SDK hands back raw bytes; a string payload is assumed to be base64 already.
    The MIME type is always PNG, whatever the model reported.
    """
    if isinstance(data, (bytes, bytearray)):
        encoded = base64.b64encode(bytes(data)).decode('ascii')
    else:
        encoded = data
    return f"data:{OUTPUT_MIME_TYPE};base64,{encoded}"


def extract_image(response) -> Union[Success, Failure]:
    """
    Extract the merged image from a Gemini response.

    Order of precedence:
    1. First inline image in the first candidate. Gemini 3 Pro Image may emit
       interim "thought" images first; those are skipped when a final image follows.
    2. Text in the first part, surfaced as the model's refusal/explanation.
    3. A fixed "no image generated" failure.

    Args:
        response: Raw `generate_content` response (any object with the SDK's shape)

    Returns:
        Success | Failure: Never raises on a malformed response
    """
    parts = _first_candidate_parts(response)

    thought_payload = None
    for part in parts:
        payload = _inline_payload(part)
        if payload is None:
            continue
        if bool(getattr(part, 'thought', False)):
            if thought_payload is None:
                thought_payload = payload
            continue
        return Success(image_data_uri=to_data_uri(payload))

    if thought_payload is not None:
        return Success(image_data_uri=to_data_uri(thought_payload))

    if parts:
        text = getattr(parts[0], 'text', None)
        if text:
            return Failure(category=ErrorCategory.MODEL_REFUSED, message=text)

    return Failure(category=ErrorCategory.NO_IMAGE_PRODUCED, message=NO_IMAGE_MESSAGE)
