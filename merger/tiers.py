"""
Tier selection: maps a requested quality to a concrete Gemini model
"""

from .constants import MODEL_STANDARD, MODEL_HIGH_RES, HIGH_RES_IMAGE_SIZE
from .models import QualityTier, TierSelection


def select_tier(quality: QualityTier, standard_model: str = MODEL_STANDARD,
                high_res_model: str = MODEL_HIGH_RES) -> TierSelection:
    """
    Pick the model id and output size for a quality tier

    Args:
        quality: Requested quality tier
        standard_model: Model id backing the standard tier
        high_res_model: Model id backing the high tier

    Returns:
        TierSelection: Model and optional size hint. Only the high tier carries
        a size; the standard model rejects one.
    """
    if quality == QualityTier.HIGH:
        return TierSelection(tier=QualityTier.HIGH, model=high_res_model, image_size=HIGH_RES_IMAGE_SIZE)
    return TierSelection(tier=QualityTier.STANDARD, model=standard_model, image_size=None)
