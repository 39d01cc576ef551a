"""
Fallback Orchestrator
Runs a merge against Gemini with at most one High -> Standard downgrade
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import google.genai as genai

from .config import get_api_key, get_standard_model, get_high_res_model
from .constants import MISSING_CREDENTIAL_MESSAGE
from .errors import classify_error, user_message
from .extractor import extract_image
from .models import (
    AspectRatio, ErrorCategory, Failure, GenerationError, ImageInput,
    MissingCredentialError, QualityTier, Success,
)
from .request_builder import build_request, send_request
from .tiers import select_tier


class State(Enum):
    ATTEMPT_1 = 'attempt_1'
    ATTEMPT_2 = 'attempt_2'
    DONE = 'done'


@dataclass
class AttemptRecord:
    tier: QualityTier
    model: str
    image_size: Optional[str] = None
    category: Optional[ErrorCategory] = None  # None means the attempt produced an image


@dataclass
class MergeRun:
    """
    State of one user-initiated merge.

    Holds the inputs and every attempt made, so which tier produced the outcome
    is always known. Not shared between merges.
    """
    client: object
    image_a: ImageInput
    image_b: ImageInput
    instruction: str
    aspect_ratio: Union[AspectRatio, str]
    quality: QualityTier
    attempts: List[AttemptRecord] = field(default_factory=list)

    def attempt(self, tier: QualityTier) -> Union[Success, Failure]:
        """
        Build, send and extract one request for `tier`.

        Invocation errors are classified into a Failure carrying the raw error text;
        the user-facing message is applied later by `finish`.
        """
        selection = select_tier(tier, standard_model=get_standard_model(),
                                high_res_model=get_high_res_model())
        request = build_request(self.image_a, self.image_b, self.instruction,
                                self.aspect_ratio, selection)
        record = AttemptRecord(tier=selection.tier, model=selection.model, image_size=selection.image_size)
        self.attempts.append(record)

        size_note = f", size={selection.image_size}" if selection.image_size else ""
        print(f"🎨 Merge attempt {len(self.attempts)}: tier={selection.tier.value}, model={selection.model}{size_note}")

        try:
            response = send_request(self.client, request)
        except Exception as e:
            category = classify_error(e)
            record.category = category
            print(f"❌ Gemini invocation failed on model={selection.model} ({category.value}): {e}")
            return Failure(category=category, message=str(e), model=selection.model, tier=selection.tier)

        outcome = extract_image(response)
        if isinstance(outcome, Failure):
            record.category = outcome.category
            print(f"⚠️ Gemini returned no image on model={selection.model} ({outcome.category.value}): {outcome.message}")
            return Failure(category=outcome.category, message=outcome.message,
                           model=selection.model, tier=selection.tier)
        return Success(image_data_uri=outcome.image_data_uri, model=selection.model,
                       tier=selection.tier, fallback_used=len(self.attempts) > 1)

    def run(self) -> Union[Success, Failure]:
        state = State.ATTEMPT_1
        outcome = None

        while state != State.DONE:
            if state == State.ATTEMPT_1:
                outcome = self.attempt(self.quality)
                state = State.ATTEMPT_2 if self._should_fall_back(outcome) else State.DONE
            elif state == State.ATTEMPT_2:
                print(f"↩️ High-res model failed with a permission/access error. "
                      f"Falling back to {QualityTier.STANDARD.value} ({get_standard_model()}).")
                outcome = self.attempt(QualityTier.STANDARD)
                state = State.DONE

        return self.finish(outcome)

    def _should_fall_back(self, outcome: Union[Success, Failure]) -> bool:
        # Only invocation-level access denial on the high tier; extraction failures never qualify
        if not isinstance(outcome, Failure) or len(self.attempts) != 1:
            return False
        return (self.quality == QualityTier.HIGH
                and outcome.category == ErrorCategory.ACCESS_DENIED)

    @staticmethod
    def finish(outcome: Union[Success, Failure]) -> Union[Success, Failure]:
        """Apply the user-facing message mapping to a terminal outcome"""
        if isinstance(outcome, Success):
            print(f"✅ Merge complete on model={outcome.model}")
            return outcome
        message = user_message(outcome.category, outcome.message)
        return Failure(category=outcome.category, message=message, model=outcome.model, tier=outcome.tier)


def get_gemini_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def _require_api_key() -> str:
    api_key = get_api_key()
    if not api_key:
        print("❌ Gemini API key is missing; refusing to build a request")
        raise MissingCredentialError(MISSING_CREDENTIAL_MESSAGE)
    return api_key


def generate_merged_image(image_a: ImageInput, image_b: ImageInput, prompt: str,
                          aspect_ratio: Union[AspectRatio, str] = AspectRatio.SQUARE,
                          quality: QualityTier = QualityTier.STANDARD,
                          client=None) -> Union[Success, Failure]:
    """
    Merge two images into one with Gemini.

    Args:
        image_a: First image (bytes + MIME type), already validated
        image_b: Second image, already validated
        prompt: User's description of the merge
        aspect_ratio: Output aspect ratio
        quality: Requested tier; HIGH falls back to STANDARD once on access denial
        client: Optional genai.Client; one is created from the configured key otherwise

    Returns:
        Success | Failure: Failure messages are ready to show to the user

    Raises:
        MissingCredentialError: No API key is configured
    """
    api_key = _require_api_key()
    if client is None:
        client = get_gemini_client(api_key)

    merge_run = MergeRun(
        client=client,
        image_a=image_a,
        image_b=image_b,
        instruction=prompt,
        aspect_ratio=aspect_ratio,
        quality=quality,
    )
    return merge_run.run()


def merge_images(image_a: ImageInput, image_b: ImageInput, prompt: str,
                 aspect_ratio: Union[AspectRatio, str] = AspectRatio.SQUARE,
                 quality: QualityTier = QualityTier.STANDARD,
                 client=None) -> str:
    """
    Same as `generate_merged_image` but returns the data URI or raises.

    Raises:
        MissingCredentialError: No API key is configured
        GenerationError: The merge ended in a classified failure
    """
    outcome = generate_merged_image(image_a, image_b, prompt, aspect_ratio=aspect_ratio,
                                    quality=quality, client=client)
    if isinstance(outcome, Failure):
        raise GenerationError(outcome.category, outcome.message)
    return outcome.image_data_uri
