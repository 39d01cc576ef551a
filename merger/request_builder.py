"""
Request Builder
Assembles the Gemini generate_content payload for a two-image merge
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from google.genai import types

from .constants import MERGE_PROMPT_TEMPLATE
from .models import AspectRatio, ImageInput, TierSelection


@dataclass(frozen=True)
class GenerationRequest:
    """One attempt's worth of input for `client.models.generate_content`"""
    model: str
    instruction_text: str
    image_a: ImageInput
    image_b: ImageInput
    aspect_ratio: str
    image_size: Optional[str] = None

    @property
    def prompt(self) -> str:
        return MERGE_PROMPT_TEMPLATE.format(instruction=self.instruction_text)

    @property
    def parts(self) -> List[types.Part]:
        # Order matters to some models: instruction, then image A, then image B
        return [
            types.Part.from_text(text=self.prompt),
            types.Part.from_bytes(data=self.image_a.data, mime_type=self.image_a.mime_type),
            types.Part.from_bytes(data=self.image_b.data, mime_type=self.image_b.mime_type),
        ]

    @property
    def config(self) -> types.GenerateContentConfig:
        image_config_kwargs = {'aspect_ratio': self.aspect_ratio}
        if self.image_size:
            image_config_kwargs['image_size'] = self.image_size
        return types.GenerateContentConfig(image_config=types.ImageConfig(**image_config_kwargs))


def build_request(image_a: ImageInput, image_b: ImageInput, instruction: str,
                  aspect_ratio: Union[AspectRatio, str], selection: TierSelection) -> GenerationRequest:
    """
    Build a merge request for one tier

    Args:
        image_a: First image (sent first)
        image_b: Second image
        instruction: User's merge description, interpolated verbatim
        aspect_ratio: Output aspect ratio, always forwarded
        selection: Model and optional size hint from `select_tier`

    Returns:
        GenerationRequest: Immutable request. Inputs are not validated here.
    """
    ratio = aspect_ratio.value if isinstance(aspect_ratio, AspectRatio) else str(aspect_ratio)
    return GenerationRequest(
        model=selection.model,
        instruction_text=instruction,
        image_a=image_a,
        image_b=image_b,
        aspect_ratio=ratio,
        image_size=selection.image_size,
    )


def send_request(client, request: GenerationRequest):
    """Invoke Gemini with a built request and return the raw response"""
    return client.models.generate_content(
        model=request.model,
        contents=request.parts,
        config=request.config,
    )
