"""
Merge Data Models
Value types shared by the tier selector, request builder, extractor and orchestrator
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .constants import DEFAULT_ASPECT_RATIO, DEFAULT_QUALITY


class AspectRatio(str, Enum):
    SQUARE = '1:1'
    LANDSCAPE = '16:9'
    PORTRAIT = '9:16'
    STANDARD_LANDSCAPE = '4:3'
    STANDARD_PORTRAIT = '3:4'

    @classmethod
    def parse(cls, value: Optional[str]) -> 'AspectRatio':
        """
        Parse an aspect ratio from user input

        Args:
            value: Ratio string such as '16:9'; empty means the default

        Returns:
            AspectRatio: Matching member

        Raises:
            ValueError: If the value is not a supported ratio
        """
        value = (value or '').strip() or DEFAULT_ASPECT_RATIO
        for member in cls:
            if member.value == value:
                return member
        allowed = ', '.join(member.value for member in cls)
        raise ValueError(f"Unsupported aspect ratio '{value}'. Allowed: {allowed}")


class QualityTier(str, Enum):
    STANDARD = 'Standard'
    HIGH = 'High (2K)'

    @classmethod
    def parse(cls, value: Optional[str]) -> 'QualityTier':
        """
        Parse a quality tier by value ('High (2K)'), name ('HIGH') or alias ('high', '2k')

        Raises:
            ValueError: If the value names no tier
        """
        raw = (value or '').strip() or DEFAULT_QUALITY
        aliases = {
            'standard': cls.STANDARD,
            'high': cls.HIGH,
            '2k': cls.HIGH,
            'high (2k)': cls.HIGH,
        }
        tier = aliases.get(raw.lower())
        if tier is None:
            allowed = ', '.join(member.value for member in cls)
            raise ValueError(f"Unsupported quality '{raw}'. Allowed: {allowed}")
        return tier


class ErrorCategory(str, Enum):
    ACCESS_DENIED = 'access_denied'
    NO_IMAGE_PRODUCED = 'no_image_produced'
    MODEL_REFUSED = 'model_refused'
    TRANSPORT = 'transport'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class ImageInput:
    """Raw image bytes plus the MIME type reported by the uploader"""
    data: bytes
    mime_type: str


@dataclass(frozen=True)
class TierSelection:
    tier: QualityTier
    model: str
    image_size: Optional[str] = None


@dataclass(frozen=True)
class Success:
    image_data_uri: str
    model: Optional[str] = None
    tier: Optional[QualityTier] = None
    fallback_used: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    category: ErrorCategory
    message: str
    model: Optional[str] = None
    tier: Optional[QualityTier] = None

    @property
    def ok(self) -> bool:
        return False


GenerationOutcome = Union[Success, Failure]


class MergeError(Exception):
    """Base class for errors raised by the merge core"""


class MissingCredentialError(MergeError):
    """No API credential is configured; raised before any request is built"""


class GenerationError(MergeError):
    """A generation ended in a classified failure"""

    def __init__(self, category: ErrorCategory, message: str):
        super().__init__(message)
        self.category = category
        self.message = message
