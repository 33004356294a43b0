"""
AI Provider Abstraction.

모델 교체 가능하게 설계.
모델명은 AppConfig만 SSOT.
"""

from .base import VisionProvider
from .gemini import GeminiVisionProvider

__all__ = [
    "VisionProvider",
    "GeminiVisionProvider",
]
