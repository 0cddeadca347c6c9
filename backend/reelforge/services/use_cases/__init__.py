"""
Use Cases package - Business logic layer.

- Each use case is ONE pipeline operation
- Use cases are independent of HTTP
- Routes translate HTTP to request models and back

Modules:
- base: Base use case abstract class
- script_use_case: Script generation and revision
- image_use_case: Image generation and single-segment regeneration
- voice_use_case: Single-text voice and whole-script audio
"""

from .base import UseCase
from .script_use_case import ScriptGenerationUseCase, ScriptRevisionUseCase
from .image_use_case import ImageGenerationUseCase, ImageRegenerationUseCase
from .voice_use_case import VoiceGenerationUseCase, AudioGenerationUseCase

__all__ = [
    "UseCase",
    "ScriptGenerationUseCase",
    "ScriptRevisionUseCase",
    "ImageGenerationUseCase",
    "ImageRegenerationUseCase",
    "VoiceGenerationUseCase",
    "AudioGenerationUseCase",
]
