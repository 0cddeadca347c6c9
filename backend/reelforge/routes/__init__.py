"""
Routes module - contains all API route handlers
"""

from .script import router as script_router
from .images import router as images_router
from .voice import router as voice_router

__all__ = [
    "script_router",
    "images_router",
    "voice_router",
]
