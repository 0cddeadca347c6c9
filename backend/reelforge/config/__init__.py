"""
Application configuration and settings
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .constants import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    SESSION_COOKIE_NAME,
)
from .settings import (
    parse_bool_env,
    LLMProviderType,
    get_active_provider,
    LLMSettings,
    ImageSettings,
    TTSSettings,
    PipelineSettings,
    get_llm_settings,
    get_image_settings,
    get_tts_settings,
    get_pipeline_settings,
)

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "SESSION_COOKIE_NAME",
    "parse_bool_env",
    "LLMProviderType",
    "get_active_provider",
    "LLMSettings",
    "ImageSettings",
    "TTSSettings",
    "PipelineSettings",
    "get_llm_settings",
    "get_image_settings",
    "get_tts_settings",
    "get_pipeline_settings",
]
