"""
Constants configuration

API settings, CORS configuration, and user-facing messages.
"""

# API settings
API_TITLE = "ReelForge API"
API_DESCRIPTION = "Generate short-video scripts, illustrations and narration for social platforms"
API_VERSION = "1.0.0"

# CORS origins
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:5173",
]

SESSION_COOKIE_NAME = "session_id"

# User-facing error messages (the product UI is Vietnamese-first)
MSG_SCRIPT_FIELDS_REQUIRED = "Chủ đề và tóm tắt nội dung là bắt buộc"
MSG_FEEDBACK_REQUIRED = "Nội dung góp ý là bắt buộc"
MSG_LLM_NOT_CONFIGURED = "OpenRouter API key không được cấu hình"
MSG_LLM_CALL_FAILED = "Lỗi khi gọi API OpenRouter"
MSG_SCRIPT_PARSE_FAILED = "Lỗi khi phân tích kịch bản"
MSG_INTERNAL_ERROR = "Lỗi máy chủ nội bộ"
MSG_INVALID_REQUEST = "Yêu cầu không hợp lệ"
MSG_VOICE_TEXT_REQUIRED = "Nội dung lời thoại là bắt buộc"
MSG_VOICE_FAILED = "Failed to generate voice"

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "SESSION_COOKIE_NAME",
    "MSG_SCRIPT_FIELDS_REQUIRED",
    "MSG_FEEDBACK_REQUIRED",
    "MSG_LLM_NOT_CONFIGURED",
    "MSG_LLM_CALL_FAILED",
    "MSG_SCRIPT_PARSE_FAILED",
    "MSG_INTERNAL_ERROR",
    "MSG_INVALID_REQUEST",
    "MSG_VOICE_TEXT_REQUIRED",
    "MSG_VOICE_FAILED",
]
