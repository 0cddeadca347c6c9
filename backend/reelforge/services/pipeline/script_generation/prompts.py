"""
Prompt templates for the script-writing LLM.

The JSON shape requested here is the contract ``Script`` parses.
"""

import json
from typing import Any, Dict

SYSTEM_INSTRUCTION = "Bạn là một chuyên gia viết kịch bản video cho mạng xã hội."

_JSON_SHAPE = """{
    "title": "Tiêu đề video",
    "segments": [
        {
            "script": "Nội dung lời thoại phân đoạn 1",
            "image_description": "Mô tả chi tiết về hình ảnh minh họa cho phân đoạn 1"
        },
        ...
    ]
}"""

SCRIPT_PROMPT_TEMPLATE = """Hãy tạo một kịch bản video cho mạng xã hội {platform} với chủ đề: {subject}.

Tóm tắt nội dung: {summary}
Độ dài video mong muốn: {duration}

Kịch bản cần được chia thành các phân đoạn rõ ràng, mỗi phân đoạn bao gồm:
1. Nội dung lời thoại
2. Mô tả chi tiết về hình ảnh minh họa phù hợp với nội dung

Định dạng kết quả trả về phải là JSON với cấu trúc sau:
{json_shape}
"""

REVISION_PROMPT_TEMPLATE = """Dưới đây là kịch bản video hiện tại ở định dạng JSON:
{current_script}

Hãy chỉnh sửa kịch bản theo phản hồi sau của người dùng:
{feedback}

Giữ nguyên những phần không được yêu cầu thay đổi. Mỗi phân đoạn vẫn gồm nội dung
lời thoại và mô tả chi tiết về hình ảnh minh họa.

Định dạng kết quả trả về phải là JSON với cấu trúc sau:
{json_shape}
"""


def build_script_prompt(subject: str, summary: str, duration: str, platform: str) -> str:
    return SCRIPT_PROMPT_TEMPLATE.format(
        platform=platform,
        subject=subject,
        summary=summary,
        duration=duration,
        json_shape=_JSON_SHAPE,
    )


def build_revision_prompt(current_script: Dict[str, Any], feedback: str) -> str:
    return REVISION_PROMPT_TEMPLATE.format(
        current_script=json.dumps(current_script, ensure_ascii=False, indent=2),
        feedback=feedback,
        json_shape=_JSON_SHAPE,
    )
