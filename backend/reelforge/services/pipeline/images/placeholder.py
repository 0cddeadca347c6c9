"""
Placeholder image references.

Every non-generated image outcome still hands the UI something it can render:
a relative ``/placeholder.svg`` URL sized like the requested image and labelled
with the start of the prompt.
"""

from urllib.parse import quote

PLACEHOLDER_PATH = "/placeholder.svg"
PLACEHOLDER_TEXT_LENGTH = 30

# Same set encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def placeholder_url(prompt: str, width: int, height: int) -> str:
    text = quote((prompt or "")[:PLACEHOLDER_TEXT_LENGTH], safe=_URI_COMPONENT_SAFE)
    return f"{PLACEHOLDER_PATH}?height={height}&width={width}&text={text}"
