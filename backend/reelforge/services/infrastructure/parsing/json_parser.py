"""
JSON extraction from free-form LLM replies.

Models wrap the object they were asked for in markdown fences, prefix it with
prose, or both. ``extract_json_object`` picks a candidate span with fixed
priority rules and parses it:

1. a fenced block tagged ``json``
2. any other fenced block (a leading ``json`` language tag is stripped)
3. the first balanced ``{...}`` region, scanned with string-literal awareness

A candidate that does not parse is retried once with invalid backslash
escapes repaired. Everything that goes wrong ends in ``ExtractionError``.
"""

import json
import re
from typing import Any, Dict, List, Optional


_JSON_FENCE_RE = re.compile(r"```json\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_ANY_FENCE_RE = re.compile(r"```(.*?)```", re.DOTALL)
# A valid escape is consumed whole so an escaped backslash never pairs with the next char
_ESCAPE_RE = re.compile(r'\\(?:(["\\/bfnrt]|u[0-9a-fA-F]{4})|)')


class ExtractionError(ValueError):
    """No JSON object could be extracted from the model reply."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


def find_tagged_fence(text: str) -> Optional[str]:
    """Inner content of the first ```json fenced block, if any."""
    match = _JSON_FENCE_RE.search(text)
    if not match:
        return None
    return match.group(1).strip()


def find_any_fence(text: str) -> Optional[str]:
    """Inner content of the first fenced block, minus a ``json`` language tag."""
    match = _ANY_FENCE_RE.search(text)
    if not match:
        return None
    content = match.group(1).strip()
    if content[:4].lower() == "json":
        content = content[4:].strip()
    return content


def find_balanced_object(text: str) -> Optional[str]:
    """Span from the first ``{`` to its matching ``}``.

    Braces inside double-quoted strings (including escaped quotes) do not
    count towards the nesting depth.

    Returns:
        The balanced substring, or None if no ``{`` exists or it never closes.
    """
    start_idx = text.find("{")
    if start_idx == -1:
        return None

    depth = 0
    in_string = False
    escape = False

    for i in range(start_idx, len(text)):
        ch = text[i]
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == "\"":
                in_string = False
            continue

        if ch == "\"":
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start_idx:i + 1]

    return None


def fix_json_escapes(text: str) -> str:
    """Fix invalid escape sequences in LLM-produced JSON.

    Lone backslashes are doubled; valid JSON escapes (\\" \\\\ \\/ \\b \\f \\n
    \\r \\t \\uXXXX) are preserved.
    """
    return _ESCAPE_RE.sub(lambda m: m.group(0) if m.group(1) else "\\\\", text)


def _loads_object(candidate: str) -> Optional[Dict[str, Any]]:
    for attempt in (candidate, fix_json_escapes(candidate)):
        try:
            value = json.loads(attempt)
        # Very deep nesting exhausts the decoder's recursion limit
        except (json.JSONDecodeError, RecursionError):
            continue
        if isinstance(value, dict):
            return value
        return None
    return None


def candidate_spans(text: str) -> List[str]:
    """Candidate JSON spans in priority order, without duplicates."""
    candidates: List[str] = []
    for finder in (find_tagged_fence, find_any_fence):
        span = finder(text)
        if span:
            candidates.append(span)
            break

    for source in list(candidates) + [text]:
        span = find_balanced_object(source)
        if span and span not in candidates:
            candidates.append(span)

    return candidates


def extract_json_object(text: Optional[str]) -> Dict[str, Any]:
    """Parse the JSON object embedded in a model reply.

    Args:
        text: Raw reply content

    Returns:
        The parsed object

    Raises:
        ExtractionError: If no candidate span parses to a JSON object
    """
    raw = text or ""
    if not raw.strip():
        raise ExtractionError("Empty model reply", raw)

    for candidate in candidate_spans(raw):
        parsed = _loads_object(candidate)
        if parsed is not None:
            return parsed

    raise ExtractionError("No parseable JSON object found in model reply", raw)
