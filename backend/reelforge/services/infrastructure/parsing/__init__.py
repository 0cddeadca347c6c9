"""
Parsing Module

Provides utilities for pulling JSON objects out of LLM replies.

Usage:
    from reelforge.services.infrastructure.parsing import extract_json_object, ExtractionError
"""

from .json_parser import (
    ExtractionError,
    extract_json_object,
    candidate_spans,
    find_tagged_fence,
    find_any_fence,
    find_balanced_object,
    fix_json_escapes,
)

__all__ = [
    "ExtractionError",
    "extract_json_object",
    "candidate_spans",
    "find_tagged_fence",
    "find_any_fence",
    "find_balanced_object",
    "fix_json_escapes",
]
