"""
Script generation - prompt building, LLM call and tolerant parsing
"""

from .generator import ScriptGenerator, normalize_script, parse_script
from .prompts import SYSTEM_INSTRUCTION, build_revision_prompt, build_script_prompt

__all__ = [
    "ScriptGenerator",
    "normalize_script",
    "parse_script",
    "SYSTEM_INSTRUCTION",
    "build_revision_prompt",
    "build_script_prompt",
]
