"""
Script model shared by every pipeline stage.

Field names follow the JSON contract the script-writing LLM is asked to
produce (``script`` for narration, ``image_description`` for the visual
prompt). Stages attach artifact references to segments in place; segment
order is never changed, so the index is the identity of a segment.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Segment(BaseModel):
    """One narration + visual unit of a video script"""
    model_config = ConfigDict(extra="allow")

    script: str = ""  # Narration text
    image_description: str = ""  # Prompt for the illustration
    image_path: Optional[str] = None
    direct_image_url: Optional[str] = None
    audio_path: Optional[str] = None

    @property
    def narration_text(self) -> str:
        return self.script

    @property
    def image_prompt(self) -> str:
        """Prompt used for image generation.

        The regenerate flow of the UI may send ``prompt`` instead of
        ``image_description``; the narration is the last resort.
        """
        if self.image_description.strip():
            return self.image_description
        extra_prompt = (self.model_extra or {}).get("prompt")
        if isinstance(extra_prompt, str) and extra_prompt.strip():
            return extra_prompt
        return self.script


class Script(BaseModel):
    """A video script: title plus ordered segments"""
    model_config = ConfigDict(extra="allow")

    title: str = ""
    segments: List[Segment] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
