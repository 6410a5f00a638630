from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal

from ..models.blueprint import CaptionStyleType, TextPositionType

CaptionAnimationType = Literal["none", "fade", "pop", "slide"]
CaptionSizeType = Literal["small", "medium", "large"]

class CaptionInput(BaseModel):
    """A timed caption laid over the compiled timeline, independent of scenes."""
    text: str = Field(..., description="Caption text.")
    time: float = Field(..., description="Absolute start time on the output timeline, in seconds.")
    duration: float = Field(..., description="How long the caption stays on screen, in seconds.")
    style: Optional[CaptionStyleType] = Field(None, description="Caption style. Falls back to the blueprint's caption style.")
    animation: Optional[CaptionAnimationType] = Field(None, description="Entrance animation; 'none' or unset means no entrance.")
    position: Optional[TextPositionType] = Field(None, description="Vertical placement; centered when unset.")
    font_size: Optional[CaptionSizeType] = Field(None, description="Relative caption size; 'large' when unset.")


class ClipInput(BaseModel):
    """A media-library clip offered to the test blueprint factory."""
    id: str
    url: str
    duration: float = Field(..., gt=0, description="Length of the source clip in seconds.")


class CompileRequest(BaseModel):
    blueprint: dict = Field(..., description="The scene blueprint, snake_case or camelCase.")
    music_url: Optional[str] = Field(None, description="Optional background audio track.")
    captions: Optional[List[CaptionInput]] = None

    @field_validator('music_url', mode='after')
    @classmethod
    def blank_music_is_none(cls, v):
        if v is None:
            return v
        return v.strip() or None


class VerificationBlueprintRequest(BaseModel):
    clips: List[ClipInput]
    blueprint_id: Optional[str] = None
