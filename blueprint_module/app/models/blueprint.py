# models/blueprint.py

from __future__ import annotations
from typing import Optional, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FormatType = Literal["reel", "story", "short"]
AspectRatioType = Literal["9:16", "1:1", "16:9"]
TextStyleType = Literal["bold", "minimal", "modern"]
TextPositionType = Literal["top", "center", "bottom"]
AnimationType = Literal["pop", "slide", "fade", "punch", "typewriter"]
ScenePurposeType = Literal["hook", "pattern_interrupt", "proof", "payoff", "cta", "b_roll", "reveal"]
PlatformType = Literal["instagram", "tiktok", "youtube", "facebook"]
CaptionStyleType = Literal["sabri", "dara", "clean"]
BlueprintSourceType = Literal["ai", "manual", "hardcoded", "smart_assist"]


class _BlueprintBase(BaseModel):
    # Accepts both `clip_url` and `clipUrl`; instances never change after creation.
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Scene(_BlueprintBase):
    """One trimmed clip in playback order, with an optional text overlay."""
    clip_url: str = Field(..., description="Reference to the source media in the media library.")
    start: float = Field(..., description="Trim window start into the source clip, in seconds.")
    end: float = Field(..., description="Trim window end into the source clip, in seconds. Must be greater than `start` to render.")
    scene_id: Optional[str] = Field(None, description="Identifier of the scene inside its blueprint.")
    clip_id: Optional[str] = Field(None, description="Identifier of the source clip in the media library.")
    purpose: Optional[ScenePurposeType] = Field(None, description="Editorial purpose of the cut, e.g. 'hook' or 'cta'.")
    text: Optional[str] = Field(None, description="Overlay text shown for the whole scene.")
    text_position: Optional[TextPositionType] = Field(None, description="Where the overlay text sits. Renders centered when unset.")
    animation: Optional[AnimationType] = Field(None, description="Entrance animation for the overlay text. Fades in when unset.")
    cut_reason: Optional[str] = Field(None, description="Editorial reasoning for the cut, kept for debugging.")

    @property
    def duration(self) -> float:
        return self.end - self.start


class EndCard(_BlueprintBase):
    """Trailing text card appended after the last scene."""
    text: str
    duration: float
    cta: Optional[str] = None


class SceneBlueprint(_BlueprintBase):
    """
    The authoritative description of a short-form edit. Only the blueprint store
    produces new versions of it while it is being edited.
    """
    id: str = Field(..., description="Opaque identifier assigned at creation.")
    format: Optional[FormatType] = Field(None, description="Renderer template family.")
    aspect_ratio: Optional[AspectRatioType] = Field(None, description="Output aspect ratio; determines pixel dimensions.")
    template_id: Optional[str] = Field(None, description="Visual template, locked together with format and aspect ratio.")
    overlay_pack: Optional[str] = Field(None, description="Brand overlay pack applied to every scene.")
    font: Optional[str] = Field(None, description="Font family. Derived from the overlay pack when unset.")
    text_style: Optional[TextStyleType] = Field(None, description="Global text style.")
    caption: Optional[str] = Field(None, description="Global caption for the whole reel.")
    caption_style: Optional[CaptionStyleType] = Field(None, description="Default style for timed captions.")
    scenes: Tuple[Scene, ...] = Field(default_factory=tuple, description="Scenes in playback order.")
    end_card: Optional[EndCard] = None
    total_duration: float = Field(0.0, description="Cached sum of scene durations, in seconds.")
    brand: Optional[str] = Field(None, description="Brand or channel tag, carried into payload metadata.")
    platform: Optional[PlatformType] = None
    source: Optional[BlueprintSourceType] = None
    created_at: Optional[str] = None


def sum_scene_durations(scenes) -> float:
    """Sum of `end - start` over the given scenes."""
    total = 0.0
    for scene in scenes:
        total += scene.end - scene.start
    return total
