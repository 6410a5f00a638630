# models/render_payload.py

from __future__ import annotations
from typing import Annotated, Any, Dict, Optional, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class _PayloadBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class Animation(_PayloadBase):
    """An entrance or exit animation understood by the renderer."""
    type: str
    duration: str  # e.g. "0.3 s"
    easing: Optional[str] = None


class VideoElement(_PayloadBase):
    """A trimmed source clip placed on the output timeline."""
    type: Literal["video"] = "video"
    source: str
    time: float
    duration: float
    trim_start: float
    trim_duration: float


class TextElement(_PayloadBase):
    """A styled text overlay placed on the output timeline."""
    type: Literal["text"] = "text"
    text: str
    time: float
    duration: float
    x: str
    y: str
    width: str
    x_alignment: str = "50%"
    y_alignment: str = "50%"
    font_family: str
    font_weight: str
    font_size: str
    fill_color: str
    stroke_color: str
    stroke_width: str
    text_transform: str
    enter: Optional[Animation] = None
    exit: Optional[Animation] = None


class AudioElement(_PayloadBase):
    """A background audio track spanning the whole output."""
    type: Literal["audio"] = "audio"
    source: str
    time: float
    duration: float
    audio_fade_out: str
    volume: str


RenderElement = Annotated[
    Union[VideoElement, TextElement, AudioElement],
    Field(discriminator="type"),
]


class PayloadMetadata(_PayloadBase):
    """Blueprint fields carried along for traceability; ignored during playback."""
    id: str
    brand: Optional[str] = None
    caption: Optional[str] = None
    format: Optional[str] = None
    overlay_pack: Optional[str] = None


class RenderPayload(_PayloadBase):
    """The final, renderer-ready timeline compiled from a blueprint."""
    output_format: Literal["mp4"] = "mp4"
    width: int
    height: int
    frame_rate: int = 30
    duration: float
    elements: Tuple[RenderElement, ...] = ()
    metadata: PayloadMetadata

    def to_renderer_json(self) -> Dict[str, Any]:
        """JSON-ready dict for the rendering service, with unset optional keys omitted."""
        return self.model_dump(mode="json", exclude_none=True)
