# blueprint/compiler.py

from typing import List, Optional, Sequence, Tuple

from ..models.blueprint import SceneBlueprint
from ..models.render_payload import (
    Animation, AudioElement, PayloadMetadata, RenderPayload, TextElement, VideoElement
)
from ..schemas.render_request import CaptionInput
from ..utils.logging import logger

FRAME_RATE = 30
DEFAULT_FONT_FAMILY = "Montserrat"

# Overlay pack -> font family, used only when the blueprint has no explicit font.
OVERLAY_PACK_FONTS = {
    "wpw_signature": "Montserrat",
    "modern-clean": "Inter",
    "minimal": "SF Pro",
    "bold-impact": "Impact",
}

# Maps caption sizes to renderer font sizes
CAPTION_FONT_SIZE_MAP = {
    "small": "4.5 vh",
    "medium": "6 vh",
    "large": "7 vh",
}

TEXT_COLOR = "#ffffff"
STROKE_COLOR = "#000000"
TEXT_EXIT = Animation(type="fade", duration="0.2 s")
END_CARD_ENTER = Animation(type="scale", duration="0.4 s", easing="back-out")
AUDIO_FADE_OUT = "1 s"
AUDIO_VOLUME = "60%"

# --- Lookup helpers. Each has exactly one default branch. ---

def resolve_dimensions(aspect_ratio: Optional[str]) -> Tuple[int, int]:
    """(width, height) in pixels for an aspect ratio; portrait 9:16 by default."""
    if aspect_ratio == "1:1":
        return 1080, 1080
    if aspect_ratio == "16:9":
        return 1920, 1080
    return 1080, 1920


def resolve_font_family(font: Optional[str], overlay_pack: Optional[str]) -> str:
    if font:
        return font
    return OVERLAY_PACK_FONTS.get(overlay_pack, DEFAULT_FONT_FAMILY)


def resolve_position(position: Optional[str]) -> Tuple[str, str]:
    """(x, y) percentages for a text position; centered by default."""
    if position == "top":
        return "50%", "12%"
    if position == "bottom":
        return "50%", "88%"
    return "50%", "50%"


def resolve_enter_animation(animation: Optional[str]) -> Animation:
    if animation == "pop":
        return Animation(type="scale", duration="0.3 s", easing="back-out")
    if animation == "slide":
        return Animation(type="slide", duration="0.4 s", easing="ease-out")
    if animation == "punch":
        return Animation(type="scale", duration="0.2 s", easing="ease-out")
    if animation == "typewriter":
        return Animation(type="text-appear", duration="0.5 s")
    return Animation(type="fade", duration="0.3 s")


# --- Element builders ---

def _caption_element(caption: CaptionInput, default_style: Optional[str], font_family: str) -> TextElement:
    x, y = resolve_position(caption.position)
    style = caption.style or default_style
    enter = None
    if caption.animation and caption.animation != "none":
        enter = resolve_enter_animation(caption.animation)

    return TextElement(
        text=caption.text,
        time=max(0.0, caption.time),
        duration=max(0.1, caption.duration),
        x=x,
        y=y,
        width="92%",
        font_family=font_family,
        font_weight="800" if style == "sabri" else "700",
        font_size=CAPTION_FONT_SIZE_MAP.get(caption.font_size, "7 vh"),
        fill_color=TEXT_COLOR,
        stroke_color=STROKE_COLOR,
        stroke_width="1.35 vh",
        text_transform="none" if style == "clean" else "uppercase",
        enter=enter,
        exit=TEXT_EXIT,
    )


def compile_blueprint(
    blueprint: SceneBlueprint,
    audio_url: Optional[str] = None,
    captions: Optional[Sequence[CaptionInput]] = None,
) -> RenderPayload:
    """
    Deterministically maps a blueprint onto a renderer timeline.

    The blueprint is not validated here; run it through the validator first.
    A blueprint without scenes compiles to a zero-length payload with no
    video elements.
    """
    # 1. Canvas and typography
    width, height = resolve_dimensions(blueprint.aspect_ratio)
    font_family = resolve_font_family(blueprint.font, blueprint.overlay_pack)
    font_weight = "800" if blueprint.text_style == "bold" else "600"

    # 2. Scenes, laid end to end
    elements: List = []
    timeline_cursor = 0.0
    for scene in blueprint.scenes:
        clip_duration = scene.end - scene.start

        elements.append(VideoElement(
            source=scene.clip_url,
            time=timeline_cursor,
            duration=clip_duration,
            trim_start=scene.start,
            trim_duration=clip_duration,
        ))

        if scene.text and scene.text.strip():
            x, y = resolve_position(scene.text_position)
            elements.append(TextElement(
                text=scene.text,
                time=timeline_cursor,
                duration=clip_duration,
                x=x,
                y=y,
                width="90%",
                font_family=font_family,
                font_weight=font_weight,
                font_size="7 vh",
                fill_color=TEXT_COLOR,
                stroke_color=STROKE_COLOR,
                stroke_width="1.5 vh",
                text_transform="uppercase",
                enter=resolve_enter_animation(scene.animation),
                exit=TEXT_EXIT,
            ))

        timeline_cursor += clip_duration

    # Recomputed from the walk; the stored total_duration is not trusted here.
    total_duration = timeline_cursor

    # 3. Timed captions
    for caption in captions or ():
        elements.append(_caption_element(caption, blueprint.caption_style, font_family))

    # 4. End card
    final_duration = total_duration
    if blueprint.end_card is not None:
        x, y = resolve_position("center")
        elements.append(TextElement(
            text=blueprint.end_card.text,
            time=total_duration,
            duration=blueprint.end_card.duration,
            x=x,
            y=y,
            width="80%",
            font_family=font_family,
            font_weight="800",
            font_size="8 vh",
            fill_color=TEXT_COLOR,
            stroke_color=STROKE_COLOR,
            stroke_width="2 vh",
            text_transform="uppercase",
            enter=END_CARD_ENTER,
        ))
        final_duration = total_duration + blueprint.end_card.duration

    # 5. Background audio
    if audio_url:
        elements.append(AudioElement(
            source=audio_url,
            time=0.0,
            duration=final_duration,
            audio_fade_out=AUDIO_FADE_OUT,
            volume=AUDIO_VOLUME,
        ))

    payload = RenderPayload(
        width=width,
        height=height,
        frame_rate=FRAME_RATE,
        duration=final_duration,
        elements=tuple(elements),
        metadata=PayloadMetadata(
            id=blueprint.id,
            brand=blueprint.brand,
            caption=blueprint.caption,
            format=blueprint.format,
            overlay_pack=blueprint.overlay_pack,
        ),
    )

    logger.info(
        f"Compiled blueprint {blueprint.id}: {len(payload.elements)} elements, "
        f"{payload.duration}s at {width}x{height}"
    )
    return payload


if __name__ == "__main__":
    import json
    from ..core.factories import create_test_blueprint
    from .store import SceneBlueprintStore
    from .transforms import order_by_purpose, pick_best_scenes

    store = SceneBlueprintStore(create_test_blueprint([
        {"id": "clip-a", "url": "https://example.com/a.mp4", "duration": 6.0},
        {"id": "clip-b", "url": "https://example.com/b.mp4", "duration": 8.0},
    ], blueprint_id="demo-blueprint"))
    store.optimize_scenes(pick_best_scenes(max_duration=4.0))
    store.resequence_scenes(order_by_purpose)
    print(json.dumps(compile_blueprint(store.blueprint).to_renderer_json(), indent=2))
