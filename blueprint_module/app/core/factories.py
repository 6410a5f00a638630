# 📁 blueprint_module/core/factories.py
from typing import Dict, List, Mapping, Optional, Union

from ..models.blueprint import EndCard, Scene, SceneBlueprint, sum_scene_durations
from ..schemas.render_request import ClipInput
from ..blueprint.errors import BlueprintValidationError

# --- Format presets: format -> render contract ---
FORMAT_TEMPLATE_MAP: Dict[str, Dict[str, str]] = {
    "reel": {"aspect_ratio": "9:16", "template_id": "ig_reel_v1"},
    "story": {"aspect_ratio": "9:16", "template_id": "ig_story_v1"},
    "short": {"aspect_ratio": "9:16", "template_id": "yt_short_v1"},
}

# --- Overlay pack presets: pack -> typography ---
OVERLAY_PACK_MAP: Dict[str, Dict[str, str]] = {
    "wpw_signature": {"font": "Inter Black", "text_style": "bold"},
    "modern-clean": {"font": "Inter", "text_style": "modern"},
    "minimal": {"font": "SF Pro", "text_style": "minimal"},
    "bold-impact": {"font": "Impact", "text_style": "bold"},
}

ClipLike = Union[ClipInput, Mapping]


def create_test_blueprint(clips: List[ClipLike], blueprint_id: Optional[str] = None) -> SceneBlueprint:
    """
    Builds a fixed hook / b-roll / CTA blueprint from the given clips, used to
    verify that the renderer reproduces a known edit exactly.
    """
    if not clips:
        raise BlueprintValidationError("Cannot create test blueprint without clips")

    parsed = [c if isinstance(c, ClipInput) else ClipInput.model_validate(c) for c in clips]
    first, last = parsed[0], parsed[-1]

    scenes = [
        Scene(
            scene_id="1",
            clip_id=first.id,
            clip_url=first.url,
            start=0.0,
            end=min(1.2, first.duration),
            purpose="hook",
            text="WATCH THIS",
            text_position="center",
            animation="pop",
            cut_reason="Hardcoded hook",
        ),
    ]

    if len(parsed) > 1:
        second = parsed[1]
        scenes.append(Scene(
            scene_id="2",
            clip_id=second.id,
            clip_url=second.url,
            start=0.0,
            end=min(2.5, second.duration),
            purpose="b_roll",
            text="THIS IS THE PROOF",
            text_position="bottom",
            animation="slide",
            cut_reason="Hardcoded b-roll",
        ))
    else:
        # Only one clip: reuse a later segment of it
        scenes.append(Scene(
            scene_id="2",
            clip_id=first.id,
            clip_url=first.url,
            start=1.2,
            end=min(3.7, first.duration),
            purpose="b_roll",
            text="THIS IS THE PROOF",
            text_position="bottom",
            animation="slide",
            cut_reason="Hardcoded b-roll, same clip different segment",
        ))

    scenes.append(Scene(
        scene_id="3",
        clip_id=last.id,
        clip_url=last.url,
        start=max(0.0, last.duration - 2),
        end=last.duration,
        purpose="cta",
        text="FOLLOW FOR MORE",
        text_position="center",
        animation="punch",
        cut_reason="Hardcoded CTA",
    ))

    reel = FORMAT_TEMPLATE_MAP["reel"]
    pack = OVERLAY_PACK_MAP["wpw_signature"]
    return SceneBlueprint(
        id=blueprint_id or f"test-blueprint-{first.id}",
        platform="instagram",
        source="hardcoded",
        scenes=tuple(scenes),
        total_duration=sum_scene_durations(scenes),
        end_card=EndCard(text="WrapPriceWizard", cta="Book Now", duration=2.0),
        format="reel",
        aspect_ratio=reel["aspect_ratio"],
        template_id=reel["template_id"],
        overlay_pack="wpw_signature",
        font=pack["font"],
        text_style=pack["text_style"],
    )
