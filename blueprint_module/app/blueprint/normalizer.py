# blueprint/normalizer.py

import math
from typing import Any, Dict, List, Mapping, Optional, Tuple, get_args

from pydantic import ValidationError

from ..config.settings import settings
from ..models.blueprint import (
    AnimationType, AspectRatioType, BlueprintSourceType, CaptionStyleType, FormatType,
    PlatformType, SceneBlueprint, ScenePurposeType, TextPositionType, TextStyleType,
)
from ..models.validation import BlueprintValidation
from ..utils.logging import logger
from .errors import BlueprintValidationError

# Filled in only when the document has no value at all; unknown values are dropped.
DEFAULT_FORMAT = "reel"
DEFAULT_ASPECT_RATIO = "9:16"


def _first(raw: Mapping, *keys: str) -> Any:
    """Value of the first key present with a non-None value."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _clean_id(value: Any) -> str:
    return str(value if value is not None else "").strip()


def _clamp(number: float, low: float, high: float) -> float:
    return max(low, min(high, number))


def _choice(value: Any, literal_type, field: str, where: str) -> Optional[str]:
    """Keeps `value` only if it is one of the allowed literals."""
    if value is None or value == "":
        return None
    if value in get_args(literal_type):
        return value
    logger.warning(f"Dropping unknown {field} {value!r} on {where}")
    return None


def _normalize_scene(raw: Any, index: int) -> Dict[str, Any]:
    position = index + 1
    if not isinstance(raw, Mapping):
        raise BlueprintValidationError(f"Scene {position} must be an object")

    scene_id = _clean_id(_first(raw, "scene_id", "sceneId", "id")) or f"scene_{position}"

    start = _to_number(_first(raw, "start_time", "startTime", "start", "from"))
    end = _to_number(_first(raw, "end_time", "endTime", "end", "to"))
    if start is None or end is None:
        raise BlueprintValidationError(
            f"Scene {position} missing timing",
            {"scene_id": scene_id, "start": start, "end": end},
        )
    start = _clamp(start, 0.0, settings.MAX_SCENE_SECONDS)
    end = _clamp(end, 0.0, settings.MAX_SCENE_SECONDS)
    if end <= start:
        raise BlueprintValidationError(
            f"Scene {position} has invalid timing (end <= start)",
            {"scene_id": scene_id, "start": start, "end": end},
        )

    clip_url = _clean_id(_first(raw, "clip_url", "clipUrl", "url", "clip"))
    if not clip_url:
        raise BlueprintValidationError(f"Scene {position} missing clip URL", {"scene_id": scene_id})

    where = f"scene {scene_id}"
    return {
        "scene_id": scene_id,
        "clip_id": _clean_id(_first(raw, "clip_id", "clipId")) or scene_id,
        "clip_url": clip_url,
        "start": start,
        "end": end,
        "purpose": _choice(raw.get("purpose"), ScenePurposeType, "purpose", where),
        "text": _first(raw, "text_overlay", "textOverlay", "text"),
        "text_position": _choice(_first(raw, "text_position", "textPosition"), TextPositionType, "text position", where),
        "animation": _choice(raw.get("animation"), AnimationType, "animation", where),
        "cut_reason": _first(raw, "cut_reason", "cutReason"),
    }


def _dedupe_scene_ids(scenes: List[Dict[str, Any]]) -> None:
    seen = set()
    for index, scene in enumerate(scenes):
        scene_id = scene["scene_id"]
        if scene_id in seen:
            scene_id = f"{scene_id}_{index + 1}"
            scene["scene_id"] = scene_id
        seen.add(scene_id)


def normalize_blueprint(raw: Any) -> SceneBlueprint:
    """
    Turns a loosely-shaped blueprint document (snake_case, camelCase or legacy
    keys) into a SceneBlueprint. Scene order is kept as given.

    Raises BlueprintValidationError when the document cannot be rendered.
    """
    if not isinstance(raw, Mapping):
        raise BlueprintValidationError("Blueprint must be an object")

    blueprint_id = _clean_id(_first(raw, "blueprint_id", "id", "blueprintId"))
    if not blueprint_id:
        raise BlueprintValidationError("Blueprint missing ID")

    scenes_raw = raw.get("scenes")
    if not isinstance(scenes_raw, list) or not scenes_raw:
        raise BlueprintValidationError("Blueprint has no scenes")

    scenes = [_normalize_scene(scene, index) for index, scene in enumerate(scenes_raw)]
    _dedupe_scene_ids(scenes)

    total_duration = sum(scene["end"] - scene["start"] for scene in scenes)
    declared_total = _to_number(_first(raw, "total_duration", "totalDuration"))
    if declared_total is not None and not math.isclose(declared_total, total_duration, abs_tol=1e-9):
        logger.warning(
            f"Blueprint {blueprint_id} declares total duration {declared_total}s, "
            f"scenes add up to {total_duration}s; using the scene sum"
        )

    where = f"blueprint {blueprint_id}"
    raw_format = raw.get("format")
    raw_aspect_ratio = _first(raw, "aspect_ratio", "aspectRatio")
    document = {
        "id": blueprint_id,
        "source": _choice(_first(raw, "blueprint_source", "blueprintSource", "source"), BlueprintSourceType, "source", where),
        "format": DEFAULT_FORMAT if raw_format is None else _choice(raw_format, FormatType, "format", where),
        "aspect_ratio": (
            DEFAULT_ASPECT_RATIO if raw_aspect_ratio is None
            else _choice(raw_aspect_ratio, AspectRatioType, "aspect ratio", where)
        ),
        "template_id": _first(raw, "template_id", "templateId"),
        "overlay_pack": _first(raw, "overlay_pack", "overlayPack"),
        "font": raw.get("font"),
        "text_style": _choice(_first(raw, "text_style", "textStyle"), TextStyleType, "text style", where),
        "caption_style": _choice(_first(raw, "caption_style", "captionStyle"), CaptionStyleType, "caption style", where),
        "platform": _choice(raw.get("platform"), PlatformType, "platform", where),
        "brand": raw.get("brand"),
        "caption": raw.get("caption"),
        "end_card": _first(raw, "end_card", "endCard"),
        "created_at": _first(raw, "created_at", "createdAt"),
        "scenes": scenes,
        "total_duration": total_duration,
    }

    try:
        blueprint = SceneBlueprint.model_validate(document)
    except ValidationError as e:
        raise BlueprintValidationError("Blueprint has malformed fields", e.errors()) from e

    logger.debug(f"Normalized blueprint {blueprint.id} with {len(blueprint.scenes)} scenes")
    return blueprint


def check_blueprint(raw: Any) -> Tuple[BlueprintValidation, Optional[SceneBlueprint]]:
    """Non-raising variant of `normalize_blueprint`."""
    try:
        blueprint = normalize_blueprint(raw)
    except BlueprintValidationError as e:
        return BlueprintValidation(valid=False, errors=[str(e)]), None
    return BlueprintValidation(valid=True, errors=[]), blueprint
