# blueprint/validator.py

from typing import List, Optional

from ..models.blueprint import SceneBlueprint
from ..models.validation import BlueprintValidation
from .errors import BlueprintNotRenderableError

NO_BLUEPRINT_ERROR = "No blueprint created yet"


def _collect_errors(blueprint: SceneBlueprint) -> List[str]:
    errors: List[str] = []

    if not blueprint.id:
        errors.append("Blueprint missing ID")
    if not blueprint.format:
        errors.append("Missing format")
    if not blueprint.aspect_ratio:
        errors.append("Missing aspect ratio")
    if not blueprint.scenes:
        errors.append("Blueprint has no scenes")

    for index, scene in enumerate(blueprint.scenes, start=1):
        if not scene.clip_url:
            errors.append(f"Scene {index} missing clip URL")
        if scene.end <= scene.start:
            errors.append(f"Scene {index} has invalid timing (end <= start)")

    if blueprint.end_card is not None and blueprint.end_card.duration <= 0:
        errors.append("End card has invalid duration")

    return errors


def validate(blueprint: Optional[SceneBlueprint]) -> BlueprintValidation:
    """
    Reports every structural problem that keeps a blueprint from being ready to
    compile, in the order the checks are defined. Pure; safe to call after
    every edit.
    """
    if blueprint is None:
        return BlueprintValidation(valid=False, errors=[NO_BLUEPRINT_ERROR])

    errors = _collect_errors(blueprint)
    return BlueprintValidation(valid=not errors, errors=errors)


def assert_renderable(blueprint: Optional[SceneBlueprint]) -> SceneBlueprint:
    """
    Render preflight. Stricter than `validate`: a template must also be locked.
    Returns the blueprint unchanged or raises BlueprintNotRenderableError.
    """
    if blueprint is None:
        raise BlueprintNotRenderableError([NO_BLUEPRINT_ERROR])

    errors = _collect_errors(blueprint)
    if not blueprint.template_id:
        errors.append("Missing template ID")

    if errors:
        raise BlueprintNotRenderableError(errors)
    return blueprint
