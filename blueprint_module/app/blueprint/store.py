# blueprint/store.py

from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from pydantic import ValidationError

from ..core.factories import FORMAT_TEMPLATE_MAP, OVERLAY_PACK_MAP
from ..models.blueprint import (
    AspectRatioType, FormatType, Scene, SceneBlueprint, TextStyleType, sum_scene_durations
)
from ..models.validation import BlueprintValidation
from ..utils.logging import logger
from .errors import BlueprintValidationError, UnknownPresetError
from .validator import validate

BlueprintMutator = Callable[[SceneBlueprint], SceneBlueprint]
BlueprintListener = Callable[[Optional[SceneBlueprint], BlueprintValidation], None]


class SceneTransform(Protocol):
    """Picks, drops or rewrites scenes. Must be a pure function of its input."""

    def __call__(self, scenes: Tuple[Scene, ...]) -> Sequence[Scene]: ...


class SceneResequencer(Protocol):
    """Reorders or retimes scenes given the current cached total duration."""

    def __call__(self, scenes: Tuple[Scene, ...], total_duration: float) -> Sequence[Scene]: ...


class SceneBlueprintStore:
    """
    Owns the blueprint being edited. Every change goes through
    `update_blueprint` or `replace_blueprint`, and validation is recomputed
    before either returns, so readers never see a stale validation result.

    Blueprints are immutable, so handing out the current instance is safe.
    """

    def __init__(self, blueprint: Optional[SceneBlueprint] = None):
        self._blueprint: Optional[SceneBlueprint] = blueprint
        self._validation: BlueprintValidation = validate(blueprint)
        self._listeners: List[BlueprintListener] = []

    @property
    def blueprint(self) -> Optional[SceneBlueprint]:
        return self._blueprint

    @property
    def validation(self) -> BlueprintValidation:
        return self._validation

    def subscribe(self, listener: BlueprintListener) -> Callable[[], None]:
        """Calls `listener(blueprint, validation)` after every write. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _install(self, blueprint: Optional[SceneBlueprint]) -> None:
        if blueprint is not None:
            blueprint = self._revalidate(blueprint)
        self._blueprint = blueprint
        self._validation = validate(blueprint)
        if not self._validation.valid:
            logger.debug(f"Blueprint not ready: {self._validation.errors}")
        self._notify()

    @staticmethod
    def _revalidate(blueprint: SceneBlueprint) -> SceneBlueprint:
        """
        Rebuilds `blueprint` through model validation, since `model_copy(update=...)`
        does not validate. The current state is left as it was on failure.
        """
        try:
            return SceneBlueprint.model_validate(blueprint.model_dump())
        except ValidationError as e:
            logger.error(f"Rejected edit to blueprint {blueprint.id}: {e.error_count()} invalid fields")
            raise BlueprintValidationError("Blueprint has malformed fields", e.errors()) from e

    def _notify(self) -> None:
        # Every listener is called, even after an earlier one raises.
        for listener in list(self._listeners):
            try:
                listener(self._blueprint, self._validation)
            except Exception:
                logger.exception(f"Blueprint listener {listener!r} failed")

    # --- Write paths ---

    def update_blueprint(self, mutator: BlueprintMutator) -> Optional[SceneBlueprint]:
        """
        Applies `mutator` to the current blueprint and installs the result.
        Does nothing when there is no blueprint yet.
        """
        if self._blueprint is None:
            logger.warning("update_blueprint called before a blueprint exists; ignoring")
            return None
        self._install(mutator(self._blueprint))
        return self._blueprint

    def replace_blueprint(self, blueprint: SceneBlueprint) -> SceneBlueprint:
        """Installs a blueprint built from scratch, discarding the current one."""
        logger.info(f"Replacing blueprint with {blueprint.id} ({len(blueprint.scenes)} scenes)")
        self._install(blueprint)
        return self._blueprint

    def clear_blueprint(self) -> None:
        logger.info("Clearing blueprint")
        self._install(None)

    # --- Named edits, each built on update_blueprint ---

    def set_format(self, format: FormatType, aspect_ratio: AspectRatioType, template_id: str) -> Optional[SceneBlueprint]:
        """Locks the render contract. The three fields always change together."""
        return self.update_blueprint(lambda bp: bp.model_copy(update={
            "format": format,
            "aspect_ratio": aspect_ratio,
            "template_id": template_id,
        }))

    def set_overlay_pack(self, overlay_pack: str, font: str, text_style: TextStyleType) -> Optional[SceneBlueprint]:
        return self.update_blueprint(lambda bp: bp.model_copy(update={
            "overlay_pack": overlay_pack,
            "font": font,
            "text_style": text_style,
        }))

    def set_caption(self, caption: Optional[str]) -> Optional[SceneBlueprint]:
        return self.update_blueprint(lambda bp: bp.model_copy(update={"caption": caption}))

    def set_scene_text(self, texts: Sequence[str]) -> Optional[SceneBlueprint]:
        """
        Writes `texts[i]` into scene i. Scenes beyond the end of `texts` keep
        their current text.
        """
        def apply(bp: SceneBlueprint) -> SceneBlueprint:
            scenes = tuple(
                scene.model_copy(update={"text": texts[i]}) if i < len(texts) else scene
                for i, scene in enumerate(bp.scenes)
            )
            return bp.model_copy(update={"scenes": scenes})

        return self.update_blueprint(apply)

    def optimize_scenes(self, optimizer: SceneTransform) -> Optional[SceneBlueprint]:
        """Replaces the scene list with `optimizer(scenes)`; no other field changes."""
        return self.update_blueprint(
            lambda bp: bp.model_copy(update={"scenes": tuple(optimizer(bp.scenes))})
        )

    def resequence_scenes(self, resequencer: SceneResequencer) -> Optional[SceneBlueprint]:
        """
        Replaces the scene list with `resequencer(scenes, total_duration)` and
        recomputes `total_duration` from the result.
        """
        def apply(bp: SceneBlueprint) -> SceneBlueprint:
            scenes = tuple(resequencer(bp.scenes, bp.total_duration))
            return bp.model_copy(update={
                "scenes": scenes,
                "total_duration": sum_scene_durations(scenes),
            })

        return self.update_blueprint(apply)

    # --- Presets ---

    def apply_format_preset(self, format: FormatType) -> Optional[SceneBlueprint]:
        preset = FORMAT_TEMPLATE_MAP.get(format)
        if preset is None:
            raise UnknownPresetError("format", format)
        return self.set_format(format, preset["aspect_ratio"], preset["template_id"])

    def apply_overlay_pack_preset(self, overlay_pack: str) -> Optional[SceneBlueprint]:
        preset = OVERLAY_PACK_MAP.get(overlay_pack)
        if preset is None:
            raise UnknownPresetError("overlay pack", overlay_pack)
        return self.set_overlay_pack(overlay_pack, preset["font"], preset["text_style"])
