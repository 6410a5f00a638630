# blueprint/transforms.py

from typing import List, Sequence, Tuple

from ..models.blueprint import Scene
from .store import SceneResequencer, SceneTransform

# Lower ranks are kept first when a duration budget forces a choice.
PURPOSE_PRIORITY = {
    "hook": 0,
    "payoff": 1,
    "reveal": 1,
    "proof": 2,
    "cta": 3,
    "pattern_interrupt": 4,
    "b_roll": 5,
}
UNSPECIFIED_PURPOSE_RANK = 6


def _rank(scene: Scene) -> int:
    return PURPOSE_PRIORITY.get(scene.purpose, UNSPECIFIED_PURPOSE_RANK)


def pick_best_scenes(max_duration: float) -> SceneTransform:
    """
    Keeps the most important scenes that fit in `max_duration` seconds, in
    their original order. The top-ranked scene is always kept.
    """
    def optimizer(scenes: Tuple[Scene, ...]) -> List[Scene]:
        if not scenes:
            return []

        ranked = sorted(range(len(scenes)), key=lambda i: (_rank(scenes[i]), i))
        kept = {ranked[0]}
        used = scenes[ranked[0]].duration
        for i in ranked[1:]:
            if used + scenes[i].duration <= max_duration:
                kept.add(i)
                used += scenes[i].duration

        return [scene for i, scene in enumerate(scenes) if i in kept]

    return optimizer


def order_by_purpose(scenes: Tuple[Scene, ...], total_duration: float) -> List[Scene]:
    """Hooks open the edit and calls to action close it; everything else keeps its order."""
    hooks = [s for s in scenes if s.purpose == "hook"]
    ctas = [s for s in scenes if s.purpose == "cta"]
    middle = [s for s in scenes if s.purpose not in ("hook", "cta")]
    return hooks + middle + ctas


def trim_to_duration(target: float) -> SceneResequencer:
    """
    Cuts the edit down to at most `target` seconds by shortening the last
    scene that crosses the limit and dropping everything after it.
    """
    # Walks the scenes themselves; the cached total can be stale after optimize_scenes.
    def resequencer(scenes: Tuple[Scene, ...], total_duration: float) -> Sequence[Scene]:
        trimmed: List[Scene] = []
        remaining = target
        for scene in scenes:
            if remaining <= 0:
                break
            if scene.duration <= remaining:
                trimmed.append(scene)
                remaining -= scene.duration
            else:
                trimmed.append(scene.model_copy(update={"end": scene.start + remaining}))
                remaining = 0
        return trimmed

    return resequencer
