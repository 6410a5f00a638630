"""Tests for the ready-made scene transforms."""

from blueprint_module.app.blueprint.transforms import order_by_purpose, pick_best_scenes, trim_to_duration
from blueprint_module.app.models.blueprint import Scene


def _scene(scene_id, duration, purpose=None):
    return Scene(scene_id=scene_id, clip_url=f"{scene_id}.mp4", start=0.0, end=duration, purpose=purpose)


SCENES = (
    _scene("broll", 3.0, "b_roll"),
    _scene("hook", 1.0, "hook"),
    _scene("proof", 2.0, "proof"),
    _scene("cta", 1.5, "cta"),
)


class TestPickBestScenes:
    def test_keeps_ranked_scenes_in_original_order(self):
        picked = pick_best_scenes(4.5)(SCENES)
        assert [s.scene_id for s in picked] == ["hook", "proof", "cta"]

    def test_generous_budget_keeps_everything(self):
        assert list(pick_best_scenes(100)(SCENES)) == list(SCENES)

    def test_top_scene_survives_tiny_budget(self):
        picked = pick_best_scenes(0.5)(SCENES)
        assert [s.scene_id for s in picked] == ["hook"]

    def test_empty(self):
        assert pick_best_scenes(10)(()) == []

    def test_through_store(self, store):
        store.optimize_scenes(pick_best_scenes(3.5))
        assert [s.scene_id for s in store.blueprint.scenes] == ["s1", "s3"]
        assert store.blueprint.total_duration == 6.0


class TestOrderByPurpose:
    def test_hook_first_cta_last(self):
        ordered = order_by_purpose(SCENES, 7.5)
        assert [s.scene_id for s in ordered] == ["hook", "broll", "proof", "cta"]

    def test_through_store(self, store):
        store.optimize_scenes(lambda scenes: scenes[::-1])
        store.resequence_scenes(order_by_purpose)
        assert [s.scene_id for s in store.blueprint.scenes] == ["s1", "s2", "s3"]
        assert store.blueprint.total_duration == 6.0


class TestTrimToDuration:
    def test_shortens_crossing_scene_and_drops_rest(self):
        trimmed = trim_to_duration(4.5)(SCENES, 7.5)
        assert [s.scene_id for s in trimmed] == ["broll", "hook", "proof"]
        assert trimmed[-1].end == 0.5

    def test_exact_fit(self):
        trimmed = trim_to_duration(4.0)(SCENES, 7.5)
        assert [s.scene_id for s in trimmed] == ["broll", "hook"]

    def test_under_target_is_unchanged(self):
        assert list(trim_to_duration(60)(SCENES, 7.5)) == list(SCENES)

    def test_through_store_updates_total(self, store):
        store.resequence_scenes(trim_to_duration(3.0))
        assert store.blueprint.total_duration == 3.0
        assert [s.scene_id for s in store.blueprint.scenes] == ["s1", "s2"]
        assert store.blueprint.scenes[1].end == 3.5
