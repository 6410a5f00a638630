"""Tests for the presets and the verification blueprint factory."""

import pytest

from blueprint_module.app.blueprint.compiler import compile_blueprint
from blueprint_module.app.blueprint.errors import BlueprintValidationError
from blueprint_module.app.blueprint.validator import assert_renderable, validate
from blueprint_module.app.core.factories import FORMAT_TEMPLATE_MAP, OVERLAY_PACK_MAP, create_test_blueprint
from blueprint_module.app.schemas.render_request import ClipInput

CLIPS = [
    {"id": "c1", "url": "https://cdn.example.com/c1.mp4", "duration": 6.0},
    {"id": "c2", "url": "https://cdn.example.com/c2.mp4", "duration": 8.0},
]


def test_two_clips():
    blueprint = create_test_blueprint(CLIPS, blueprint_id="verify-1")

    assert blueprint.id == "verify-1"
    assert [s.purpose for s in blueprint.scenes] == ["hook", "b_roll", "cta"]
    assert [s.clip_id for s in blueprint.scenes] == ["c1", "c2", "c2"]
    assert (blueprint.scenes[2].start, blueprint.scenes[2].end) == (6.0, 8.0)
    assert blueprint.total_duration == pytest.approx(1.2 + 2.5 + 2.0)
    assert blueprint.end_card.text == "WrapPriceWizard"
    assert (blueprint.format, blueprint.aspect_ratio, blueprint.template_id) == ("reel", "9:16", "ig_reel_v1")
    assert (blueprint.font, blueprint.text_style) == ("Inter Black", "bold")


def test_single_clip_reuses_later_segment():
    blueprint = create_test_blueprint([ClipInput(id="only", url="only.mp4", duration=3.0)])

    assert blueprint.id == "test-blueprint-only"
    b_roll = blueprint.scenes[1]
    assert (b_roll.clip_id, b_roll.start, b_roll.end) == ("only", 1.2, 3.0)
    assert (blueprint.scenes[2].start, blueprint.scenes[2].end) == (1.0, 3.0)


def test_short_clips_are_capped():
    blueprint = create_test_blueprint([{"id": "tiny", "url": "tiny.mp4", "duration": 1.0}])
    assert blueprint.scenes[0].end == 1.0


def test_renderable_and_compiles():
    blueprint = create_test_blueprint(CLIPS)
    assert validate(blueprint).valid is True
    assert assert_renderable(blueprint) is blueprint

    payload = compile_blueprint(blueprint)
    assert payload.duration == pytest.approx(blueprint.total_duration + 2.0)


def test_no_clips():
    with pytest.raises(BlueprintValidationError):
        create_test_blueprint([])


def test_presets_cover_every_format():
    assert set(FORMAT_TEMPLATE_MAP) == {"reel", "story", "short"}
    assert all(p["aspect_ratio"] == "9:16" for p in FORMAT_TEMPLATE_MAP.values())
    assert OVERLAY_PACK_MAP["bold-impact"] == {"font": "Impact", "text_style": "bold"}
