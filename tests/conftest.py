"""
Pytest configuration and shared blueprint fixtures.
"""
import os

# Keep test runs from writing rotating log files into the package directory.
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from blueprint_module.app.blueprint.store import SceneBlueprintStore
from blueprint_module.app.models.blueprint import EndCard, Scene, SceneBlueprint


@pytest.fixture
def two_scene_blueprint():
    """Scene A (0-4s, "Hello") then scene B (10-13s, no text), square output."""
    return SceneBlueprint(
        id="bp-two",
        format="reel",
        aspect_ratio="1:1",
        template_id="ig_reel_v1",
        scenes=(
            Scene(clip_url="https://cdn.example.com/a.mp4", start=0, end=4, text="Hello"),
            Scene(clip_url="https://cdn.example.com/b.mp4", start=10, end=13),
        ),
        total_duration=7.0,
    )


@pytest.fixture
def three_scene_blueprint():
    return SceneBlueprint(
        id="bp-three",
        format="reel",
        aspect_ratio="9:16",
        template_id="ig_reel_v1",
        overlay_pack="wpw_signature",
        font="Inter Black",
        text_style="bold",
        brand="wpw",
        caption="Full wrap in 48 hours",
        scenes=(
            Scene(scene_id="s1", clip_url="clip-1.mp4", start=0.0, end=1.5, text="WATCH THIS",
                  purpose="hook", text_position="top", animation="pop"),
            Scene(scene_id="s2", clip_url="clip-2.mp4", start=2.0, end=4.5, text="THE PROOF",
                  purpose="proof", text_position="bottom", animation="slide"),
            Scene(scene_id="s3", clip_url="clip-3.mp4", start=5.0, end=7.0, text="BOOK NOW",
                  purpose="cta", animation="punch"),
        ),
        end_card=EndCard(text="WrapPriceWizard", cta="Book Now", duration=2.0),
        total_duration=6.0,
    )


@pytest.fixture
def store(three_scene_blueprint):
    return SceneBlueprintStore(three_scene_blueprint)


@pytest.fixture
def empty_store():
    return SceneBlueprintStore()
