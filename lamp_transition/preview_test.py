import asyncio
import copy

from .config import PreviewConfig, TransitionConfig, load_previews
from .preview import DEFAULT_CONFIG_PATH, run_preview
from .state import LampState
from .transition_controller import TransitionController, TransitionType
from .transition_controller_test import FakeClock


def test_run_preview():
    clock = FakeClock()
    config = TransitionConfig(intended_fps=4, state_update_frequency_secs=0)
    preview = PreviewConfig(
        name="half_wheel",
        start_state=LampState(brightness=50, saturation=100, hue=180, on=True),
        end_state=LampState(brightness=50, saturation=100, hue=0, on=True),
        duration_secs=1,
    )

    states = asyncio.run(
        run_preview(config, preview, clock=clock, sleep=clock.sleep)
    )
    assert states[0] == preview.start_state
    assert [s.hue for s in states[1:]] == [135, 90, 45, 0]


def test_shipped_previews_reach_their_targets():
    config = TransitionConfig(intended_fps=10, state_update_frequency_secs=0.5)
    for preview in load_previews(DEFAULT_CONFIG_PATH):
        clock = FakeClock()
        states = asyncio.run(
            run_preview(config, preview, clock=clock, sleep=clock.sleep)
        )
        assert states[-1] == preview.end_state
        assert all(0 <= s.hue <= 359 for s in states)


def test_shipped_preview_types():
    expected_pairs = [
        ("hue_across_zero", TransitionType.HUE_FADE),
        ("half_wheel", TransitionType.HUE_FADE),
        ("off_to_on", TransitionType.OFF_TO_ON),
        ("desaturate", TransitionType.SATURATED_TO_UNSATURATED),
    ]
    previews = {p.name: p for p in load_previews(DEFAULT_CONFIG_PATH)}
    for name, transition_type in expected_pairs:
        preview = previews[name]
        controller = TransitionController(
            copy.deepcopy(preview.start_state),
            preview.end_state,
            10,
            preview.duration_secs,
            0,
            lambda: None,
        )
        assert controller.transition_type == transition_type
        assert preview.end_state.on

    assert not previews["off_to_on"].start_state.on
    assert previews["hue_across_zero"].start_state.on
