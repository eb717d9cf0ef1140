from dataclasses import dataclass

import yaml

from .state import LampState, lamp_state_from_config


@dataclass
class TransitionConfig:
    intended_fps: int
    default_transition_secs: float = 0
    state_update_frequency_secs: float = 1

    @classmethod
    def from_dict(cls, config) -> "TransitionConfig":
        transition_config = config["transition"]
        result = cls(
            intended_fps=transition_config["intended_fps"],
            default_transition_secs=transition_config.get(
                "default_transition_secs", 0
            ),
            state_update_frequency_secs=transition_config.get(
                "state_update_frequency_secs", 1
            ),
        )
        assert isinstance(result.intended_fps, int) and result.intended_fps > 0
        assert result.default_transition_secs >= 0
        assert result.state_update_frequency_secs >= 0
        return result


@dataclass
class PreviewConfig:
    name: str
    start_state: LampState
    end_state: LampState
    duration_secs: float
    wait_secs: float = 0


def _read_yaml(path):
    with open(path, encoding="ascii") as f:
        return yaml.safe_load(f)


def load_config(path) -> TransitionConfig:
    return TransitionConfig.from_dict(_read_yaml(path))


def load_previews(path) -> list[PreviewConfig]:
    previews = []
    for preview_config in _read_yaml(path).get("previews", []):
        preview = PreviewConfig(
            name=preview_config["name"],
            start_state=lamp_state_from_config(preview_config["start"]),
            end_state=lamp_state_from_config(preview_config["end"]),
            duration_secs=preview_config["duration_secs"],
            wait_secs=preview_config.get("wait_secs", 0),
        )
        assert preview.duration_secs >= 0
        assert preview.wait_secs >= 0
        previews.append(preview)
    return previews
