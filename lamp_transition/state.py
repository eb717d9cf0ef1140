from dataclasses import dataclass


@dataclass
class LampState:
    brightness: int = 0  # Range: [0, 100]
    saturation: int = 0  # Range: [0, 100]
    hue: int = 0  # Range: [0, 359]
    on: bool = False

    def is_lit(self) -> bool:
        return self.on and self.brightness > 0


def lamp_state_from_config(state_config) -> LampState:
    # YAML 1.1 reads an unquoted `on:` key as True.
    assert True not in state_config
    state = LampState(
        brightness=int(state_config.get("brightness", 0)),
        saturation=int(state_config.get("saturation", 0)),
        hue=int(state_config.get("hue", 0)),
        on=bool(state_config.get("on", False)),
    )
    assert 0 <= state.brightness <= 100
    assert 0 <= state.saturation <= 100
    assert 0 <= state.hue < 360
    return state
