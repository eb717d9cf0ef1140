import pytest
import yaml

from .state import LampState, lamp_state_from_config


def test_is_lit():
    assert LampState(brightness=10, on=True).is_lit()
    assert not LampState(brightness=10, on=False).is_lit()
    assert not LampState(brightness=0, on=True).is_lit()


def test_from_config():
    state = lamp_state_from_config(
        {"brightness": 70, "saturation": 50, "hue": 340, "on": True}
    )
    assert state == LampState(brightness=70, saturation=50, hue=340, on=True)


def test_from_config_defaults():
    assert lamp_state_from_config({}) == LampState()


def test_from_config_out_of_range():
    with pytest.raises(AssertionError):
        lamp_state_from_config({"hue": 360})
    with pytest.raises(AssertionError):
        lamp_state_from_config({"brightness": 101})


def test_from_yaml_with_on_key():
    config = yaml.safe_load(
        'lamp: {brightness: 70, saturation: 50, hue: 340, "on": true}'
    )
    state = lamp_state_from_config(config["lamp"])
    assert state == LampState(brightness=70, saturation=50, hue=340, on=True)
    assert state.is_lit()


def test_from_yaml_with_unquoted_on_key():
    # An unquoted `on` is parsed as a boolean key.
    config = yaml.safe_load("lamp: {brightness: 70, on: true}")
    with pytest.raises(AssertionError):
        lamp_state_from_config(config["lamp"])
