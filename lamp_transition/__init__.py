from .interpolation import hue_interpolate, linear_interpolate
from .state import LampState, lamp_state_from_config
from .config import PreviewConfig, TransitionConfig, load_config, load_previews
from .transition_controller import (
    TransitionController,
    TransitionType,
    copy_state_into,
    transition,
)
