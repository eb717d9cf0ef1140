import asyncio
from collections.abc import Awaitable, Callable
import copy
from enum import Enum
import logging
from time import time

from .config import TransitionConfig
from .interpolation import hue_interpolate, linear_interpolate
from .state import LampState


log = logging.getLogger(__name__)


class TransitionType(Enum):
    OFF_TO_ON = 1
    ON_TO_OFF = 2
    UNSATURATED_TO_SATURATED = 3
    SATURATED_TO_UNSATURATED = 4
    HUE_FADE = 5
    OTHER = 6


def copy_state_into(destination: LampState, source: LampState) -> None:
    destination.brightness = source.brightness
    destination.saturation = source.saturation
    destination.hue = source.hue
    destination.on = source.on


class TransitionController:
    """Moves a lamp state toward a target state over a fixed duration.

    All intermediate values are computed from the state captured at
    construction, so a frame only depends on its position in the transition.
    The state passed in is mutated in place and ends equal to the target.
    """

    def __init__(
        self,
        mutable_current_state: LampState,
        target_state: LampState,
        fps: int,
        transition_duration_secs: float,
        update_state_frequency_secs: float,
        update_state_callback: Callable[[], None],
        clock: Callable[[], float] = time,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        assert fps > 0
        self._clock = clock
        self._sleep = sleep

        self._start_time_secs = clock()
        self._end_time_secs = self._start_time_secs + transition_duration_secs
        self._is_done = False

        self._last_state_change_time_secs = self._start_time_secs
        self._change_delay_secs = 1 / fps
        self._num_changes = 0
        self._has_unreported_change = False

        self._last_update_time_secs = self._start_time_secs
        self._update_state_frequency_secs = update_state_frequency_secs
        self._update_state_callback = update_state_callback

        self._current_state = mutable_current_state
        self._start_state = copy.deepcopy(mutable_current_state)
        self._target_state = copy.deepcopy(target_state)

        start_lit = self._start_state.is_lit()
        target_lit = self._target_state.is_lit()
        if not start_lit and target_lit:
            self._transition_type = TransitionType.OFF_TO_ON
        elif start_lit and not target_lit:
            self._transition_type = TransitionType.ON_TO_OFF
        elif self._start_state.saturation == 0 and self._target_state.saturation > 0:
            self._transition_type = TransitionType.UNSATURATED_TO_SATURATED
        elif self._start_state.saturation > 0 and self._target_state.saturation == 0:
            self._transition_type = TransitionType.SATURATED_TO_UNSATURATED
        elif self._start_state.hue != self._target_state.hue:
            self._transition_type = TransitionType.HUE_FADE
        else:
            self._transition_type = TransitionType.OTHER

    @property
    def transition_type(self) -> TransitionType:
        return self._transition_type

    def is_done(self) -> bool:
        return self._is_done

    def step(self) -> bool:
        """Produces a frame if one is due. Returns True once the target is reached."""
        if self._is_done:
            return True

        self._maybe_update_state()
        self._maybe_send_update()
        return self._is_done

    async def run(self) -> None:
        while not self.step():
            next_change_time_secs = (
                self._last_state_change_time_secs + self._change_delay_secs
            )
            await self._sleep(max(0, next_change_time_secs - self._clock()))

    def _maybe_update_state(self):
        current_time_secs = self._clock()
        if (
            current_time_secs
            < self._last_state_change_time_secs + self._change_delay_secs
        ):
            return

        change_time_secs = self._last_state_change_time_secs + self._change_delay_secs
        while change_time_secs + self._change_delay_secs < current_time_secs:
            # Frames are skipped when the caller can't keep up.
            change_time_secs += self._change_delay_secs

        is_first_step = self._num_changes == 0
        is_last_step = change_time_secs >= self._end_time_secs

        if is_first_step:
            self._debug_print_state()

        self._compute_new_state(change_time_secs, is_first_step, is_last_step)

        self._last_state_change_time_secs = change_time_secs
        self._num_changes += 1
        self._has_unreported_change = True
        self._is_done = is_last_step

    def _maybe_send_update(self):
        if not self._has_unreported_change:
            return

        current_time_secs = self._clock()
        if self._is_done or (
            current_time_secs - self._last_update_time_secs
            >= self._update_state_frequency_secs
        ):
            self._update_state_callback()
            self._last_update_time_secs = current_time_secs
            self._has_unreported_change = False
            self._debug_print_state()

    def _debug_print_state(self):
        log.debug(
            f"{self._transition_type.name}: "
            f"bright={self._current_state.brightness}, "
            f"hue={self._current_state.hue}, "
            f"sat={self._current_state.saturation}, "
            f"on={self._current_state.on}"
        )

        if self._is_done:
            intended_fps = round(1 / self._change_delay_secs)
            duration_secs = self._end_time_secs - self._start_time_secs
            if duration_secs > 0:
                actual_fps = round(self._num_changes / duration_secs)
                log.debug(f"{intended_fps=}, {actual_fps=}")

    def _compute_new_state(
        self, change_time_secs: float, is_first_step: bool, is_last_step: bool
    ):
        if self._end_time_secs <= self._start_time_secs:
            position = 1
        else:
            position = (change_time_secs - self._start_time_secs) / (
                self._end_time_secs - self._start_time_secs
            )
            position = min(1, position)

        if self._transition_type == TransitionType.OFF_TO_ON:
            self._off_to_on(position, is_first_step)
        elif self._transition_type == TransitionType.ON_TO_OFF:
            self._on_to_off(position)
        elif self._transition_type == TransitionType.UNSATURATED_TO_SATURATED:
            self._unsaturated_to_saturated(position, is_first_step)
        elif self._transition_type == TransitionType.SATURATED_TO_UNSATURATED:
            self._saturated_to_unsaturated(position)
        elif self._transition_type == TransitionType.HUE_FADE:
            self._hue_fade(position)
        else:
            self._other(position)

        if is_last_step:
            copy_state_into(self._current_state, self._target_state)

    def _off_to_on(self, position, is_first_step):
        if is_first_step:
            self._current_state.hue = self._target_state.hue
            self._current_state.saturation = self._target_state.saturation
            self._current_state.on = True

        self._current_state.brightness = linear_interpolate(
            0, self._target_state.brightness, position
        )

    def _on_to_off(self, position):
        self._current_state.brightness = linear_interpolate(
            self._start_state.brightness, 0, position
        )

    def _unsaturated_to_saturated(self, position, is_first_step):
        if is_first_step:
            self._current_state.hue = self._target_state.hue

        self._linear_brightness(position)
        self._linear_saturation(position)

    def _saturated_to_unsaturated(self, position):
        # Hue jumps on the last step, once saturation has reached 0.
        self._linear_brightness(position)
        self._linear_saturation(position)

    def _hue_fade(self, position):
        self._linear_brightness(position)
        self._linear_saturation(position)
        self._current_state.hue = hue_interpolate(
            self._start_state.hue, self._target_state.hue, position
        )

    def _other(self, position):
        self._linear_brightness(position)
        self._linear_saturation(position)

        assert self._current_state.hue == self._target_state.hue

    def _linear_brightness(self, position):
        self._current_state.brightness = linear_interpolate(
            self._start_state.brightness, self._target_state.brightness, position
        )

    def _linear_saturation(self, position):
        self._current_state.saturation = linear_interpolate(
            self._start_state.saturation, self._target_state.saturation, position
        )


async def transition(
    current_state: LampState,
    target_state: LampState,
    config: TransitionConfig,
    duration_secs: float | None = None,
    update_state_callback: Callable[[], None] | None = None,
    clock: Callable[[], float] = time,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> None:
    if duration_secs is None:
        duration_secs = config.default_transition_secs
    update_state_callback = update_state_callback or (lambda: None)

    log.debug(f"transition(")
    log.debug(f"    {current_state=},")
    log.debug(f"    {target_state=},")
    log.debug(f"    {duration_secs=})")

    if duration_secs == 0:
        copy_state_into(current_state, target_state)
        update_state_callback()
        return

    controller = TransitionController(
        current_state,
        target_state,
        config.intended_fps,
        duration_secs,
        config.state_update_frequency_secs,
        update_state_callback,
        clock=clock,
        sleep=sleep,
    )
    await controller.run()
