# Run from the repository root using:
# python3 -m lamp_transition.preview [config.yaml]

import asyncio
import copy
import logging
import os
import sys
from time import time

from .config import PreviewConfig, TransitionConfig, load_config, load_previews
from .state import LampState
from .transition_controller import transition

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "test_config.yaml")


async def run_preview(
    config: TransitionConfig,
    preview: PreviewConfig,
    clock=time,
    sleep=asyncio.sleep,
) -> list[LampState]:
    current_state = copy.deepcopy(preview.start_state)
    reported_states = [copy.deepcopy(current_state)]

    def record_state():
        reported_states.append(copy.deepcopy(current_state))
        log.debug(f"{preview.name}: {current_state}")

    await transition(
        current_state,
        preview.end_state,
        config,
        duration_secs=preview.duration_secs,
        update_state_callback=record_state,
        clock=clock,
        sleep=sleep,
    )
    return reported_states


async def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    logging.getLogger("lamp_transition").setLevel(level=logging.DEBUG)

    if argv is None:
        argv = sys.argv[1:]
    config_path = argv[0] if argv else DEFAULT_CONFIG_PATH

    config = load_config(config_path)
    for preview in load_previews(config_path):
        log.info(f"Running preview {preview.name}")
        await run_preview(config, preview)
        await asyncio.sleep(preview.wait_secs)


if __name__ == "__main__":
    with asyncio.Runner() as runner:
        runner.run(main())
