"""The game's entry point and main loop."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import pygame

from handmade.audio import init_audio
from handmade.constants import gib, mib
from handmade.events import GameState, handle_event
from handmade.inputs import InputState
from handmade.memory import init_memory
from handmade.perf import PerfCounter, PerfEvent
from handmade.video import init_video
from handmade.world import WorldState

logger = logging.getLogger(__name__)

MS_PER_FRAME = 16
MS_PER_TIMESTEP = 8
TONE_DURATION_MS = 20
TONE_RESET_HZ = 30.0
TONE_MAX_HZ = 900.0
TONE_STEP = 1.005


def next_tone(tone_hz: float) -> float:
    """Raise the tone slightly, wrapping back down once it passes the top."""
    return TONE_RESET_HZ if tone_hz > TONE_MAX_HZ else tone_hz * TONE_STEP


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="handmade", description="Run the game.")
    parser.add_argument("--assets", help="directory holding the game's assets")
    return parser.parse_args(argv)


def _run(state: GameState) -> int:
    first_tick = pygame.time.get_ticks()
    next_draw_tick = first_tick
    next_simulation_tick = first_tick
    state.world.last_tick_ms = first_tick

    while True:
        for event in pygame.event.get():
            handle_event(state, event)
            if state.should_quit:
                logger.critical("Exit main loop (quit flag set)")
                return 0

        tick = pygame.time.get_ticks()

        if tick >= next_simulation_tick:
            state.world.update(tick)
            next_simulation_tick = tick + MS_PER_TIMESTEP

        if tick >= next_draw_tick:
            with state.perf.measure(PerfEvent.AV):
                with state.perf.measure(PerfEvent.PAINT):
                    state.video.paint_window(state.world)
                if state.audio.queue_square_wave(state.world.tone_hz, TONE_DURATION_MS):
                    state.world.tone_hz = next_tone(state.world.tone_hz)
                next_draw_tick = tick + MS_PER_FRAME
                state.frame_num += 1

            if state.frame_num % 120 == 0:
                logger.debug(
                    "Timings/ms for frame %d: paint:%.3f, total_update:%.3f",
                    state.frame_num,
                    state.perf.last_ms(PerfEvent.PAINT),
                    state.perf.last_ms(PerfEvent.AV),
                )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game and run until the window is closed."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG)

    pygame.display.init()
    pygame.joystick.init()
    logger.critical("SDL initialized")
    try:
        with init_memory(mib(64), gib(2)):
            state = GameState(
                video=init_video(args.assets),
                audio=init_audio(),
                input=InputState(),
                perf=PerfCounter(),
                world=WorldState(),
            )
            return _run(state)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())