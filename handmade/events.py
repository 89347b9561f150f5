"""Game state and the dispatch of window and input events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pygame

from handmade.audio import AudioState
from handmade.inputs import InputState, UnknownControllerError
from handmade.perf import PerfCounter
from handmade.video import VideoState
from handmade.world import WorldState

logger = logging.getLogger(__name__)


def _open_joystick(device_index: int) -> Any:
    return pygame.joystick.Joystick(device_index)


@dataclass
class GameState:
    """Everything the main loop owns."""

    frame_num: int = 0
    should_quit: bool = False
    video: VideoState | None = None
    input: InputState = field(default_factory=InputState)
    audio: AudioState | None = None
    world: WorldState = field(default_factory=WorldState)
    perf: PerfCounter = field(default_factory=PerfCounter)
    open_controller: Callable[[int], Any] = _open_joystick


def handle_event(state: GameState, event: pygame.event.Event) -> None:
    """Apply one event to the game state."""
    kind = event.type
    try:
        if kind == pygame.QUIT:
            print("Got SDL_QUIT")
            state.should_quit = True
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            state.input.keyboard_key(
                state.world,
                event.key,
                kind == pygame.KEYDOWN,
                bool(getattr(event, "repeat", False)),
            )
        elif kind == pygame.CONTROLLERDEVICEADDED:
            jid = event.device_index
            state.input.add_controller(jid, state.open_controller(jid))
        elif kind == pygame.CONTROLLERDEVICEREMOVED:
            state.input.remove_controller(event.instance_id)
        elif kind == pygame.CONTROLLERAXISMOTION:
            state.input.controller_axis(state.world, event.instance_id, event.axis, event.value)
        elif kind in (pygame.CONTROLLERBUTTONDOWN, pygame.CONTROLLERBUTTONUP):
            state.input.controller_button(
                state.world,
                event.instance_id,
                event.button,
                kind == pygame.CONTROLLERBUTTONDOWN,
            )
        elif kind == pygame.WINDOWEXPOSED:
            logger.debug("window exposed: %s", kind)
        elif kind == pygame.WINDOWRESIZED:
            logger.debug("Window resized: %s", kind)
        elif kind == pygame.WINDOWCLOSE:
            logger.info("Window closed, will quit: %s", kind)
            state.should_quit = True
    except UnknownControllerError as exc:
        logger.warning("Ignoring controller event: %s", exc)