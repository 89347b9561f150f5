"""Keyboard and game-controller input handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pygame

from handmade.world import Vec2, WorldState

# Directions as the keyboard maps them onto the user's intent.
KEY_INTENTS = {
    pygame.K_UP: Vec2(0.0, 1.0),
    pygame.K_DOWN: Vec2(0.0, -1.0),
    pygame.K_LEFT: Vec2(1.0, 0.0),
    pygame.K_RIGHT: Vec2(-1.0, 0.0),
}


class UnknownControllerError(LookupError):
    """An event named a controller that is not registered."""


@dataclass
class GPad:
    """A connected game controller."""

    jid: int
    cid: int
    handle: Any = None


@dataclass
class InputState:
    """Connected controllers, keyed by joystick id."""

    gamepads: dict[int, GPad] = field(default_factory=dict)
    next_controller_id: int = 0

    def _gpad(self, jid: int) -> GPad:
        try:
            return self.gamepads[jid]
        except KeyError:
            raise UnknownControllerError(f"unknown controller {jid}") from None

    def add_controller(self, jid: int, handle: Any = None) -> GPad:
        """Register a newly connected controller."""
        if jid in self.gamepads:
            raise ValueError(f"controller {jid} is already connected")
        cid = self.next_controller_id
        self.next_controller_id += 1
        print(f"New controller, ID {cid}")
        gpad = GPad(jid=jid, cid=cid, handle=handle)
        self.gamepads[jid] = gpad
        return gpad

    def remove_controller(self, jid: int) -> GPad:
        """Forget a controller and close its handle."""
        gpad = self._gpad(jid)
        print(f"Removed controller ID {gpad.cid}")
        if gpad.handle is not None:
            gpad.handle.quit()
        del self.gamepads[jid]
        return gpad

    def keyboard_key(self, world: WorldState, key: int, pressed: bool, repeat: bool) -> None:
        """Add a key press to, or remove a release from, the user's intent."""
        if pressed and repeat:
            return
        intent = KEY_INTENTS.get(key, Vec2())
        if not pressed:
            intent = -intent
        world.user_intent = world.user_intent + intent

    def controller_button(self, world: WorldState, jid: int, button: int, pressed: bool) -> None:
        """Report a controller button change."""
        gpad = self._gpad(jid)
        action = "pressed" if pressed else "released"
        print(f"Button '{button}' {action} on controller {gpad.cid}")

    def controller_axis(self, world: WorldState, jid: int, axis: int, value: int) -> None:
        """Report a controller axis movement."""
        gpad = self._gpad(jid)
        print(f"Axis '{axis}' on controller {gpad.cid} now: {{{value}}}")