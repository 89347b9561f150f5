import pygame

from handmade.events import GameState, handle_event
from handmade.world import Vec2


class FakeHandle:
    def __init__(self):
        self.closed = False

    def quit(self):
        self.closed = True


def test_quit_event(capsys):
    state = GameState()
    handle_event(state, pygame.event.Event(pygame.QUIT))
    assert state.should_quit
    assert capsys.readouterr().out == "Got SDL_QUIT\n"


def test_window_close_quits():
    state = GameState()
    handle_event(state, pygame.event.Event(pygame.WINDOWCLOSE))
    assert state.should_quit


def test_keys_update_intent():
    state = GameState()
    handle_event(state, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert state.world.user_intent == Vec2(0.0, 1.0)
    handle_event(state, pygame.event.Event(pygame.KEYUP, key=pygame.K_UP))
    assert state.world.user_intent == Vec2()


def test_controller_added_and_removed():
    handle = FakeHandle()
    opened = []

    def opener(index):
        opened.append(index)
        return handle

    state = GameState(open_controller=opener)
    handle_event(state, pygame.event.Event(pygame.CONTROLLERDEVICEADDED, device_index=3))
    assert opened == [3]
    assert state.input.gamepads[3].cid == 0
    handle_event(state, pygame.event.Event(pygame.CONTROLLERDEVICEREMOVED, instance_id=3))
    assert state.input.gamepads == {}
    assert handle.closed


def test_unknown_controller_event_is_ignored():
    state = GameState()
    handle_event(
        state, pygame.event.Event(pygame.CONTROLLERBUTTONDOWN, instance_id=9, button=1)
    )
    assert state.input.gamepads == {}
    assert state.should_quit is False


def test_exposed_event_changes_nothing():
    state = GameState()
    handle_event(state, pygame.event.Event(pygame.WINDOWEXPOSED))
    assert state.should_quit is False
    assert state.world.user_intent == Vec2()