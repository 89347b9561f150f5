import pygame
import pytest

from handmade.inputs import InputState, UnknownControllerError
from handmade.world import Vec2, WorldState


class FakeHandle:
    def __init__(self):
        self.closed = False

    def quit(self):
        self.closed = True


def test_controllers_get_increasing_ids():
    state = InputState()
    first = state.add_controller(7)
    second = state.add_controller(9)
    assert (first.cid, second.cid) == (0, 1)
    assert set(state.gamepads) == {7, 9}


def test_duplicate_controller_rejected():
    state = InputState()
    state.add_controller(7)
    with pytest.raises(ValueError):
        state.add_controller(7)


def test_remove_closes_handle():
    state = InputState()
    handle = FakeHandle()
    state.add_controller(4, handle)
    removed = state.remove_controller(4)
    assert removed.jid == 4
    assert handle.closed
    assert state.gamepads == {}


def test_remove_unknown_raises():
    with pytest.raises(UnknownControllerError):
        InputState().remove_controller(3)


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_UP, Vec2(0.0, 1.0)),
        (pygame.K_DOWN, Vec2(0.0, -1.0)),
        (pygame.K_LEFT, Vec2(1.0, 0.0)),
        (pygame.K_RIGHT, Vec2(-1.0, 0.0)),
    ],
)
def test_key_press_sets_intent(key, expected):
    world = WorldState()
    InputState().keyboard_key(world, key, True, False)
    assert world.user_intent == expected


def test_press_then_release_cancels():
    world = WorldState()
    state = InputState()
    state.keyboard_key(world, pygame.K_UP, True, False)
    state.keyboard_key(world, pygame.K_UP, False, False)
    assert world.user_intent == Vec2()


def test_repeated_press_ignored():
    world = WorldState()
    state = InputState()
    state.keyboard_key(world, pygame.K_UP, True, False)
    state.keyboard_key(world, pygame.K_UP, True, True)
    assert world.user_intent == Vec2(0.0, 1.0)


def test_other_key_leaves_intent():
    world = WorldState()
    InputState().keyboard_key(world, pygame.K_a, True, False)
    assert world.user_intent == Vec2()


def test_button_report(capsys):
    state = InputState()
    state.add_controller(5)
    capsys.readouterr()
    state.controller_button(WorldState(), 5, 3, True)
    state.controller_button(WorldState(), 5, 3, False)
    out = capsys.readouterr().out
    assert out == "Button '3' pressed on controller 0\nButton '3' released on controller 0\n"


def test_axis_report(capsys):
    state = InputState()
    state.add_controller(5)
    capsys.readouterr()
    state.controller_axis(WorldState(), 5, 0, 1200)
    assert capsys.readouterr().out == "Axis '0' on controller 0 now: {1200}\n"


def test_unknown_controller_events_raise():
    state = InputState()
    with pytest.raises(UnknownControllerError):
        state.controller_button(WorldState(), 1, 0, True)
    with pytest.raises(UnknownControllerError):
        state.controller_axis(WorldState(), 1, 0, 10)