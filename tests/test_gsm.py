import pytest

from parallelrts.gsm import State, StateManager


class Recorder(State):
    def __init__(self, manager, name):
        super().__init__(manager)
        self.name = name
        self.calls = []

    def render(self, surface):
        self.calls.append(("render", surface))

    def update(self, keys_down, mouse):
        self.calls.append(("update", keys_down, mouse))


def test_push_makes_state_active():
    manager = StateManager()
    first = Recorder(manager, "first")
    second = Recorder(manager, "second")
    manager.push(first)
    manager.push(second)
    assert manager.top() is second
    assert len(manager) == 2


def test_pop_returns_to_previous_state():
    manager = StateManager()
    first = Recorder(manager, "first")
    second = Recorder(manager, "second")
    manager.push(first)
    manager.push(second)
    assert manager.pop() is second
    assert manager.top() is first


def test_set_replaces_top():
    manager = StateManager()
    first = Recorder(manager, "first")
    second = Recorder(manager, "second")
    manager.push(first)
    assert manager.set(second) is first
    assert manager.top() is second
    assert len(manager) == 1


def test_empty_stack_raises():
    manager = StateManager()
    with pytest.raises(IndexError):
        manager.top()
    with pytest.raises(IndexError):
        manager.pop()
    with pytest.raises(IndexError):
        manager.set(Recorder(manager, "x"))


def test_render_and_update_reach_only_top():
    manager = StateManager()
    bottom = Recorder(manager, "bottom")
    top = Recorder(manager, "top")
    manager.push(bottom)
    manager.push(top)
    manager.update({1}, (3, 4, 0))
    manager.render("screen")
    assert top.calls == [("update", {1}, (3, 4, 0)), ("render", "screen")]
    assert bottom.calls == []


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State(StateManager())


def test_state_keeps_manager():
    manager = StateManager()
    assert Recorder(manager, "a").manager is manager