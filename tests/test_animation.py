import pygame
import pytest

from parallelrts.animation import Animation, AnimationSet

COLOURS = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]


def _sheet():
    sheet = pygame.Surface((4 * len(COLOURS), 4))
    for index, colour in enumerate(COLOURS):
        sheet.fill(colour, pygame.Rect(index * 4, 0, 4, 4))
    return sheet


def test_frame_advances_after_delay():
    animation = Animation(_sheet(), 4, 4, 2, 3, 0, 0)
    animation.update()
    assert animation.current_frame == 0
    animation.update()
    assert animation.current_frame == 1


def test_frames_wrap_around():
    animation = Animation(_sheet(), 4, 4, 2, 3, 0, 0)
    for _ in range(2 * 3):
        animation.update()
    assert animation.current_frame == 0


def test_non_positive_delay_freezes():
    animation = Animation(_sheet(), 4, 4, 0, 3, 0, 0)
    for _ in range(10):
        animation.update()
    assert animation.current_frame == 0


@pytest.mark.parametrize("steps", [0, 1, 2])
def test_render_draws_current_frame(steps):
    animation = Animation(_sheet(), 4, 4, 1, 3, 0, 0)
    for _ in range(steps):
        animation.update()
    target = pygame.Surface((4, 4))
    animation.render(target, 0, 0)
    assert tuple(target.get_at((2, 2)))[:3] == COLOURS[steps]


def test_animation_set_select():
    walk = Animation(_sheet(), 4, 4, 1, 3)
    idle = Animation(_sheet(), 4, 4, 5, 3)
    animations = AnimationSet()
    animations.add(walk, "walk")
    animations.add(idle, "idle")
    assert animations.current is None
    assert animations.select("idle") is idle
    assert animations.current is idle


def test_animation_set_unknown_key():
    with pytest.raises(KeyError):
        AnimationSet().select("run")