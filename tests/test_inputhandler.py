import pygame

from parallelrts.inputhandler import InputHandler


def test_left_click_on_release():
    handler = InputHandler()
    handler.update(set(), 1)
    assert handler.left_click is False
    handler.update(set(), 0)
    assert handler.left_click is True
    assert handler.right_click is False
    handler.update(set(), 0)
    assert handler.left_click is False


def test_right_click_on_release():
    handler = InputHandler()
    handler.update(set(), 2)
    handler.update(set(), 0)
    assert handler.right_click is True
    assert handler.left_click is False


def test_both_buttons_count_as_left():
    handler = InputHandler()
    handler.update(set(), 3)
    handler.update(set(), 0)
    assert handler.left_click is True
    assert handler.right_click is False


def test_held_button_is_not_a_click():
    handler = InputHandler()
    for _ in range(3):
        handler.update(set(), 1)
    assert handler.left_click is False


def test_escape_press_once():
    handler = InputHandler()
    handler.update({pygame.K_ESCAPE}, 0)
    assert handler.key_click is True
    assert handler.key_pressed == "esc"
    handler.update({pygame.K_ESCAPE}, 0)
    assert handler.key_click is False


def test_escape_again_after_release():
    handler = InputHandler()
    handler.update({pygame.K_ESCAPE}, 0)
    handler.update(set(), 0)
    handler.update({pygame.K_ESCAPE}, 0)
    assert handler.key_click is True


def test_b_is_recorded_without_click():
    handler = InputHandler()
    handler.update({pygame.K_b}, 0)
    assert handler.key_pressed == "b"
    assert handler.key_click is False