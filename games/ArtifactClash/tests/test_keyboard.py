"""
Tests for the keyboard input source.
"""

from collections import defaultdict

import pygame

from games.ArtifactClash.input import KEY_BINDINGS, KeyboardInputSource, keys_from_pressed


class TestKeysFromPressed:
    """Test translating key codes into logical key ids."""

    def test_all_bindings_reported(self):
        keys = keys_from_pressed(defaultdict(bool))
        assert set(keys) == {'w', 'a', 's', 'd', 'f', 'up', 'down', 'left', 'right', 'm', 'space'}
        assert not any(keys.values())

    def test_pressed_keys_true(self):
        pressed = defaultdict(bool, {pygame.K_w: True, pygame.K_m: True, pygame.K_SPACE: True})
        keys = keys_from_pressed(pressed)
        assert keys['w']
        assert keys['m']
        assert keys['space']
        assert not keys['up']

    def test_arrow_keys_map_to_blue(self):
        pressed = defaultdict(bool, {pygame.K_LEFT: True})
        assert keys_from_pressed(pressed)['left']

    def test_unbound_keys_ignored(self):
        pressed = defaultdict(bool, {pygame.K_q: True})
        assert not any(keys_from_pressed(pressed).values())

    def test_bindings_unique(self):
        assert len(set(KEY_BINDINGS.values())) == len(KEY_BINDINGS)


class TestKeyboardInputSource:
    """Test the polling source without a display."""

    def test_initially_nothing_pressed(self):
        source = KeyboardInputSource()
        assert not any(source.poll_keys().values())

    def test_poll_returns_copy(self):
        source = KeyboardInputSource()
        keys = source.poll_keys()
        keys['w'] = True
        assert not source.poll_keys()['w']
