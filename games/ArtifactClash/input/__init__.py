"""Artifact Clash input sources."""

from .keyboard import KEY_BINDINGS, KeyboardInputSource, keys_from_pressed

__all__ = ['KEY_BINDINGS', 'KeyboardInputSource', 'keys_from_pressed']
