"""
Keyboard Input Source - held-key state for both robots.

Both players share one keyboard, so input is sampled as "which keys are
down right now" once per frame rather than as discrete click events.
"""
from typing import Dict, Mapping, Sequence, Union

import pygame

# pygame key code -> logical key id used by the simulation
KEY_BINDINGS: Dict[int, str] = {
    # Red
    pygame.K_w: 'w',
    pygame.K_a: 'a',
    pygame.K_s: 's',
    pygame.K_d: 'd',
    pygame.K_f: 'f',
    # Blue
    pygame.K_UP: 'up',
    pygame.K_DOWN: 'down',
    pygame.K_LEFT: 'left',
    pygame.K_RIGHT: 'right',
    pygame.K_m: 'm',
    # Start / restart
    pygame.K_SPACE: 'space',
}

PressedKeys = Union[Sequence[bool], Mapping[int, bool]]


def keys_from_pressed(pressed: PressedKeys) -> Dict[str, bool]:
    """Translate a key-code indexed state into logical key ids.

    Args:
        pressed: Anything indexable by pygame key code, such as the result
            of pygame.key.get_pressed()

    Returns:
        Logical key id -> pressed, one entry per bound key
    """
    return {name: bool(pressed[code]) for code, name in KEY_BINDINGS.items()}


class KeyboardInputSource:
    """Polls the keyboard once per frame.

    Call after the frame's pygame events have been pumped, otherwise the
    key state is stale.
    """

    def __init__(self):
        self._keys: Dict[str, bool] = {name: False for name in KEY_BINDINGS.values()}

    def update(self, dt: float) -> None:
        """Sample the current keyboard state."""
        self._keys = keys_from_pressed(pygame.key.get_pressed())

    def poll_keys(self) -> Dict[str, bool]:
        """Key state from the last update()."""
        return dict(self._keys)
