"""HUD helpers: timer text, inventory slots and the message banner.

Pure presentation logic with no pygame dependency, so the skin stays a
thin drawing layer.
"""

from typing import List, Optional, Union

from models.arena import ArtifactType, RobotView

from ..config import MAX_INVENTORY, MESSAGE_DURATION
from .entities.robot import Robot


def format_time(seconds: int) -> str:
    """Format remaining seconds as m:ss (negative values show 0:00)."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def inventory_slots(robot: Union[Robot, RobotView]) -> List[Optional[ArtifactType]]:
    """Inventory as a fixed row of slots, oldest first, empty slots None."""
    held = robot.inventory
    types = [getattr(item, 'type', item) for item in held]
    return types + [None] * (MAX_INVENTORY - len(types))


class MessageBanner:
    """Centre-screen message with optional timed auto-hide.

    The auto-hide deadline only hides the banner if the match is still
    running when it passes, so an end-of-match message shown inside the
    window stays up. The deadline is consumed either way.
    """

    def __init__(self, duration: float = MESSAGE_DURATION):
        self.duration = duration
        self.text: str = ""
        self.visible = False
        self._hide_at: Optional[float] = None

    def show(self, text: str, now: float, auto_hide: bool = False) -> None:
        """Show text; with auto_hide it disappears `duration` seconds from now."""
        self.text = text
        self.visible = True
        self._hide_at = now + self.duration if auto_hide else None

    def hide(self) -> None:
        self.visible = False
        self._hide_at = None

    def update(self, now: float, running: bool) -> None:
        """Fire the auto-hide deadline if it has passed."""
        if self._hide_at is None or now < self._hide_at:
            return
        self._hide_at = None
        if running:
            self.visible = False

    @property
    def pending(self) -> bool:
        """An auto-hide deadline is still armed."""
        return self._hide_at is not None
