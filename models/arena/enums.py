"""
Arena-specific enumerations.

These enums define the teams and artifact kinds shared by the simulation,
the snapshot models and the skins.
"""

from enum import Enum


class Team(str, Enum):
    """The two sides of a match.

    Attributes:
        RED: Left side, scores in the left goal
        BLUE: Right side, scores in the right goal
    """
    RED = "red"
    BLUE = "blue"

    @property
    def label(self) -> str:
        """Upper-case name used in banners ("RED", "BLUE")."""
        return self.value.upper()


class ArtifactType(str, Enum):
    """Kinds of collectible artifacts.

    Attributes:
        PURPLE: Common artifact (5 points)
        GREEN: Rare artifact (10 points)
    """
    PURPLE = "purple"
    GREEN = "green"
