"""Artifact Clash - Game Info.

Factory used by launchers and tests to build the game without importing
pygame display code up front.
"""


def get_game_mode(**kwargs):
    """Factory function to create an Artifact Clash game instance.

    Args:
        **kwargs: Game configuration options (from CLI)

    Returns:
        ArtifactClashMode instance
    """
    from games.ArtifactClash.game_mode import ArtifactClashMode
    return ArtifactClashMode(**kwargs)
