"""Artifact Clash skins for rendering."""

from .base import ArenaSkin
from .geometric import GeometricSkin
from .viewport import Viewport

__all__ = [
    'ArenaSkin',
    'GeometricSkin',
    'Viewport',
]
