"""Scene definitions for the multiplication quiz."""

from .configure import ConfigureScene
from .play import PlayScene
from .score import ScoreScene

__all__ = [
    "ConfigureScene",
    "PlayScene",
    "ScoreScene",
]
