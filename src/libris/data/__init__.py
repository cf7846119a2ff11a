"""Data layer: the hand-authored scene graph and its repository."""

from .errors import DataError, DataValidationError
from .scenes import ENDING_GATE_SCENE_ID, START_SCENE_ID, build_scenes

__all__ = [
    "DataError",
    "DataValidationError",
    "ENDING_GATE_SCENE_ID",
    "START_SCENE_ID",
    "build_scenes",
]
