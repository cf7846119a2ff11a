"""Repository exports."""

from .scene_repo import SceneRepository

__all__ = ["SceneRepository"]
