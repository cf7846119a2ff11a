"""Domain definition exports."""

from .scene_def import SceneChoiceDef, SceneDef, SceneEffectDef

__all__ = [
    "SceneChoiceDef",
    "SceneDef",
    "SceneEffectDef",
]
