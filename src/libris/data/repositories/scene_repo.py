"""Repository for scene definitions."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from libris.data.errors import DataValidationError
from libris.data.repositories.base import RepositoryBase
from libris.data.scenes import build_scenes
from libris.domain.defs import SceneChoiceDef, SceneDef

_ENDING_KINDS = {"acceptance", "rejection", "rest", "stay"}


class SceneRepository(RepositoryBase[SceneDef]):
    """Serves scenes and validates their structure on first access."""

    def __init__(self, scene_source: Callable[[], Iterable[SceneDef]] = build_scenes) -> None:
        super().__init__()
        self._scene_source = scene_source

    def _load_raw(self) -> List[SceneDef]:
        return list(self._scene_source())

    def _build(self, raw: Iterable[SceneDef]) -> Dict[str, SceneDef]:
        scenes: Dict[str, SceneDef] = {}
        for scene in raw:
            scene_id = self._require_str(scene.id, "scene id")
            if scene_id in scenes:
                raise DataValidationError(f"Duplicate scene id '{scene_id}'.")
            for index, choice in enumerate(scene.choices):
                self._validate_choice(choice, f"scene '{scene_id}' choices[{index}]")
            if scene.choices and scene.next_scene_id:
                raise DataValidationError(f"scene '{scene_id}' cannot have both choices and a next scene.")
            if scene.choices and not scene.prompt:
                raise DataValidationError(f"scene '{scene_id}' has choices but no prompt.")
            scenes[scene_id] = scene
        return scenes

    def _validate_choice(self, choice: SceneChoiceDef, context: str) -> None:
        if not choice.keywords:
            raise DataValidationError(f"{context} must list at least one keyword.")
        for keyword in choice.keywords:
            self._require_str(keyword, f"{context} keyword")
            if keyword != keyword.strip().lower():
                raise DataValidationError(f"{context} keyword '{keyword}' must be trimmed and lower-case.")
        if (choice.next_scene_id is None) == (choice.ending is None):
            raise DataValidationError(f"{context} must set exactly one of next_scene_id and ending.")
        if choice.ending is not None and choice.ending not in _ENDING_KINDS:
            raise DataValidationError(f"{context} has unknown ending '{choice.ending}'.")
