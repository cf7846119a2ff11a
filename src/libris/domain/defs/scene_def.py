"""Scene definition structures used by the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from libris.core.types import EndingKind


@dataclass(slots=True)
class SceneEffectDef:
    """Single effect entry attached to a scene or choice."""

    type: str
    data: Dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class SceneChoiceDef:
    """A recognized answer to a scene's prompt.

    Exactly one of ``next_scene_id`` and ``ending`` is set.
    """

    keywords: Tuple[str, ...]
    narration: List[str] = field(default_factory=list)
    effects: List[SceneEffectDef] = field(default_factory=list)
    next_scene_id: str | None = None
    ending: EndingKind | None = None


@dataclass(slots=True)
class SceneDef:
    """Fully described scene."""

    id: str
    text: str = ""
    prompt: str = ""
    retry_text: str = ""
    effects: List[SceneEffectDef] = field(default_factory=list)
    choices: List[SceneChoiceDef] = field(default_factory=list)
    next_scene_id: str | None = None
