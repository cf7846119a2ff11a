"""Service layer exports."""

from .errors import SessionStateError
from .story_service import (
    ChoiceResult,
    ClueFoundEvent,
    GameEndedEvent,
    ItemAcquiredEvent,
    OminousCueEvent,
    PathChosenEvent,
    SceneView,
    ShadowAvoidedEvent,
    ShadowTrustedEvent,
    StoryEvent,
    StoryService,
    Transition,
)
from .ending_resolver import EndingResolver
from .session_controller import SessionController, Turn

__all__ = [
    "SessionStateError",
    "ChoiceResult",
    "ClueFoundEvent",
    "GameEndedEvent",
    "ItemAcquiredEvent",
    "OminousCueEvent",
    "PathChosenEvent",
    "SceneView",
    "ShadowAvoidedEvent",
    "ShadowTrustedEvent",
    "StoryEvent",
    "StoryService",
    "Transition",
    "EndingResolver",
    "SessionController",
    "Turn",
]
