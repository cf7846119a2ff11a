"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from libris.core.types import PathTaken

VISITED_SCENE_TAGS = (
    "aisle",
    "orbRoom",
    "mirrors",
    "sanctuary",
    "journalFound",
    "shadowEncountered",
)


def _unvisited_scenes() -> Dict[str, bool]:
    return {tag: False for tag in VISITED_SCENE_TAGS}


@dataclass
class GameState:
    """Everything the story remembers about one playthrough."""

    player_name: str = ""
    clues_found: List[str] = field(default_factory=list)
    inventory: List[str] = field(default_factory=list)
    trusted_shadows: int = 0
    avoided_shadows: int = 0
    path_taken: PathTaken = ""
    visited_scenes: Dict[str, bool] = field(default_factory=_unvisited_scenes)


def new_game_state() -> GameState:
    """Return the initial state used for new sessions and restarts."""
    return GameState()
