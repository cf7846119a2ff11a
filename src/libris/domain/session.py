"""Session-scoped records owned by the lifecycle controller."""
from __future__ import annotations

from dataclasses import dataclass, field

from libris.core.types import ClosingStage, EndingKind, LifecyclePhase
from libris.domain.state import GameState, new_game_state


@dataclass(slots=True)
class SessionFlags:
    """One-shot flags gating the flow after an ending is reached."""

    is_game_over: bool = False
    ending_message_displayed: bool = False
    awaiting_restart_choice: bool = False
    game_fully_over: bool = False

    @property
    def closing_stage(self) -> ClosingStage:
        if self.game_fully_over:
            return "fully_over"
        if self.awaiting_restart_choice:
            return "awaiting_restart"
        if self.ending_message_displayed:
            return "ending_shown"
        return "not_started"


@dataclass(slots=True)
class Session:
    """A single player's session, passed explicitly into every service call."""

    state: GameState = field(default_factory=new_game_state)
    flags: SessionFlags = field(default_factory=SessionFlags)
    phase: LifecyclePhase = "naming_player"
    scene_id: str | None = None
    ending: EndingKind | None = None

    def reset(self) -> None:
        """Discard the playthrough and return to name entry."""
        self.state = new_game_state()
        self.flags = SessionFlags()
        self.phase = "naming_player"
        self.scene_id = None
        self.ending = None
