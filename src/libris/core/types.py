"""Shared type aliases for the core and domain layers."""
from typing import Literal

PathTaken = Literal["", "explore", "call"]
EndingKind = Literal["acceptance", "rejection", "rest", "stay"]
LifecyclePhase = Literal["naming_player", "playing", "ending_shown", "awaiting_restart", "fully_over"]
ClosingStage = Literal["not_started", "ending_shown", "awaiting_restart", "fully_over"]
RestartDecision = Literal["restart", "quit"]

__all__ = ["ClosingStage", "EndingKind", "LifecyclePhase", "PathTaken", "RestartDecision"]
