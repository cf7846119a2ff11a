"""One-shot closing sequence shown after the story ends."""
from __future__ import annotations

import logging
from typing import List

from libris.core.types import RestartDecision
from libris.domain.session import SessionFlags

logger = logging.getLogger(__name__)

CREDIT_LINE = "Made with ❤️ by Lucas Pearson for the 2024 CPT-167 Final"
REPLAY_PROMPT = "Would you like to play again? ('yes' or 'no')"
FAREWELL_LINE = "Thank you for playing!"


class EndingResolver:
    """Walks the closing stages forward exactly once each.

    Stages run not_started -> ending_shown -> awaiting_restart -> fully_over;
    repeated calls for a stage already passed return nothing.
    """

    def __init__(self, *, credit_line: str = CREDIT_LINE, replay_prompt: str = REPLAY_PROMPT) -> None:
        self._credit_line = credit_line
        self._replay_prompt = replay_prompt

    def display_ending_message(self, flags: SessionFlags) -> List[str]:
        """Return the credit line and replay prompt the first time only."""
        if not flags.is_game_over:
            logger.debug("Ending message requested before the story ended.")
            return []
        if flags.ending_message_displayed:
            return []
        flags.ending_message_displayed = True
        flags.awaiting_restart_choice = False
        return [self._credit_line, self._replay_prompt]

    def request_restart_choice(self, flags: SessionFlags) -> bool:
        """Open the restart prompt; True only on the call that opened it."""
        if not flags.ending_message_displayed or flags.awaiting_restart_choice or flags.game_fully_over:
            return False
        flags.awaiting_restart_choice = True
        return True

    @staticmethod
    def resolve_restart_choice(flags: SessionFlags, normalized: str) -> RestartDecision:
        """Decide between a fresh playthrough and quitting."""
        if not flags.awaiting_restart_choice:
            raise ValueError("Restart choice resolved before the restart prompt was shown.")
        return "restart" if "yes" in normalized else "quit"

    @staticmethod
    def finish(flags: SessionFlags) -> List[str]:
        """Mark the session fully over and return the farewell once."""
        if flags.game_fully_over:
            return []
        flags.game_fully_over = True
        return [FAREWELL_LINE]
