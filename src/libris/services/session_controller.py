"""Session lifecycle: name entry, play, ending, and replay."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from libris.core.types import LifecyclePhase
from libris.domain.session import Session
from libris.services.choice_matcher import normalize_input
from libris.services.ending_resolver import EndingResolver
from libris.services.story_service import StoryEvent, StoryService

logger = logging.getLogger(__name__)

NAME_PROMPT = "What is your name?"
INVALID_NAME_MESSAGE = "Please enter a valid name."
CHOICE_PROMPT = "> "


@dataclass(slots=True)
class Turn:
    """Text blocks to present after one controller step, plus story events."""

    segments: List[str] = field(default_factory=list)
    events: List[StoryEvent] = field(default_factory=list)


class SessionController:
    """Sequences a session through its lifecycle phases.

    naming_player -> playing -> ending_shown -> awaiting_restart, then either
    back to naming_player with a fresh state or on to fully_over, which ignores
    everything that follows.
    """

    def __init__(
        self,
        story_service: StoryService | None = None,
        ending_resolver: EndingResolver | None = None,
        session: Session | None = None,
    ) -> None:
        self._story_service = story_service or StoryService()
        self._ending_resolver = ending_resolver or EndingResolver()
        self._session = session or Session()

    @property
    def session(self) -> Session:
        return self._session

    @property
    def phase(self) -> LifecyclePhase:
        return self._session.phase

    @property
    def is_over(self) -> bool:
        return self._session.phase == "fully_over"

    @property
    def expects_input(self) -> bool:
        """True when the next step is a line of player input."""
        phase = self._session.phase
        if phase in ("naming_player", "awaiting_restart"):
            return True
        return phase == "playing" and not self._session.flags.is_game_over

    @property
    def input_prompt(self) -> str:
        if self._session.phase == "naming_player":
            return NAME_PROMPT
        return CHOICE_PROMPT

    def start(self) -> Turn:
        """Begin a new session at name entry."""
        if self.is_over:
            logger.info("Session already finished; not starting again.")
            return Turn()
        self._session.reset()
        return Turn()

    def submit(self, raw_input: str) -> Turn:
        """Feed one line of input to whichever phase is waiting for it."""
        phase = self._session.phase
        if phase == "naming_player":
            return self._submit_name(raw_input)
        if phase == "playing":
            if self._session.flags.is_game_over:
                logger.warning("Input received after the story ended; waiting for advance().")
                return Turn()
            result = self._story_service.choose(self._session, raw_input)
            return Turn(segments=result.segments, events=result.events)
        if phase == "awaiting_restart":
            return self._submit_restart(raw_input)
        logger.warning("Ignoring input while the session is in phase '%s'.", phase)
        return Turn()

    def advance(self) -> Turn:
        """Step the closing sequence forward when no input is expected."""
        session = self._session
        if session.phase == "playing" and session.flags.is_game_over:
            segments = self._ending_resolver.display_ending_message(session.flags)
            session.phase = "ending_shown"
            return Turn(segments=segments)
        if session.phase == "ending_shown":
            if self._ending_resolver.request_restart_choice(session.flags):
                session.phase = "awaiting_restart"
            return Turn()
        if session.phase == "fully_over":
            logger.info("Session is fully over; ignoring advance().")
        return Turn()

    def _submit_name(self, raw_input: str) -> Turn:
        name = raw_input.strip()
        if not name:
            return Turn(segments=[INVALID_NAME_MESSAGE])
        self._session.state.player_name = name
        self._session.phase = "playing"
        logger.info("Starting story for '%s'.", name)
        result = self._story_service.start_story(self._session)
        return Turn(segments=result.segments, events=result.events)

    def _submit_restart(self, raw_input: str) -> Turn:
        flags = self._session.flags
        decision = self._ending_resolver.resolve_restart_choice(flags, normalize_input(raw_input))
        if decision == "restart":
            logger.info("Restarting with a fresh game state.")
            self._session.reset()
            return Turn()
        segments = self._ending_resolver.finish(flags)
        self._session.phase = "fully_over"
        return Turn(segments=segments)
