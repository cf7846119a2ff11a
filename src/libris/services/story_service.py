"""Scene graph progression services."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from libris.core.types import EndingKind
from libris.data.repositories import SceneRepository
from libris.data.scenes import START_SCENE_ID
from libris.domain.clues import summarize_clues
from libris.domain.defs import SceneDef, SceneEffectDef
from libris.domain.session import Session
from libris.domain.state import VISITED_SCENE_TAGS, GameState
from libris.services.choice_matcher import match_choice, normalize_input
from libris.services.errors import SessionStateError

logger = logging.getLogger(__name__)

_PATHS = {"explore", "call"}


@dataclass(slots=True)
class SceneView:
    """Data returned to the presentation layer about the active scene."""

    scene_id: str
    prompt: str
    retry_text: str
    keywords: List[str]


@dataclass(slots=True)
class StoryEvent:
    """Base class for story events."""


@dataclass(slots=True)
class ClueFoundEvent(StoryEvent):
    clue_id: str
    total_clues: int


@dataclass(slots=True)
class ItemAcquiredEvent(StoryEvent):
    item_id: str


@dataclass(slots=True)
class ShadowTrustedEvent(StoryEvent):
    total: int


@dataclass(slots=True)
class ShadowAvoidedEvent(StoryEvent):
    total: int


@dataclass(slots=True)
class PathChosenEvent(StoryEvent):
    path: str


@dataclass(slots=True)
class OminousCueEvent(StoryEvent):
    """Marks an ominous moment; the CLI may ring the terminal bell."""


@dataclass(slots=True)
class GameEndedEvent(StoryEvent):
    ending: EndingKind


@dataclass(slots=True)
class Transition:
    """Outcome of applying one line of input to one scene."""

    scene_id: str
    state: GameState
    segments: List[str] = field(default_factory=list)
    events: List[StoryEvent] = field(default_factory=list)
    matched: bool = False
    ending: EndingKind | None = None


@dataclass(slots=True)
class ChoiceResult:
    """Result returned after a session consumed input or entered a scene."""

    segments: List[str] = field(default_factory=list)
    events: List[StoryEvent] = field(default_factory=list)
    matched: bool = False
    ending: EndingKind | None = None


class StoryService:
    """Application service that drives the scene graph."""

    def __init__(
        self,
        scene_repo: SceneRepository | None = None,
        *,
        start_scene_id: str = START_SCENE_ID,
    ) -> None:
        self._scene_repo = scene_repo or SceneRepository()
        self._start_scene_id = start_scene_id

    @property
    def start_scene_id(self) -> str:
        return self._start_scene_id

    def start_story(self, session: Session) -> ChoiceResult:
        """Position the session at the opening scene."""
        return self.play_scene(session, self._start_scene_id)

    def get_current_scene_view(self, session: Session) -> SceneView:
        """Return the view model for the active scene."""
        if session.scene_id is None:
            raise SessionStateError("The story has not started for this session.")
        scene = self._scene_repo.get(session.scene_id)
        return SceneView(
            scene_id=scene.id,
            prompt=scene.prompt,
            retry_text=scene.retry_text or scene.prompt,
            keywords=[keyword for choice in scene.choices for keyword in choice.keywords],
        )

    def transition(self, scene_id: str, state: GameState, player_input: str) -> Transition:
        """Apply input to a scene without touching the caller's state.

        Input that matches none of the scene's keywords leaves the scene and the
        state object as they were and returns the scene's retry text.
        """
        scene = self._scene_repo.get(scene_id)
        normalized = normalize_input(player_input)
        choice = match_choice(normalized, scene.choices)
        if choice is None:
            logger.debug("No choice in scene '%s' matched %r.", scene_id, normalized)
            return Transition(scene_id=scene_id, state=state, segments=[scene.retry_text or scene.prompt])

        next_state = copy.deepcopy(state)
        segments = [self._render_text(text, next_state) for text in choice.narration]
        events, branch_target = self._apply_effects(choice.effects, next_state)
        if choice.ending is not None:
            logger.info("Scene '%s' ended the story with the '%s' ending.", scene_id, choice.ending)
            events.append(GameEndedEvent(ending=choice.ending))
            return Transition(
                scene_id=scene_id,
                state=next_state,
                segments=segments,
                events=events,
                matched=True,
                ending=choice.ending,
            )

        target = branch_target or choice.next_scene_id
        assert target is not None
        entered_id, entered_segments, entered_events = self._enter_scene(next_state, target)
        logger.debug("Scene '%s' -> '%s'.", scene_id, entered_id)
        return Transition(
            scene_id=entered_id,
            state=next_state,
            segments=segments + entered_segments,
            events=events + entered_events,
            matched=True,
        )

    def choose(self, session: Session, player_input: str) -> ChoiceResult:
        """Apply a line of input to the session's active scene."""
        if session.scene_id is None:
            raise SessionStateError("The story has not started for this session.")
        if session.flags.is_game_over:
            logger.warning("Ignoring input after the story ended in scene '%s'.", session.scene_id)
            return ChoiceResult()
        result = self.transition(session.scene_id, session.state, player_input)
        session.state = result.state
        session.scene_id = result.scene_id
        if result.ending is not None:
            session.flags.is_game_over = True
            session.ending = result.ending
        return ChoiceResult(
            segments=result.segments,
            events=result.events,
            matched=result.matched,
            ending=result.ending,
        )

    def play_scene(self, session: Session, scene_id: str) -> ChoiceResult:
        """Force-enter a scene, applying its entry effects to the session."""
        if session.flags.is_game_over:
            logger.warning("Ignoring request to enter '%s' after the story ended.", scene_id)
            return ChoiceResult()
        entered_id, segments, events = self._enter_scene(session.state, scene_id)
        session.scene_id = entered_id
        return ChoiceResult(segments=segments, events=events, matched=True)

    def _enter_scene(self, state: GameState, scene_id: str) -> Tuple[str, List[str], List[StoryEvent]]:
        """Move to the given scene, following branches and auto-advance links."""
        segments: List[str] = []
        events: List[StoryEvent] = []
        current_id = scene_id
        while True:
            scene = self._scene_repo.get(current_id)
            block = self._compose_block(scene, state)
            if block:
                segments.append(block)
            scene_events, branch_target = self._apply_effects(scene.effects, state)
            events.extend(scene_events)
            if branch_target is not None:
                current_id = branch_target
                continue
            if scene.choices or not scene.next_scene_id:
                return current_id, segments, events
            current_id = scene.next_scene_id

    def _compose_block(self, scene: SceneDef, state: GameState) -> str:
        parts = [self._render_text(scene.text, state), scene.prompt]
        return "\n\n".join(part for part in parts if part)

    @staticmethod
    def _render_text(text: str, state: GameState) -> str:
        if "{" not in text:
            return text
        values = {"player_name": state.player_name, "clue_summary": ""}
        if "{clue_summary}" in text:
            values["clue_summary"] = summarize_clues(state.clues_found)
        return text.format_map(values)

    def _apply_effects(
        self, effects: Sequence[SceneEffectDef], state: GameState
    ) -> tuple[List[StoryEvent], str | None]:
        emitted: List[StoryEvent] = []
        branch_target: str | None = None
        for effect in effects:
            effect_type = effect.type
            if effect_type == "add_clue":
                clue_id = self._require_str(effect.data.get("clue_id"), "add_clue.clue_id")
                state.clues_found.append(clue_id)
                emitted.append(ClueFoundEvent(clue_id=clue_id, total_clues=len(state.clues_found)))
            elif effect_type == "add_item":
                item_id = self._require_str(effect.data.get("item_id"), "add_item.item_id")
                if item_id not in state.inventory:
                    state.inventory.append(item_id)
                    emitted.append(ItemAcquiredEvent(item_id=item_id))
            elif effect_type == "trust_shadow":
                state.trusted_shadows += 1
                emitted.append(ShadowTrustedEvent(total=state.trusted_shadows))
            elif effect_type == "avoid_shadow":
                state.avoided_shadows += 1
                emitted.append(ShadowAvoidedEvent(total=state.avoided_shadows))
            elif effect_type == "set_path":
                path = self._require_str(effect.data.get("path"), "set_path.path")
                if path not in _PATHS:
                    raise ValueError(f"set_path.path must be one of {sorted(_PATHS)}.")
                state.path_taken = path  # type: ignore[assignment]
                emitted.append(PathChosenEvent(path=path))
            elif effect_type == "mark_visited":
                tag = self._require_str(effect.data.get("scene_tag"), "mark_visited.scene_tag")
                if tag not in VISITED_SCENE_TAGS:
                    raise ValueError(f"mark_visited.scene_tag '{tag}' is not a tracked scene.")
                state.visited_scenes[tag] = True
            elif effect_type == "ominous_cue":
                emitted.append(OminousCueEvent())
            elif effect_type == "branch_on_clue_count":
                threshold = self._require_int(effect.data.get("threshold"), "branch_on_clue_count.threshold")
                next_on_true = self._require_str(effect.data.get("next_on_true"), "branch_on_clue_count.next_on_true")
                next_on_false = self._require_str(
                    effect.data.get("next_on_false"), "branch_on_clue_count.next_on_false"
                )
                count = len(state.clues_found)
                branch_target = next_on_true if count >= threshold else next_on_false
                logger.debug("Clue gate: %d found, threshold %d -> '%s'.", count, threshold, branch_target)
            else:
                # Unknown effects are ignored to keep the interpreter forward compatible.
                logger.debug("Ignoring unknown effect type '%s'.", effect_type)
        return emitted, branch_target

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if not isinstance(value, int):
            raise ValueError(f"{context} must be an integer.")
        return value
