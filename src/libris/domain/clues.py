"""Clue identifiers and the phrases used to summarize them."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

logger = logging.getLogger(__name__)

# Number of clues (duplicates included) needed to reach the revelation.
CLUE_THRESHOLD = 3

ANCIENT_KEY = "ancientKey"
GLOWING_ORB = "glowingOrb"
FORBIDDEN_KNOWLEDGE = "forbiddenKnowledge"
PERSONAL_ARTIFACTS = "personalArtifacts"
MIRROR_ROOM = "mirrorRoom"
MIRROR_MEMORY = "mirrorMemory"
PERSONAL_JOURNAL = "personalJournal"
MEMORY_RESTORATION = "memoryRestoration"
SANCTUARY = "sanctuary"
HIDDEN_ARTIFACTS = "hiddenArtifacts"
ARTIFACT_MEMORIES = "artifactMemories"
DEEPER_MEMORIES = "deeperMemories"
SYMBOL_MEMORIES = "symbolMemories"
DEEPER_SYMBOL_MEMORIES = "deeperSymbolMemories"
PORTRAIT_MEMORIES = "portraitMemories"
DEEPER_PORTRAIT_MEMORIES = "deeperPortraitMemories"
MIRROR_RECOLLECTIONS = "mirrorRecollections"
PERSONAL_HISTORY = "personalHistory"
MUSICAL_MEMORIES = "musicalMemories"

CLUE_DESCRIPTIONS: Mapping[str, str] = {
    ANCIENT_KEY: "the ancient key",
    GLOWING_ORB: "the glowing orb",
    FORBIDDEN_KNOWLEDGE: "forbidden knowledge",
    PERSONAL_ARTIFACTS: "personal artifacts",
    MIRROR_ROOM: "the reflections in the mirror room",
    MIRROR_MEMORY: "a memory from the mirror",
    PERSONAL_JOURNAL: "your personal journal",
    MEMORY_RESTORATION: "restored memories",
    SANCTUARY: "the sanctuary",
    HIDDEN_ARTIFACTS: "the hidden artifacts",
    ARTIFACT_MEMORIES: "the memories held by the music box",
    DEEPER_MEMORIES: "a memory behind the glass",
    SYMBOL_MEMORIES: "the symbols on the door",
    DEEPER_SYMBOL_MEMORIES: "the meaning of the symbols",
    PORTRAIT_MEMORIES: "the faces in the portraits",
    DEEPER_PORTRAIT_MEMORIES: "the portrait of someone dear",
    MIRROR_RECOLLECTIONS: "recollections in the mirrors",
    PERSONAL_HISTORY: "the card bearing your history",
    MUSICAL_MEMORIES: "a half-remembered song",
}


def describe_clues(clue_ids: Iterable[str], descriptions: Mapping[str, str] = CLUE_DESCRIPTIONS) -> list[str]:
    """Return one phrase per distinct clue, in discovery order.

    Clues without a description are left out of the summary.
    """
    phrases: list[str] = []
    seen: set[str] = set()
    for clue_id in clue_ids:
        if clue_id in seen:
            continue
        seen.add(clue_id)
        phrase = descriptions.get(clue_id)
        if phrase is None:
            logger.warning("No description for clue '%s'; leaving it out of the summary.", clue_id)
            continue
        phrases.append(phrase)
    return phrases


def summarize_clues(clue_ids: Iterable[str]) -> str:
    """Join the clue phrases for use inside narration."""
    return ", ".join(describe_clues(clue_ids))
