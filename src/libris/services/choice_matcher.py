"""Free-text answer matching shared by every scene."""
from __future__ import annotations

from typing import Sequence

from libris.domain.defs import SceneChoiceDef


def normalize_input(raw: str) -> str:
    """Trim and lower-case a line of player input."""
    return raw.strip().lower()


def match_choice(normalized: str, choices: Sequence[SceneChoiceDef]) -> SceneChoiceDef | None:
    """Return the first choice with a keyword contained in the input.

    Choices are tested in order, so an answer naming two options resolves to
    whichever is listed first.
    """
    for choice in choices:
        for keyword in choice.keywords:
            if keyword in normalized:
                return choice
    return None
