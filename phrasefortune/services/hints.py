from __future__ import annotations

import random
from typing import List, Optional

from phrasefortune.core.state import GameState


def eligible_hint_letters(state: GameState) -> List[str]:
    """
    Distinct phrase letters a hint may reveal, in sorted order.

    A letter is eligible when it sits at an unlocked, non-space position and has
    not been purchased or revealed before. Sorting keeps the candidate order
    independent of set iteration order, so a seeded RNG always picks the same one.
    """
    letters = {
        ch
        for i, ch in enumerate(state.phrase)
        if ch != " " and not state.is_locked(i) and ch not in state.guessed_letters
    }
    return sorted(letters)


def pick_hint_letter(state: GameState, rng: random.Random) -> Optional[str]:
    """Choose one eligible letter uniformly at random, or None if none remain."""
    candidates = eligible_hint_letters(state)
    if not candidates:
        return None
    return rng.choice(candidates)


__all__ = ["eligible_hint_letters", "pick_hint_letter"]
