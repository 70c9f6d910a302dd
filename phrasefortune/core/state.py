from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Set


PurchaseKind = Literal["guess", "hint"]

PLACEHOLDER = "_"


@dataclass
class GameState:
    """
    Mutable container for one puzzle session.

    Notes
    -----
    - One instance per session, owned by whoever drives the engine (usually a
      `services.session.GameSession`). It is never shared between sessions.
    - All rule transitions (purchases, guess mode, win/loss) live in
      `core.engine`; this file only defines the data and its normalization.
    - `correct_positions[i]` is either None or equal to `phrase[i]`.
    """

    phrase: str
    category: str = ""
    bankroll: int = 1000
    guesses: int = 2
    guessed_letters: Set[str] = field(default_factory=set)
    correct_positions: List[Optional[str]] = field(default_factory=list)
    current_input: List[str] = field(default_factory=list)
    active_box_index: Optional[int] = None
    is_guess_mode: bool = False
    win_state: bool = False
    loss_state: bool = False
    current_cash_streak: int = 0
    highest_cash_streak: int = 0
    pending_purchase: Optional[PurchaseKind] = None

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `phrase` is lowercased and stripped.
        - `correct_positions` / `current_input` are sized to the phrase when empty.

        Validation
        ----------
        - `phrase` must contain at least one letter and only letters or spaces.
        - `bankroll` and `guesses` must be >= 0.
        - `pending_purchase` must be None, "guess" or "hint".
        """
        phrase = (self.phrase or "").strip().lower()
        if not phrase or not all(c.isalpha() or c == " " for c in phrase):
            raise ValueError("`phrase` must be non-empty and contain only letters and spaces.")
        self.phrase = phrase

        if not self.correct_positions:
            self.correct_positions = [None] * len(phrase)
        if len(self.correct_positions) != len(phrase):
            raise ValueError("`correct_positions` must match the phrase length.")
        if not self.current_input:
            self.current_input = [c if c == " " else PLACEHOLDER for c in phrase]
        if len(self.current_input) != len(phrase):
            raise ValueError("`current_input` must match the phrase length.")

        if self.bankroll < 0:
            raise ValueError("`bankroll` must be >= 0.")
        if self.guesses < 0:
            raise ValueError("`guesses` must be >= 0.")
        if self.pending_purchase not in (None, "guess", "hint"):
            raise ValueError("`pending_purchase` must be one of {None, 'guess', 'hint'}.")

    @property
    def is_over(self) -> bool:
        return self.win_state or self.loss_state

    def is_locked(self, index: int) -> bool:
        return self.correct_positions[index] is not None
