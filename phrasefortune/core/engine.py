from __future__ import annotations

import logging
import random
from dataclasses import fields
from typing import List, Optional

from phrasefortune.services.hints import pick_hint_letter

from . import notices
from .config import DEFAULT_CONFIG, GameConfig
from .economy import can_afford, letter_cost
from .notices import Notice
from .state import PLACEHOLDER, GameState, PurchaseKind

logger = logging.getLogger(__name__)


def new_game(
    phrase: Optional[str] = None,
    category: Optional[str] = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """
    Create a fresh GameState for `phrase` (or the configured default phrase).

    Parameters
    ----------
    phrase : str | None
        Target phrase (letters and spaces). Choosing it is the caller's job.
    category : str | None
        Display label; defaults to `config.default_category`.
    config : GameConfig
        Supplies the starting bankroll and guesses.
    """
    return GameState(
        phrase=phrase if phrase is not None else config.default_phrase,
        category=category if category is not None else config.default_category,
        bankroll=config.initial_bankroll,
        guesses=config.initial_guesses,
    )


def mask_phrase(state: GameState) -> str:
    """
    Return a display mask of the phrase, e.g. 'h _ l l o   w _ r l d'.

    Locked positions show their letter, spaces stay spaces, the rest are underscores.
    """
    return " ".join(
        ch if ch == " " or state.is_locked(i) else PLACEHOLDER
        for i, ch in enumerate(state.phrase)
    )


def _is_letter(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and value.isalpha()


def _rebuild_input(state: GameState) -> None:
    state.current_input = [
        ch if ch == " " or state.is_locked(i) else PLACEHOLDER
        for i, ch in enumerate(state.phrase)
    ]


def _lock_letter(state: GameState, letter: str) -> None:
    for i, ch in enumerate(state.phrase):
        if ch == letter:
            state.correct_positions[i] = ch


def _all_revealed(state: GameState) -> bool:
    return all(ch == " " or state.is_locked(i) for i, ch in enumerate(state.phrase))


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

def trigger_win(state: GameState) -> List[Notice]:
    """Mark the session won, bump the streak and record the bankroll high-water mark."""
    state.win_state = True
    state.current_cash_streak += 1
    state.highest_cash_streak = max(state.highest_cash_streak, state.bankroll)
    logger.info("Phrase solved with bankroll %s (streak %s)", state.bankroll, state.current_cash_streak)
    return [notices.win()]


def trigger_loss(state: GameState) -> List[Notice]:
    state.loss_state = True
    logger.info("Session lost: guesses=%s bankroll=%s", state.guesses, state.bankroll)
    return [notices.loss()]


def check_loss_condition(state: GameState, config: GameConfig = DEFAULT_CONFIG) -> List[Notice]:
    """Lose when no guesses remain and the bankroll is below `config.min_bankroll`."""
    if state.guesses == 0 and state.bankroll < config.min_bankroll:
        return trigger_loss(state)
    return []


def _evaluate_after_reveal(state: GameState, config: GameConfig) -> List[Notice]:
    if _all_revealed(state):
        return trigger_win(state)
    return check_loss_condition(state, config)


# ---------------------------------------------------------------------------
# Guess mode
# ---------------------------------------------------------------------------

def toggle_guess_mode(state: GameState) -> List[Notice]:
    """
    Enter or leave guess mode.

    Behavior
    --------
    - Blocked with an insufficient-guesses notice when `guesses == 0`.
    - On entry the input buffer is rebuilt from the locked positions and the
      cursor moves to the first placeholder (None if every box is filled).
    - On exit the cursor is cleared; the buffer is left as is.
    """
    if state.guesses == 0:
        logger.debug("Guess mode blocked: no guesses left")
        return [notices.insufficient_guesses()]

    state.is_guess_mode = not state.is_guess_mode
    if state.is_guess_mode:
        _rebuild_input(state)
        state.active_box_index = next(
            (i for i, ch in enumerate(state.current_input) if ch == PLACEHOLDER), None
        )
    else:
        state.active_box_index = None
    logger.debug("Guess mode %s", "on" if state.is_guess_mode else "off")
    return []


def fill_active_box(state: GameState, letter: str) -> List[Notice]:
    """
    Type `letter` into the active box and advance the cursor.

    The cursor moves to the next later box that is not a space and still holds a
    placeholder. If there is none it stays put; the caller decides when the
    buffer is complete. Non-letter input is ignored.
    """
    if not state.is_guess_mode or state.active_box_index is None:
        return []
    if not _is_letter(letter):
        return []

    idx = state.active_box_index
    if not state.is_locked(idx):
        state.current_input[idx] = letter.lower()
        state.active_box_index = next(
            (
                i
                for i in range(idx + 1, len(state.phrase))
                if state.phrase[i] != " " and state.current_input[i] == PLACEHOLDER
            ),
            idx,
        )
    return []


def delete_active_box(state: GameState) -> List[Notice]:
    """Clear the active box (unless locked) and step back to the previous open box."""
    if not state.is_guess_mode or state.active_box_index is None:
        return []

    idx = state.active_box_index
    if not state.is_locked(idx):
        state.current_input[idx] = PLACEHOLDER
    state.active_box_index = next(
        (
            i
            for i in range(idx - 1, -1, -1)
            if state.phrase[i] != " " and not state.is_locked(i)
        ),
        idx,
    )
    return []


def submit_guess(state: GameState, config: GameConfig = DEFAULT_CONFIG) -> List[Notice]:
    """
    Score the guess-mode buffer against the phrase.

    Behavior
    --------
    - Every matching position is locked; locked positions are never unlocked.
    - A fully matching buffer wins. Otherwise one guess is spent (if any remain)
      and the loss condition is evaluated.
    - Guess mode always ends, whatever the outcome.
    """
    if not state.is_guess_mode:
        return []

    for i, ch in enumerate(state.phrase):
        if state.current_input[i] == ch:
            state.correct_positions[i] = ch
    _rebuild_input(state)

    if "".join(state.current_input) == state.phrase:
        emitted = trigger_win(state)
    else:
        if state.guesses > 0:
            state.guesses -= 1
        logger.debug("Wrong guess; %s guesses left", state.guesses)
        emitted = check_loss_condition(state, config)

    state.is_guess_mode = False
    state.active_box_index = None
    return emitted


# ---------------------------------------------------------------------------
# Purchases
# ---------------------------------------------------------------------------

def guess_letter(state: GameState, letter: str, config: GameConfig = DEFAULT_CONFIG) -> List[Notice]:
    """
    Buy `letter`: pay its price and reveal every occurrence.

    Repeated or invalid letters are silent no-ops. An unaffordable letter emits an
    insufficient-bankroll notice and changes nothing.
    """
    if not _is_letter(letter):
        return []
    letter = letter.lower()
    if letter in state.guessed_letters:
        return []

    cost = letter_cost(letter, config)
    if not can_afford(state.bankroll, cost):
        logger.info("Letter %r blocked: costs %s, bankroll %s", letter, cost, state.bankroll)
        return [notices.insufficient_bankroll("guess this letter")]
    return _process_letter_purchase(state, letter, cost, config)


def _process_letter_purchase(state: GameState, letter: str, cost: int, config: GameConfig) -> List[Notice]:
    state.guessed_letters.add(letter)
    state.bankroll -= cost
    _lock_letter(state, letter)
    logger.debug("Bought %r for %s; bankroll now %s", letter, cost, state.bankroll)
    return _evaluate_after_reveal(state, config)


def request_purchase(state: GameState, kind: PurchaseKind) -> List[Notice]:
    """Record a guess or hint purchase awaiting the player's confirmation."""
    if kind not in ("guess", "hint"):
        raise ValueError(f"Unknown purchase kind: {kind!r}")
    state.pending_purchase = kind
    return []


def cancel_pending_purchase(state: GameState) -> List[Notice]:
    state.pending_purchase = None
    return []


def confirm_pending_purchase(
    state: GameState,
    config: GameConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> List[Notice]:
    """
    Carry out the pending purchase, then clear it (even when it fails).

    - "guess": pay `config.guess_price` for one extra guess.
    - "hint": pay `config.hint_price` to reveal one random eligible letter. The
      price is charged even when no letter is left to reveal.
    """
    emitted: List[Notice] = []
    kind = state.pending_purchase

    if kind == "guess":
        if can_afford(state.bankroll, config.guess_price):
            state.bankroll -= config.guess_price
            state.guesses += 1
            logger.debug("Bought a guess; %s guesses, bankroll %s", state.guesses, state.bankroll)
        else:
            logger.info("Guess purchase blocked: bankroll %s", state.bankroll)
            emitted.append(notices.insufficient_bankroll("purchase a guess"))
    elif kind == "hint":
        if can_afford(state.bankroll, config.hint_price):
            state.bankroll -= config.hint_price
            letter = pick_hint_letter(state, rng or random.Random())
            if letter is not None:
                _lock_letter(state, letter)
                state.guessed_letters.add(letter)
                logger.debug("Hint revealed %r; bankroll %s", letter, state.bankroll)
                emitted.extend(_evaluate_after_reveal(state, config))
            else:
                logger.info("Hint charged with no letter left to reveal")
                emitted.extend(check_loss_condition(state, config))
        else:
            logger.info("Hint purchase blocked: bankroll %s", state.bankroll)
            emitted.append(notices.insufficient_bankroll("purchase a hint"))

    state.pending_purchase = None
    return emitted


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

_KEPT_ON_RESET = ("current_cash_streak", "highest_cash_streak")


def reset_game(
    state: GameState,
    config: GameConfig = DEFAULT_CONFIG,
    phrase: Optional[str] = None,
    category: Optional[str] = None,
) -> List[Notice]:
    """
    Return every mutable field to its starting value.

    Streak counters survive a reset. The phrase and category are kept unless the
    caller supplies replacements.
    """
    fresh = new_game(
        phrase if phrase is not None else state.phrase,
        category if category is not None else state.category,
        config,
    )
    for f in fields(GameState):
        if f.name not in _KEPT_ON_RESET:
            setattr(state, f.name, getattr(fresh, f.name))
    logger.debug("Game reset (phrase length %s)", len(state.phrase))
    return []
