from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NoticeKind(str, Enum):
    """User-facing outcomes an operation can report."""

    INSUFFICIENT_GUESSES = "insufficient_guesses"
    INSUFFICIENT_BANKROLL = "insufficient_bankroll"
    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True)
class Notice:
    """A discrete event for the caller to present (alert, toast, banner...)."""

    kind: NoticeKind
    message: str


def insufficient_guesses() -> Notice:
    return Notice(NoticeKind.INSUFFICIENT_GUESSES,
                  "You need at least one guess remaining to enter Guess Mode!")


def insufficient_bankroll(what: str) -> Notice:
    return Notice(NoticeKind.INSUFFICIENT_BANKROLL, f"Insufficient bankroll to {what}!")


def win() -> Notice:
    return Notice(NoticeKind.WIN, "Congratulations! You've guessed the phrase!")


def loss() -> Notice:
    return Notice(NoticeKind.LOSS, "Game Over. You've run out of resources to continue!")
