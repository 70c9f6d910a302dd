from __future__ import annotations

from .config import DEFAULT_CONFIG, GameConfig


def letter_cost(letter: str, config: GameConfig = DEFAULT_CONFIG) -> int:
    """
    Return the price of revealing `letter`.

    Depends only on the letter (case-insensitive) and the pricing table, never on
    game state. Characters absent from the table cost `config.default_letter_price`.
    """
    return config.letter_prices.get(letter.lower(), config.default_letter_price)


def can_afford(bankroll: int, price: int) -> bool:
    """True when `bankroll` covers `price` without going negative."""
    return bankroll >= price


def format_bankroll(amount: float) -> str:
    """Render a currency amount for display, e.g. ``$1000.00``."""
    return f"${amount:.2f}"


__all__ = ["letter_cost", "can_afford", "format_bankroll"]
