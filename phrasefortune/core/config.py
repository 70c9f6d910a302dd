from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv


# Pricing tiers by English letter frequency: common letters reveal more.
_COMMON = "etaoinsrh"
_MIDDLE = "dlucmfywgp"
_RARE = "bvkjxqz"


def _default_letter_prices() -> Dict[str, int]:
    prices: Dict[str, int] = {}
    prices.update({c: 80 for c in _COMMON})
    prices.update({c: 50 for c in _MIDDLE})
    prices.update({c: 30 for c in _RARE})
    return prices


@dataclass(frozen=True)
class GameConfig:
    """
    Tunable constants for a game session.

    Notes
    -----
    - `letter_prices` keys are normalized to lowercase single characters.
    - Characters missing from the table cost `default_letter_price`.
    - `min_bankroll` is the continuation threshold: with no guesses left and a
      bankroll below it, the session is lost.
    """

    letter_prices: Mapping[str, int] = field(default_factory=_default_letter_prices)
    default_letter_price: int = 50
    guess_price: int = 150
    hint_price: int = 150
    min_bankroll: int = 30
    initial_bankroll: int = 1000
    initial_guesses: int = 2
    default_phrase: str = "hello world"
    default_category: str = "Phrase"

    def __post_init__(self) -> None:
        prices = {}
        for key, value in dict(self.letter_prices).items():
            if not isinstance(key, str) or len(key) != 1:
                raise ValueError(f"Letter price keys must be single characters, got {key!r}.")
            if value < 0:
                raise ValueError(f"Price for {key!r} must be >= 0.")
            prices[key.lower()] = int(value)
        object.__setattr__(self, "letter_prices", prices)

        for name in ("default_letter_price", "guess_price", "hint_price",
                     "min_bankroll", "initial_bankroll", "initial_guesses"):
            if getattr(self, name) < 0:
                raise ValueError(f"`{name}` must be >= 0.")


DEFAULT_CONFIG = GameConfig()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


def _parse_letter_prices(raw: str) -> Dict[str, int]:
    """
    Parse overrides written as ``"e:80,q:30"``.

    Whitespace around entries is ignored; empty entries are skipped.
    """
    prices: Dict[str, int] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        letter, sep, amount = entry.partition(":")
        letter = letter.strip()
        if not sep or len(letter) != 1:
            raise ValueError(f"PF_LETTER_PRICES entry {entry!r} must look like 'e:80'.")
        try:
            prices[letter.lower()] = int(amount.strip())
        except ValueError:
            raise ValueError(f"PF_LETTER_PRICES entry {entry!r} has a non-integer price.") from None
    return prices


def load_config(dotenv_path: Optional[str] = None) -> GameConfig:
    """
    Build a :class:`GameConfig` from the environment (and a `.env` file, if present).

    Existing environment variables win over `.env` values. Unset variables keep
    the dataclass defaults.
    """
    load_dotenv(dotenv_path, override=False)

    prices = _default_letter_prices()
    raw_prices = os.getenv("PF_LETTER_PRICES", "")
    if raw_prices.strip():
        prices.update(_parse_letter_prices(raw_prices))

    return GameConfig(
        letter_prices=prices,
        default_letter_price=_env_int("PF_DEFAULT_LETTER_PRICE", DEFAULT_CONFIG.default_letter_price),
        guess_price=_env_int("PF_GUESS_PRICE", DEFAULT_CONFIG.guess_price),
        hint_price=_env_int("PF_HINT_PRICE", DEFAULT_CONFIG.hint_price),
        min_bankroll=_env_int("PF_MIN_BANKROLL", DEFAULT_CONFIG.min_bankroll),
        initial_bankroll=_env_int("PF_INITIAL_BANKROLL", DEFAULT_CONFIG.initial_bankroll),
        initial_guesses=_env_int("PF_INITIAL_GUESSES", DEFAULT_CONFIG.initial_guesses),
        default_phrase=os.getenv("PF_PHRASE") or DEFAULT_CONFIG.default_phrase,
        default_category=os.getenv("PF_CATEGORY") or DEFAULT_CONFIG.default_category,
    )
