"""
Shared pytest fixtures for PhraseFortune tests.

This module provides:
- make_session: factory for GameSession with a seeded RNG and config overrides
- clean_env: removes PF_* variables so config tests start from defaults
"""

from __future__ import annotations

import os
import random
from typing import Callable, Optional

import pytest

from phrasefortune.core.config import GameConfig
from phrasefortune.services.session import GameSession


@pytest.fixture
def make_session() -> Callable[..., GameSession]:
    """Factory: make_session("cat", initial_bankroll=10) -> GameSession."""

    def _create(phrase: str = "cat", category: Optional[str] = "Animal", seed: int = 1234, **overrides) -> GameSession:
        return GameSession(
            phrase=phrase,
            category=category,
            config=GameConfig(**overrides),
            rng=random.Random(seed),
        )

    return _create


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.startswith("PF_"):
            monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    # load_dotenv writes straight into os.environ; drop whatever it added.
    for name in list(os.environ):
        if name.startswith("PF_"):
            del os.environ[name]
