from __future__ import annotations

import logging
import random
from collections import deque
from typing import Callable, Deque, List, Optional

from phrasefortune.core import engine
from phrasefortune.core.config import DEFAULT_CONFIG, GameConfig
from phrasefortune.core.economy import letter_cost
from phrasefortune.core.notices import Notice
from phrasefortune.core.state import GameState, PurchaseKind

logger = logging.getLogger(__name__)

NoticeListener = Callable[[Notice], None]


class GameSession:
    """
    One player's game: a GameState plus everything the engine needs to drive it.

    Every action method forwards to `core.engine`, queues the notices it emits
    and passes them to any registered listeners. Callers read `state` to render
    and call `drain_notices()` to present what happened. A session is meant to
    be used from a single context (one browser session, one request handler...);
    it holds no locks.
    """

    def __init__(
        self,
        phrase: Optional[str] = None,
        category: Optional[str] = None,
        config: GameConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.state: GameState = engine.new_game(phrase, category, config)
        self._notices: Deque[Notice] = deque()
        self._listeners: List[NoticeListener] = []

    # -- notices ------------------------------------------------------------

    def subscribe(self, listener: NoticeListener) -> None:
        self._listeners.append(listener)

    def _emit(self, emitted: List[Notice]) -> List[Notice]:
        for notice in emitted:
            logger.debug("Notice: %s", notice.kind.value)
            self._notices.append(notice)
            for listener in self._listeners:
                listener(notice)
        return emitted

    def drain_notices(self) -> List[Notice]:
        """Return and forget every queued notice, oldest first."""
        drained = list(self._notices)
        self._notices.clear()
        return drained

    # -- pricing ------------------------------------------------------------

    def letter_cost(self, letter: str) -> int:
        return letter_cost(letter, self.config)

    # -- actions ------------------------------------------------------------

    def toggle_guess_mode(self) -> List[Notice]:
        return self._emit(engine.toggle_guess_mode(self.state))

    def fill_active_box(self, letter: str) -> List[Notice]:
        return self._emit(engine.fill_active_box(self.state, letter))

    def delete_active_box(self) -> List[Notice]:
        return self._emit(engine.delete_active_box(self.state))

    def submit_guess(self) -> List[Notice]:
        return self._emit(engine.submit_guess(self.state, self.config))

    def guess_letter(self, letter: str) -> List[Notice]:
        return self._emit(engine.guess_letter(self.state, letter, self.config))

    def request_purchase(self, kind: PurchaseKind) -> List[Notice]:
        return self._emit(engine.request_purchase(self.state, kind))

    def cancel_pending_purchase(self) -> List[Notice]:
        return self._emit(engine.cancel_pending_purchase(self.state))

    def confirm_pending_purchase(self) -> List[Notice]:
        return self._emit(engine.confirm_pending_purchase(self.state, self.config, self.rng))

    def reset_game(self, phrase: Optional[str] = None, category: Optional[str] = None) -> List[Notice]:
        """Start over; streaks carry across, the phrase only changes if one is given."""
        self._notices.clear()
        return self._emit(engine.reset_game(self.state, self.config, phrase, category))


__all__ = ["GameSession", "NoticeListener"]
