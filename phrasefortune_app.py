from __future__ import annotations

import logging
import os
import string
from typing import List, Tuple

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from phrasefortune.core.config import GameConfig, load_config
from phrasefortune.core.economy import format_bankroll
from phrasefortune.core.engine import mask_phrase
from phrasefortune.core.notices import Notice, NoticeKind
from phrasefortune.services.session import GameSession

logging.basicConfig(level=os.getenv("PF_LOG_LEVEL", "WARNING").upper())


# =======================================
# Presentation helpers (no Streamlit calls)
# =======================================

# Streamlit alert function used for each notice kind.
_NOTICE_STYLES = {
    NoticeKind.WIN: "success",
    NoticeKind.LOSS: "error",
    NoticeKind.INSUFFICIENT_BANKROLL: "warning",
    NoticeKind.INSUFFICIENT_GUESSES: "warning",
}


def notice_style(notice: Notice) -> str:
    return _NOTICE_STYLES.get(notice.kind, "info")


def letter_board(session: GameSession) -> List[Tuple[str, str, bool]]:
    """
    Rows for the letter-purchase grid: (letter, button label, disabled).

    Letters already bought or revealed are disabled, as is everything once the
    game is over or while guess mode is active.
    """
    state = session.state
    locked_out = state.is_over or state.is_guess_mode
    rows = []
    for letter in string.ascii_lowercase:
        label = f"{letter.upper()} · ${session.letter_cost(letter)}"
        rows.append((letter, label, locked_out or letter in state.guessed_letters))
    return rows


def guess_boxes(session: GameSession) -> str:
    """Render the guess-mode buffer with the active box bracketed."""
    state = session.state
    cells = []
    for i, ch in enumerate(state.current_input):
        if ch == " ":
            cells.append(" ")
        elif i == state.active_box_index:
            cells.append(f"[{ch}]")
        else:
            cells.append(ch)
    return " ".join(cells)


# =======================================
# Session-state helpers
# =======================================

def _config() -> GameConfig:
    if "config" not in st.session_state:
        st.session_state["config"] = load_config()
    return st.session_state["config"]


def _ensure_session() -> GameSession:
    """Ensure this browser session owns exactly one GameSession."""
    if "game" not in st.session_state or not isinstance(st.session_state["game"], GameSession):
        st.session_state["game"] = GameSession(config=_config())
    st.session_state.setdefault("notices", [])
    return st.session_state["game"]


def _run(action, *args) -> None:
    """Apply an engine action and keep its notices for the next render."""
    game: GameSession = st.session_state["game"]
    action(*args)
    st.session_state["notices"] = game.drain_notices()


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="PhraseFortune", page_icon="💰", layout="centered")
    st.title("💰 PhraseFortune")

    game = _ensure_session()
    state = game.state

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Wallet")
        st.metric("Bankroll", format_bankroll(state.bankroll))
        c1, c2 = st.columns(2)
        c1.metric("Guesses", state.guesses)
        c2.metric("Streak", state.current_cash_streak)
        st.caption(f"Best winning bankroll: {format_bankroll(state.highest_cash_streak)}")

        if st.button("🔁 New Game", use_container_width=True):
            _run(game.reset_game)
            st.rerun()

    # ---- Notices from the last action ----
    for notice in st.session_state["notices"]:
        getattr(st, notice_style(notice))(notice.message)

    # ---- Board ----
    st.subheader(f"Category: {state.category}")
    st.markdown(f"**Phrase**: `{mask_phrase(state)}`")
    guessed_sorted = ", ".join(sorted(state.guessed_letters)) or "(none)"
    st.caption(f"Revealed letters: {guessed_sorted}")

    if state.is_over:
        if state.win_state:
            st.success("🎉 Solved!")
        else:
            st.error(f"💀 Out of resources. The phrase was: **{state.phrase}**")
        st.button("Play again", on_click=_run, args=(game.reset_game,))
        return

    # ---- Buy letters ----
    st.subheader("Buy a letter")
    rows = letter_board(game)
    cols = st.columns(6)
    for i, (letter, label, disabled) in enumerate(rows):
        with cols[i % 6]:
            st.button(label, key=f"letter-{letter}", disabled=disabled,
                      on_click=_run, args=(game.guess_letter, letter))

    # ---- Purchases needing confirmation ----
    st.subheader("Shop")
    s1, s2 = st.columns(2)
    with s1:
        st.button(f"➕ Extra guess ({format_bankroll(game.config.guess_price)})",
                  on_click=_run, args=(game.request_purchase, "guess"))
    with s2:
        st.button(f"💡 Hint ({format_bankroll(game.config.hint_price)})",
                  on_click=_run, args=(game.request_purchase, "hint"))

    if state.pending_purchase:
        st.info(f"Confirm purchase: {state.pending_purchase}?")
        y, n = st.columns(2)
        y.button("Confirm", on_click=_run, args=(game.confirm_pending_purchase,))
        n.button("Cancel", on_click=_run, args=(game.cancel_pending_purchase,))

    # ---- Guess mode ----
    st.subheader("Solve")
    st.button("✏️ Leave guess mode" if state.is_guess_mode else "✏️ Enter guess mode",
              on_click=_run, args=(game.toggle_guess_mode,))

    if state.is_guess_mode:
        st.markdown(f"`{guess_boxes(game)}`")
        with st.form("fill_form", clear_on_submit=True):
            typed = st.text_input("Type a letter for the active box:", max_chars=1)
            if st.form_submit_button("Fill") and typed:
                _run(game.fill_active_box, typed)
                st.rerun()
        b1, b2 = st.columns(2)
        b1.button("⌫ Delete", on_click=_run, args=(game.delete_active_box,))
        b2.button("✅ Submit guess", on_click=_run, args=(game.submit_guess,))


if __name__ == "__main__":
    main()
