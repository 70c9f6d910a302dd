"""Unit tests for guess-mode editing and submission.

Tests cover:
- Entering/leaving guess mode and cursor placement
- Filling and deleting boxes around spaces and locked letters
- Submitting correct, partial and wrong guesses
"""

from phrasefortune.core import engine
from phrasefortune.core.config import GameConfig
from phrasefortune.core.notices import NoticeKind
from phrasefortune.core.state import GameState


def _fill(state: GameState, letters: str) -> None:
    for ch in letters:
        engine.fill_active_box(state, ch)


class TestToggleGuessMode:
    """Tests for toggle_guess_mode."""

    def test_enter_sets_cursor_to_first_placeholder(self) -> None:
        state = engine.new_game("hello world")
        assert engine.toggle_guess_mode(state) == []
        assert state.is_guess_mode
        assert state.active_box_index == 0
        assert "".join(state.current_input) == "_____ _____"

    def test_round_trip_restores_flags(self) -> None:
        state = engine.new_game("hello world")
        engine.toggle_guess_mode(state)
        engine.toggle_guess_mode(state)
        assert state.is_guess_mode is False
        assert state.active_box_index is None

    def test_revealed_letters_prefilled(self) -> None:
        state = engine.new_game("hello world")
        engine.guess_letter(state, "h")
        engine.guess_letter(state, "l")
        engine.toggle_guess_mode(state)
        assert "".join(state.current_input) == "h_ll_ ___l_"
        assert state.active_box_index == 1

    def test_no_placeholder_leaves_cursor_empty(self) -> None:
        state = GameState(phrase="ab", correct_positions=["a", "b"])
        engine.toggle_guess_mode(state)
        assert state.is_guess_mode
        assert state.active_box_index is None

    def test_blocked_without_guesses(self) -> None:
        state = GameState(phrase="cat", guesses=0)
        emitted = engine.toggle_guess_mode(state)
        assert [n.kind for n in emitted] == [NoticeKind.INSUFFICIENT_GUESSES]
        assert not state.is_guess_mode


class TestFillAndDelete:
    """Tests for fill_active_box and delete_active_box."""

    def test_ignored_outside_guess_mode(self) -> None:
        state = engine.new_game("cat")
        engine.fill_active_box(state, "c")
        engine.delete_active_box(state)
        assert state.current_input == ["_", "_", "_"]
        assert state.active_box_index is None

    def test_fill_skips_spaces_and_locked(self) -> None:
        state = engine.new_game("hello world")
        engine.guess_letter(state, "l")
        engine.toggle_guess_mode(state)
        _fill(state, "he")
        assert state.active_box_index == 4
        _fill(state, "o")
        assert state.active_box_index == 6

    def test_fill_lowercases_and_ignores_junk(self) -> None:
        state = engine.new_game("cat")
        engine.toggle_guess_mode(state)
        engine.fill_active_box(state, "1")
        engine.fill_active_box(state, "xy")
        assert state.current_input == ["_", "_", "_"]
        engine.fill_active_box(state, "C")
        assert state.current_input[0] == "c"
        assert state.active_box_index == 1

    def test_cursor_stays_on_last_box(self) -> None:
        state = engine.new_game("cat")
        engine.toggle_guess_mode(state)
        _fill(state, "cat")
        assert state.active_box_index == 2
        assert state.current_input == ["c", "a", "t"]

    def test_delete_steps_back(self) -> None:
        state = engine.new_game("ab cd")
        engine.toggle_guess_mode(state)
        _fill(state, "ab")
        assert state.active_box_index == 3
        engine.delete_active_box(state)
        assert state.active_box_index == 1
        engine.delete_active_box(state)
        assert state.current_input == ["a", "_", " ", "_", "_"]
        assert state.active_box_index == 0
        engine.delete_active_box(state)
        assert state.current_input[0] == "_"
        assert state.active_box_index == 0

    def test_delete_skips_locked_positions(self) -> None:
        state = engine.new_game("hello")
        engine.guess_letter(state, "l")
        engine.toggle_guess_mode(state)
        _fill(state, "he")
        assert state.active_box_index == 4
        engine.delete_active_box(state)
        assert state.active_box_index == 1
        assert state.current_input == ["h", "e", "l", "l", "_"]


class TestSubmitGuess:
    """Tests for submit_guess."""

    def test_ignored_outside_guess_mode(self) -> None:
        state = engine.new_game("cat")
        assert engine.submit_guess(state) == []
        assert state.guesses == 2

    def test_full_match_wins(self) -> None:
        state = engine.new_game("hello world")
        engine.guess_letter(state, "l")
        engine.toggle_guess_mode(state)
        _fill(state, "heoword")
        emitted = engine.submit_guess(state)
        assert [n.kind for n in emitted] == [NoticeKind.WIN]
        assert state.win_state
        assert state.current_cash_streak == 1
        assert state.highest_cash_streak == 950
        assert state.guesses == 2
        assert not state.is_guess_mode
        assert state.active_box_index is None

    def test_partial_match_locks_and_spends_guess(self) -> None:
        state = engine.new_game("cat")
        engine.toggle_guess_mode(state)
        _fill(state, "cot")
        assert engine.submit_guess(state) == []
        assert state.correct_positions == ["c", None, "t"]
        assert state.current_input == ["c", "_", "t"]
        assert state.guesses == 1
        assert not state.is_guess_mode
        assert not state.loss_state

    def test_never_unlocks(self) -> None:
        state = engine.new_game("cat")
        engine.guess_letter(state, "c")
        engine.toggle_guess_mode(state)
        state.current_input[0] = "q"
        engine.submit_guess(state)
        assert state.correct_positions[0] == "c"

    def test_wrong_guess_with_low_bankroll_loses(self) -> None:
        state = engine.new_game("cat", config=GameConfig(initial_bankroll=10, initial_guesses=1))
        engine.toggle_guess_mode(state)
        engine.fill_active_box(state, "x")
        emitted = engine.submit_guess(state)
        assert state.guesses == 0
        assert state.loss_state
        assert [n.kind for n in emitted] == [NoticeKind.LOSS]

    def test_out_of_guesses_but_solvent_keeps_playing(self) -> None:
        state = engine.new_game("cat", config=GameConfig(initial_guesses=1))
        engine.toggle_guess_mode(state)
        engine.submit_guess(state)
        assert state.guesses == 0
        assert not state.loss_state
        assert [n.kind for n in engine.toggle_guess_mode(state)] == [NoticeKind.INSUFFICIENT_GUESSES]
