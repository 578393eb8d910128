from __future__ import annotations

import streamlit as st

from unscramble.config import load_settings
from unscramble.core.achievements import announce
from unscramble.core.difficulty import DifficultyBand, describe_band
from unscramble.core.errors import UnscrambleError
from unscramble.core.state import RoundState
from unscramble.services.hints import HINT_MENU
from unscramble.services.session import GameSession
from unscramble.utils.game_logger import configure_logging


# =======================================
# Session-state helpers
# =======================================

def _ensure_session() -> GameSession:
    """Create the GameSession once per browser session and load the start-up dictionary."""
    if "session" not in st.session_state or not isinstance(st.session_state["session"], GameSession):
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_dir)
        session = GameSession.from_settings(settings)
        result = session.load_dictionary(settings.dictionary)
        st.session_state["session"] = session
        st.session_state["settings"] = settings
        st.session_state["load_notice"] = (
            f"Could not open dictionary file: {settings.dictionary}" if result.missing else None
        )
    st.session_state.setdefault("round", None)
    st.session_state.setdefault("messages", [])
    return st.session_state["session"]


def _start_round(band: DifficultyBand) -> None:
    """Start a round unless one is still awaiting guesses."""
    current: RoundState | None = st.session_state.get("round")
    if current is not None and not current.finished:
        return
    session: GameSession = st.session_state["session"]
    try:
        st.session_state["round"] = session.start_round(band)
        st.session_state["messages"] = []
    except UnscrambleError as exc:
        st.session_state["round"] = None
        st.session_state["messages"] = [("error", str(exc))]


def _finish_round(state: RoundState) -> None:
    """Conclude a finished round and queue its banners."""
    session: GameSession = st.session_state["session"]
    outcome = session.conclude(state)
    if not outcome.won:
        st.session_state["messages"].append(("error", f'Game Over! The correct answer was "{outcome.word}"'))
    for ach in outcome.newly_unlocked:
        st.session_state["messages"].append(("success", announce(ach)))


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Unscramble", page_icon="🔤", layout="centered")
    st.title("🔤 Unscramble")

    session = _ensure_session()
    settings = st.session_state["settings"]

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Settings")
        band = st.selectbox("Difficulty", list(DifficultyBand), format_func=describe_band)
        current: RoundState | None = st.session_state["round"]
        round_open = current is not None and not current.finished
        if st.button("🔁 New Round", key="new_round", disabled=round_open, use_container_width=True):
            _start_round(band)
            st.rerun()
        if round_open:
            st.caption("Finish the current round to start a new one.")

        with st.expander("📊 Score", expanded=True):
            s = session.score
            c1, c2 = st.columns(2); c1.metric("Score", s.score); c2.metric("Highest", s.high_score)
            c3, c4 = st.columns(2); c3.metric("Streak", s.streak); c4.metric("Max streak", s.max_streak)

        with st.expander("🏆 Achievements"):
            for ach in session.achievements:
                mark = "✅" if ach.achieved else "⬜"
                st.write(f"{mark} **{ach.name}** ({ach.description})")

        with st.expander("🛒 Shop"):
            st.caption(f"{len(session.store)} words loaded.")
            if st.button("Load more difficult words"):
                result = session.buy_words(settings.shop_dictionary)
                if result.missing:
                    st.warning(f"Could not open dictionary file: {settings.shop_dictionary}")
                elif result.capacity_exceeded:
                    st.warning("Word storage is full; some words were not added.")
                st.success(f"{result.count} new words added!")

    if st.session_state.get("load_notice"):
        st.warning(st.session_state["load_notice"])

    state: RoundState | None = st.session_state["round"]
    for level, text in st.session_state["messages"]:
        getattr(st, level)(text)

    if state is None:
        st.info("Pick a difficulty and press **New Round** to start.")
        return

    # ---- Board ----
    st.subheader("Anagram")
    st.markdown(f"## `{state.scrambled}`")
    st.caption(f"Attempts left: {state.attempts_left} · Hints left: {state.hints_remaining}")
    for hint in state.hints:
        st.info(hint.text)

    if state.finished:
        st.button("Play again", on_click=_start_round, args=(state.band,))
        return

    # ---- Hints ----
    with st.expander("Need a hint? (costs 1 point)"):
        cols = st.columns(len(HINT_MENU))
        for col, (kind, label) in zip(cols, HINT_MENU):
            if col.button(label, disabled=state.hints_remaining <= 0):
                try:
                    st.session_state["round"], _ = session.hint(state, kind)
                except UnscrambleError as exc:
                    st.session_state["messages"] = [("warning", str(exc))]
                st.rerun()

    # ---- Guess input ----
    with st.form("guess_form", clear_on_submit=True):
        guess = st.text_input("Your guess:", max_chars=40)
        submitted = st.form_submit_button("Submit")
        if submitted and (guess or "").strip():
            new_state, result = session.guess(state, guess)
            st.session_state["round"] = new_state
            if result.correct:
                st.session_state["messages"] = [(
                    "success",
                    f"Correct! You earned {result.points} points (including {result.combo_bonus} combo points)!",
                )]
            else:
                st.session_state["messages"] = [("warning", f"Incorrect guess. Attempts left: {result.attempts_left}")]
            if new_state.finished:
                _finish_round(new_state)
            st.rerun()


if __name__ == "__main__":
    main()
