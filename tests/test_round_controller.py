from unscramble.core.state import ScoreState
from unscramble.services.round_controller import RoundController


def _play(session, console_factory, lines, band="1"):
    console = console_factory(lines)
    outcome = RoundController(session, console).play(band)
    return outcome, console


def test_correct_first_guess(make_session, console_factory):
    session = make_session(["cat"])
    outcome, console = _play(session, console_factory, ["cat"])
    assert outcome.won
    assert console.output[0].startswith("Anagram of the word is: ")
    assert "Correct! You earned 3 points (including 0 combo points)!" in console.output
    assert "Current streak: 1 | Max streak: 1" in console.output
    assert "Congratulations! You earned the achievement: First Win!" in console.output
    assert "Amazing! You earned the achievement: Hint Master!" in console.output
    assert "Fast thinking! You earned the achievement: Quick Thinker!" in console.output


def test_blank_lines_are_ignored(make_session, console_factory):
    session = make_session(["cat"])
    outcome, console = _play(session, console_factory, ["", "   ", "cat"])
    assert outcome.won
    assert not any(line.startswith("Incorrect") for line in console.output)


def test_three_misses_reveal_the_word(make_session, console_factory):
    session = make_session(["cat"])
    session.score = ScoreState(score=12, high_score=12)
    outcome, console = _play(session, console_factory, ["dog", "act", "tca"])
    assert not outcome.won
    assert [line for line in console.output if line.startswith("Incorrect")] == [
        "Incorrect guess. Attempts left: 2",
        "Incorrect guess. Attempts left: 1",
        "Incorrect guess. Attempts left: 0",
    ]
    assert 'Game Over! The correct answer was "cat"' in console.output
    assert session.score.score == 0


def test_hints_then_limit(make_session, console_factory):
    session = make_session(["cat"])
    lines = ["hint", "1", "hint", "2", "hint", "cat"]
    outcome, console = _play(session, console_factory, lines)
    assert "First letter: c" in console.output
    assert "Hint cost deducted. Current score: -1" in console.output
    assert "Word length: 3 letters." in console.output
    assert "Hint cost deducted. Current score: -2" in console.output
    assert "You have used all available hints for this word." in console.output
    assert outcome.won
    assert outcome.hints_used == 2
    assert session.score.score == 1
    assert "Amazing! You earned the achievement: Hint Master!" not in console.output


def test_invalid_hint_choice_is_free(make_session, console_factory):
    session = make_session(["cat"])
    outcome, console = _play(session, console_factory, ["hint", "5", "cat"])
    assert "Invalid hint choice." in console.output
    assert outcome.hints_used == 0
    assert session.score.score == 3


def test_hint_menu_is_shown(make_session, console_factory):
    session = make_session(["cat"])
    _, console = _play(session, console_factory, ["hint", "2", "cat"])
    assert "Available Hints:" in console.output
    assert "1. Reveal the first letter" in console.output
    assert "2. Show word length" in console.output
    assert "3. Reveal a random letter" in console.output


def test_no_words_loaded(make_session, console_factory):
    outcome, console = _play(make_session([]), console_factory, [])
    assert outcome is None
    assert console.output == ["Error: No words loaded from the dictionary files."]


def test_no_words_for_difficulty(make_session, console_factory):
    outcome, console = _play(make_session(["cat"]), console_factory, [], band="3")
    assert outcome is None
    assert console.output == ["No words available for the selected difficulty level."]


def test_invalid_difficulty(make_session, console_factory):
    outcome, console = _play(make_session(["cat"]), console_factory, [], band="x")
    assert outcome is None
    assert console.output == ["Invalid difficulty. Please choose 1, 2 or 3."]
