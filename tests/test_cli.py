import pytest

from unscramble.cli import build_parser, main, parse_shop_choice, resolve_settings
from unscramble.config import Settings
from unscramble.core.errors import InvalidShopChoice
from unscramble.services.console import ScriptedConsole


@pytest.fixture
def dictionaries(write_words):
    main_dict = write_words("cat", name="dictionary.txt")
    shop_dict = write_words("adventure butterfly", name="dictionary2.txt")
    return main_dict, shop_dict


def _run(dictionaries, console_factory, lines, extra=()):
    main_dict, shop_dict = dictionaries
    console = console_factory(lines)
    argv = ["--dictionary", str(main_dict), "--shop-dictionary", str(shop_dict), "--seed", "1", *extra]
    assert main(argv, console=console) == 0
    return console


def test_intro_and_exit(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, ["", "3"])
    assert "*              UNSCRAMBLE              *" in console.output
    assert "*                 RULES                *" in console.output
    assert "- First Win: (Win your first game)" in console.output
    assert "* Current Score: 0" in console.output
    assert console.output[-1] == "Exiting the game."


def test_play_a_winning_round(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, ["", "1", "1", "cat", "", "3"])
    assert "1. Easy (3-5 letters)" in console.output
    assert "Correct! You earned 3 points (including 0 combo points)!" in console.output
    assert "Congratulations! You earned the achievement: First Win!" in console.output
    assert "* Current Score: 3" in console.output
    assert "* Highest Score: 3" in console.output
    assert "- First Win: Achieved! (Win your first game)" in console.output


def test_combo_over_two_rounds(dictionaries, console_factory):
    lines = ["", "1", "1", "cat", "", "1", "1", "cat", "", "3"]
    console = _run(dictionaries, console_factory, lines)
    assert "Correct! You earned 5 points (including 2 combo points)!" in console.output
    assert "Current streak: 2 | Max streak: 2" in console.output
    assert "* Current Score: 8" in console.output


def test_losing_round_resets_score_but_not_best(dictionaries, console_factory):
    lines = ["", "1", "1", "cat", "", "1", "1", "x", "y", "z", "", "3"]
    console = _run(dictionaries, console_factory, lines)
    assert 'Game Over! The correct answer was "cat"' in console.output
    menus = [line for line in console.output if line.startswith("* Current Score")]
    assert menus == ["* Current Score: 0", "* Current Score: 3", "* Current Score: 0"]
    assert console.output.count("* Highest Score: 3") == 2


def test_main_menu_validation(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, ["", "play", "7", "3"])
    assert "Invalid selection. Please enter a number: " in console.output
    assert "Invalid selection. Please enter a number between 1 and 3." in console.output
    assert console.output[-1] == "Exiting the game."


def test_empty_difficulty_pool(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, ["", "1", "3", "", "3"])
    assert "No words available for the selected difficulty level." in console.output


def test_shop_unlocks_hard_words(dictionaries, console_factory):
    lines = ["", "2", "1", "", "1", "3", "butterfly", "adventure", "x", "", "3"]
    console = _run(dictionaries, console_factory, lines)
    assert "Welcome to the shop." in console.output
    assert "2 new words added!" in console.output
    assert "No words available for the selected difficulty level." not in console.output
    assert "Correct! You earned 9 points (including 0 combo points)!" in console.output


def test_shop_exit_and_invalid_choice(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, ["", "2", "2", "", "2", "zz", "", "3"])
    assert console.output.count("Exiting the shop.") == 2
    assert "Invalid shop choice." in console.output


def test_shop_with_missing_file(dictionaries, console_factory, tmp_path):
    main_dict, _ = dictionaries
    console = _run((main_dict, tmp_path / "missing.txt"), console_factory, ["", "2", "1", "", "3"])
    assert f"Could not open dictionary file: {tmp_path / 'missing.txt'}" in console.output
    assert "0 new words added!" in console.output


def test_missing_start_dictionary(tmp_path, console_factory):
    console = console_factory(["", "1", "1", "", "3"])
    assert main(["--dictionary", str(tmp_path / "none.txt")], console=console) == 0
    assert f"Could not open dictionary file: {tmp_path / 'none.txt'}" in console.output
    assert "Error: No words loaded from the dictionary files." in console.output


def test_end_of_input_exits_cleanly(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, ["", "1", "1"])
    assert console.output[-1] == "Exiting the game."


def test_end_of_input_during_intro(dictionaries, console_factory):
    console = _run(dictionaries, console_factory, [])
    assert console.output[-1] == "Exiting the game."


class InterruptedConsole(ScriptedConsole):
    def read_line(self, prompt: str = "") -> str:
        raise KeyboardInterrupt


def test_ctrl_c_during_intro(dictionaries):
    console = _run(dictionaries, InterruptedConsole, [])
    assert "*                 RULES                *" in console.output
    assert console.output[-1] == "Exiting the game."


def test_parse_shop_choice():
    assert parse_shop_choice(" 1 ") == 1
    assert parse_shop_choice("2") == 2
    for bad in ("3", "0", "shop"):
        with pytest.raises(InvalidShopChoice):
            parse_shop_choice(bad)


def test_flags_override_settings():
    args = build_parser().parse_args(["--timer", "wallclock", "--seed", "0"])
    base = Settings(dictionary="a.txt", seed=7, log_level="info")
    settings = resolve_settings(args, base)
    assert settings.timer == "wallclock"
    assert settings.seed == 0
    assert settings.dictionary == "a.txt"
    assert settings.log_level == "INFO"
