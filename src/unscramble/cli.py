from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from unscramble.config import MAX_WORDS, TIMER_MODES, Settings, load_settings
from unscramble.core.difficulty import DifficultyBand, describe_band
from unscramble.core.errors import InvalidShopChoice
from unscramble.core.wordlist import LoadResult
from unscramble.services.console import Console, StdConsole
from unscramble.services.round_controller import RoundController
from unscramble.services.session import GameSession
from unscramble.utils.game_logger import configure_logging

logger = logging.getLogger(__name__)

BANNER_RULE = "*" * 40

INTRO = (
    BANNER_RULE,
    "*              UNSCRAMBLE              *",
    BANNER_RULE,
    "* Unscramble the anagram to score.     *",
    "* Longer words and winning streaks are *",
    "* worth more, hints cost a point, and  *",
    "* the shop sells extra words.          *",
    BANNER_RULE,
)

RULES = (
    BANNER_RULE,
    "*                 RULES                *",
    BANNER_RULE,
    "* You'll be given a word to unscramble *",
    "* and must solve it within 3 tries.    *",
    "* A correct word scores its length     *",
    "* plus 2 points per streak level.      *",
    "* A wrong guess breaks your streak.    *",
    "* Run out of tries and your score      *",
    "* drops back to 0.                     *",
    BANNER_RULE,
)

PLAY, SHOP, EXIT = 1, 2, 3
SHOP_BUY, SHOP_LEAVE = 1, 2


def _pause(console: Console) -> None:
    console.write_line('Press "Enter" to continue.')
    console.read_line()


def _read_number(console: Console, prompt: str) -> int:
    """Prompt until the player types an integer."""
    raw = console.read_line(prompt)
    while True:
        try:
            return int(raw.strip())
        except ValueError:
            raw = console.read_line("Invalid selection. Please enter a number: ")


def _report_load(console: Console, path: str, result: LoadResult) -> None:
    if result.missing:
        console.write_line(f"Could not open dictionary file: {path}")
    if result.capacity_exceeded:
        console.write_line(f"Word storage is full ({MAX_WORDS} words); some words were not added.")


def show_achievements(session: GameSession, console: Console) -> None:
    console.write_line("")
    console.write_line("Achievements:")
    for ach in session.achievements:
        status = "Achieved! " if ach.achieved else ""
        console.write_line(f"- {ach.name}: {status}({ach.description})")


def show_menu(session: GameSession, console: Console) -> None:
    console.write_line("")
    console.write_line(BANNER_RULE)
    console.write_line(f"* Current Score: {session.score.score}")
    console.write_line(f"* Highest Score: {session.score.high_score}")
    console.write_line(BANNER_RULE)
    console.write_line("Choose an option from the menu")
    console.write_line("1. Play the game")
    console.write_line("2. Shop")
    console.write_line("3. Exit the game")


def choose_difficulty(console: Console) -> str:
    console.write_line("")
    console.write_line("Select Difficulty Level:")
    for band in DifficultyBand:
        console.write_line(f"{band.value}. {describe_band(band)}")
    return console.read_line("Enter your choice: ")


def parse_shop_choice(choice: str) -> int:
    try:
        option = int(choice.strip())
    except ValueError:
        raise InvalidShopChoice(choice) from None
    if option not in (SHOP_BUY, SHOP_LEAVE):
        raise InvalidShopChoice(choice)
    return option


def run_shop(session: GameSession, console: Console, shop_dictionary: str) -> None:
    console.write_line("Welcome to the shop.")
    console.write_line("1. Load more difficult words")
    console.write_line("2. Exit shop")
    try:
        option = parse_shop_choice(console.read_line("Enter your choice: "))
    except InvalidShopChoice as exc:
        console.write_line(str(exc))
        option = SHOP_LEAVE

    if option == SHOP_BUY:
        result = session.buy_words(shop_dictionary)
        _report_load(console, shop_dictionary, result)
        console.write_line(f"{result.count} new words added!")
    else:
        console.write_line("Exiting the shop.")
    _pause(console)


def run(session: GameSession, console: Console, shop_dictionary: str) -> None:
    """Main menu loop. Returns when the player exits or input runs out."""
    controller = RoundController(session, console)
    try:
        while True:
            show_achievements(session, console)
            show_menu(session, console)
            option = _read_number(console, "Enter your selection: ")
            if option == PLAY:
                controller.play(choose_difficulty(console))
                _pause(console)
            elif option == SHOP:
                run_shop(session, console, shop_dictionary)
            elif option == EXIT:
                break
            else:
                console.write_line("Invalid selection. Please enter a number between 1 and 3.")
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed; leaving the game")
    console.write_line("Exiting the game.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unscramble", description="Terminal word-unscrambling game.")
    parser.add_argument("--dictionary", help="word list loaded at start-up")
    parser.add_argument("--shop-dictionary", help="word list sold in the shop")
    parser.add_argument("--seed", type=int, help="random seed for reproducible games")
    parser.add_argument("--timer", choices=TIMER_MODES, help="how round time is measured for achievements")
    parser.add_argument("--log-level", help="logging level (default WARNING)")
    parser.add_argument("--log-dir", help="write a dated log file into this directory")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Command-line flags win over environment settings."""
    return Settings(
        dictionary=args.dictionary or base.dictionary,
        shop_dictionary=args.shop_dictionary or base.shop_dictionary,
        timer=args.timer or base.timer,
        seed=args.seed if args.seed is not None else base.seed,
        log_level=args.log_level or base.log_level,
        log_dir=args.log_dir or base.log_dir,
    )


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args, load_settings())
    configure_logging(settings.log_level, settings.log_dir)
    console = console or StdConsole()

    session = GameSession.from_settings(settings)
    result = session.load_dictionary(settings.dictionary)
    for line in INTRO:
        console.write_line(line)
    for line in RULES:
        console.write_line(line)
    _report_load(console, settings.dictionary, result)
    try:
        _pause(console)
    except (EOFError, KeyboardInterrupt):
        console.write_line("Exiting the game.")
        return 0

    run(session, console, settings.shop_dictionary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
