import argparse
import logging
import sys

from .config import LOG_LEVELS, get_settings
from .engine import Player, TurnEngine, TurnResult
from .screen import ConsoleScreen


USAGE = "Commands: '<row> <col>' (0-2), 'reset', 'quit'"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--player-one", help="name of the first player")
    parser.add_argument("--player-two", help="name of the second player")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="logging level (default from settings)")
    return parser.parse_args(argv)


def build_engine(args, settings, out):
    default_one, default_two = settings.players()
    players = (
        Player(args.player_one or default_one.name, default_one.mark),
        Player(args.player_two or default_two.name, default_two.mark),
    )
    return TurnEngine(players=players, screen=ConsoleScreen(out))


def main(argv=None, input_func=input, out=None):
    out = out if out is not None else sys.stdout
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=args.log_level or settings.log_level)

    print("Tic_Tac_Toe_game (CLI)", file=out)
    print(USAGE, file=out)
    print(file=out)
    engine = build_engine(args, settings, out)

    while True:
        try:
            user_input = input_func("> ").strip().lower()
        except EOFError:
            user_input = "quit"

        if user_input == "quit":
            print("Bye.", file=out)
            return 0

        if user_input == "reset":
            engine.reset()
            continue

        parts = user_input.split()
        if len(parts) != 2 or not all(p.isdecimal() for p in parts):
            print(f"Invalid input. {USAGE}", file=out)
            continue

        h, w = int(parts[0]), int(parts[1])
        if not (0 <= h <= 2 and 0 <= w <= 2):
            print("Coordinates must be between 0 and 2.", file=out)
            continue

        if engine.play_turn(h, w) is TurnResult.REFUSED:
            print("Move ignored. Game already finished.", file=out)


if __name__ == "__main__":
    sys.exit(main())
