"""
Secret Number CLI - Command-line interface for the engine.

Usage:
    secret-number play                 Play in the terminal
    secret-number serve                Run the REST API
"""

import argparse
import random
import sys

from .config import DEBOUNCE_SECONDS, configure_logging, default_game_config
from .engine_core import GameConfig, Session
from .session import EventKind, GameEvent, GameLoop, describe, hint, range_hint
from .session.messages import prompt_message


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Secret Number - guess the number",
        prog="secret-number",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    try:
        defaults = default_game_config()
    except ValueError as e:
        print(f"Error: invalid game settings in environment: {e}")
        sys.exit(1)

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--min", type=int, default=defaults.min_number, dest="min_number")
    play_parser.add_argument("--max", type=int, default=defaults.max_number, dest="max_number")
    play_parser.add_argument(
        "--max-attempts", type=int, default=defaults.max_attempts,
        help="Attempt limit (default: unlimited)",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible secrets")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    if args.command == "play":
        configure_logging(args.log_level or "WARNING")
        cmd_play(args)
    elif args.command == "serve":
        configure_logging(args.log_level)
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play an interactive game."""
    try:
        config = GameConfig(
            min_number=args.min_number,
            max_number=args.max_number,
            max_attempts=args.max_attempts,
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    rng = random.Random(args.seed) if args.seed is not None else None
    loop = GameLoop(Session(config, rng=rng), debounce_seconds=DEBOUNCE_SECONDS)
    run_interactive(loop)


def terminal_printer(config: GameConfig, output=print):
    """Observer that writes game events to the terminal."""
    def observe(event: GameEvent):
        if event.kind in {EventKind.STARTED, EventKind.RESTARTED}:
            output("")
            output("Guess the secret number")
            output(f"{prompt_message()} {range_hint(config)}.")
            return
        outcome = event.outcome
        output(describe(outcome, config))
        follow_up = hint(outcome)
        if follow_up:
            output(f"  ({follow_up})")
    return observe


def run_interactive(loop: GameLoop, input_fn=input, output=print):
    """
    Terminal game loop.

    'q' quits, 'r' restarts. After a game ends the player is asked to play again.
    """
    config = loop.session.config
    loop.subscribe(terminal_printer(config, output))
    loop.start()

    while True:
        try:
            line = input_fn(f"[attempt {loop.session.attempts}] > ").strip()
        except EOFError:
            output("")
            return

        if line.lower() in {"q", "quit", "exit"}:
            return
        if line.lower() in {"r", "restart", "new"}:
            loop.restart()
            continue

        outcome = loop.on_enter(line)
        if outcome.ends_game:
            try:
                again = input_fn("Play again? [y/N] ").strip().lower()
            except EOFError:
                output("")
                return
            if again not in {"y", "yes"}:
                return
            loop.restart()


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("secret_number.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
