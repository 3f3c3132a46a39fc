"""Delve CLI entry point.

Generates a dungeon and prints the stage before and after carving, or runs
the preview web server. Accepts configuration via flags and DELVE_*
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from delve import __version__

just_fix_windows_console()

TOP_LEVEL_FLAGS = ("--env-file", "--version", "-h", "--help")


def _color_enabled() -> bool:
    # Disable colors if output is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Delve dungeon generator

    Carve a rooms-and-mazes dungeon into an odd-sized grid and print it, or
    run the diagnostic preview server. CLI flags take precedence over
    environment variables.
    """

    epilog = dedent(
        """
        Environment variables:
          DELVE_WIDTH / DELVE_HEIGHT        Stage size (default: 151 x 35, both odd)
          DELVE_SEED                        Random seed (default: random)
          DELVE_ROOM_TRIES                  Room placement attempts (default: 50)
          DELVE_WINDING_PERCENT             Corridor turn bias 0..100 (default: 0)
          DELVE_EXTRA_CONNECTOR_CHANCE      1-in-N redundant connectors (default: 20)
          DELVE_LOG_LEVEL                   debug, info, warn, error (default: info)

        Examples:
          # Generate the default 151x35 dungeon
          python run.py generate

          # Reproduce a layout and show every phase
          python run.py generate --seed 42 --trace

          # Serve text previews on port 8080
          python run.py serve --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="delve",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Delve dungeon generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Stage width, odd (default: env DELVE_WIDTH or 151)")
    gen_parser.add_argument("--height", type=int, default=None, help="Stage height, odd (default: env DELVE_HEIGHT or 35)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible layout")
    gen_parser.add_argument("--room-tries", dest="room_tries", type=int, default=None, help="Room placement attempts")
    gen_parser.add_argument("--winding", dest="winding_percent", type=int, default=None, help="Corridor turn bias 0..100")
    gen_parser.add_argument(
        "--extra-connector-chance",
        dest="extra_connector_chance",
        type=int,
        default=None,
        help="Open a redundant connector 1 time in N",
    )
    gen_parser.add_argument("--trace", action="store_true", help="Print the stage after every phase")
    gen_parser.add_argument("--metrics", action="store_true", help="Print generation metrics after the stage")
    gen_parser.set_defaults(command="generate")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the dungeon preview web server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    serve_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    serve_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    serve_parser.set_defaults(command="serve")

    # Without a subcommand, behave like `generate`
    parser.set_defaults(
        command="generate",
        width=None,
        height=None,
        seed=None,
        room_tries=None,
        winding_percent=None,
        extra_connector_chance=None,
        trace=False,
        metrics=False,
    )
    if argv and argv[0].startswith("-") and argv[0] not in TOP_LEVEL_FLAGS:
        argv = ["generate", *argv]

    return parser.parse_args(argv)


def _print_metrics(metrics: dict) -> None:
    color = _color_enabled()
    for key, val in metrics.items():
        label = f"{Fore.YELLOW}{key}{Style.RESET_ALL}" if color else key
        print(f"  {label}: {val}")


def run_generate(args: argparse.Namespace) -> int:
    from delve.dungeon import Dungeon, DungeonConfig, DungeonError, Stage
    from delve.logging_utils import log

    try:
        config = DungeonConfig.from_env(
            width=args.width,
            height=args.height,
            seed=args.seed,
            room_tries=args.room_tries,
            winding_percent=args.winding_percent,
            extra_connector_chance=args.extra_connector_chance,
        )
    except ValueError as exc:
        log.error(event="bad_config", error=exc)
        return 2

    stage = Stage(config.width, config.height)
    print(stage)
    print()

    def show_phase(name, st):
        heading = f"{Fore.CYAN}{name}{Style.RESET_ALL}" if _color_enabled() else name
        print(heading)
        print(st)

    dungeon = Dungeon(stage, config, on_phase=show_phase if args.trace else None)
    try:
        dungeon.generate()
    except (DungeonError, ValueError) as exc:
        log.error(event="generation_failed", error=exc)
        return 2
    print(stage)
    if args.metrics:
        print()
        print(f"seed: {dungeon.seed}")
        _print_metrics(dungeon.metrics)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "serve":
        from delve.logging_utils import log
        from delve.server import start_server

        host = args.host or os.getenv("HOST", "127.0.0.1")
        port = int(args.port or os.getenv("PORT", "5000"))
        log.info(event="startup", mode=mode, host=host, port=port)
        start_server(host=host, port=port, debug=args.debug)
        return 0
    return run_generate(args)


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
