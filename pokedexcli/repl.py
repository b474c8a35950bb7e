"""The interactive prompt and the program entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .client import PokeAPIClient
from .commands import Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config) -> None:
    """Read commands from standard input until it runs out or ``exit`` is given."""
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        command = commands.get(words[0])
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(cfg, *words[1:])
        except Exception as err:  # report and keep the session going
            print(err)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex at the terminal."
    )
    parser.parse_args(argv)
    with PokeAPIClient(timeout=5.0, cache_interval=5.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())