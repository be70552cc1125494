"""Interactive Pokédex prompt."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from pokedex.commands import CommandError, Config, clean_input, get_registry

PROMPT = "Pokedex > "


def run_repl(config: Config, lines: Iterable[str]) -> None:
    """Prompt for and run one command per line until ``lines`` runs out."""
    registry = get_registry()
    stream = iter(lines)
    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = next(stream)
        except StopIteration:
            print()
            return
        words = clean_input(line)
        if not words:
            print("Please type a command.")
            continue
        command = registry.get(words[0])
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(config, *words[1:])
        except CommandError as err:
            print(f"Error executing command: {err}")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive Pokédex on standard input."""
    argparse.ArgumentParser(prog="pokedex", description="Interactive Pokedex.").parse_args(argv)
    config = Config()
    try:
        run_repl(config, sys.stdin)
    finally:
        config.cache.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())