#!/usr/bin/env python3

import argparse

from wizard_battle.game.config_loader import ConfigLoader
from wizard_battle.game.game import Game


def main():
    parser = argparse.ArgumentParser(description="Wizard battle simulator")
    parser.add_argument("--config", help="Path to the YAML run configuration")
    parser.add_argument("--input", help="Battle script to read (overrides config)")
    parser.add_argument("--output", help="Report file to write (overrides config)")
    parser.add_argument("--debug", action="store_true", help="Print the game log after the run")
    args = parser.parse_args()

    config = ConfigLoader(args.config).load()
    if args.input:
        config.input_file = args.input
    if args.output:
        config.output_file = args.output
    if args.debug:
        config.debug = True

    game = Game(config)
    try:
        game.run(config.input_file, config.output_file)
    except FileNotFoundError:
        print(f"Battle script not found: {config.input_file}")
        raise

    if config.debug:
        for message in game.log_manager.get_messages():
            print(message.format(include_timestamp=True))


if __name__ == "__main__":
    main()
