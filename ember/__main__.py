from __future__ import annotations

import argparse
import logging
import sys

from ember import config
from ember.errors import EmberConfigError
from ember.repl import Repl


def _log_level(value: str) -> int:
    try:
        return config.parse_log_level(value)
    except EmberConfigError as ex:
        raise argparse.ArgumentTypeError(str(ex)) from ex


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ember", description="Ember read/print loop")
    parser.add_argument("--prompt", default=None, help="prompt string (env: EMBER_PROMPT)")
    parser.add_argument(
        "--exit-on-error",
        action="store_true",
        help="stop at the first read error with its status code (env: EMBER_ON_ERROR=exit)",
    )
    parser.add_argument(
        "--log-level", type=_log_level, default=None, help="logging level (env: EMBER_LOG_LEVEL)")
    args = parser.parse_args(argv)

    level = args.log_level if args.log_level is not None else config.get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    repl = Repl(prompt=args.prompt, on_error="exit" if args.exit_on_error else None)
    return repl.run()


if __name__ == "__main__":
    sys.exit(main())
