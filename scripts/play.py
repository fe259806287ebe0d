#!/usr/bin/env python3
"""Play blob wars in the console, two players sharing the keyboard."""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from blobwars import ApplicationState, Command, UnknownKeyError, load_config
from blobwars.render import HELP, render_application

logger = logging.getLogger("blobwars.play")

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def decode_line(line: str) -> List[Command]:
    """Decode one typed line into commands.

    Several keys may be typed at once, separated by spaces (``d d s``). A
    blank line is a single enter.
    """
    tokens = line.split()
    if not tokens:
        return [Command.SELECT]
    return [Command.from_key(token) for token in tokens]


def run(
    app: ApplicationState,
    read_line: Callable[[], str],
    out: TextIO,
    *,
    clear: bool = True,
) -> ApplicationState:
    notice = ""
    while not app.has_exited():
        if clear:
            out.write(CLEAR_SCREEN)
        out.write(render_application(app) + "\n")
        if notice:
            out.write(notice)
            notice = ""
        out.flush()

        try:
            line = read_line()
        except EOFError:
            app.handle_command(Command.EXIT)
            break

        try:
            commands = decode_line(line)
        except UnknownKeyError as exc:
            logger.debug("Ignored input %r", line)
            notice = f"{exc}\n{HELP}\n"
            continue

        for command in commands:
            app.handle_command(command)
            if app.has_exited():
                break
    return app


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play blob wars in the console.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--no-clear", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.no_color:
        config.color = False

    app = ApplicationState(config)
    run(app, lambda: input("> "), sys.stdout, clear=not args.no_clear)
    print("Bye.")


if __name__ == "__main__":
    main()
