from pathlib import Path
from typing import Protocol
import argparse

from ciplan.__version__ import __version__
from ciplan.types import Action, Scope


class ArgsConfig(Protocol):
    action: Action
    config: Path | None
    tool: str | None
    verbose: bool
    json: bool
    scope: Scope
    mode: str


def args_parse(argv: list[str]) -> ArgsConfig:
    parser = argparse.ArgumentParser(
        prog="ciplan",
        description="Shows the CI build modes",
        epilog="",
    )
    parser.add_argument("-c", "--config", type=Path, default=None)
    parser.add_argument("--tool", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)

    subparser = parser.add_subparsers(dest="action", required=True)

    list_ = subparser.add_parser("list")
    list_.add_argument("--json", action="store_true")
    scope = list_.add_mutually_exclusive_group()
    scope.add_argument(
        "--platform-independent",
        dest="scope",
        action="store_const",
        const="independent",
    )
    scope.add_argument(
        "--platform-dependent",
        dest="scope",
        action="store_const",
        const="dependent",
    )
    list_.set_defaults(scope="all")

    show = subparser.add_parser("show")
    show.add_argument("mode")
    show.add_argument("--json", action="store_true")

    return parser.parse_args(argv)  # type: ignore
