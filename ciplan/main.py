import sys

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from ciplan.args import ArgsConfig, args_parse
from ciplan.commands import list_, show
from ciplan.domain.config import PlanConfig, load_config


def _apply_args(args: ArgsConfig, config: PlanConfig) -> PlanConfig:
    if args.tool:
        config["tool"] = args.tool
    if args.verbose:
        source = config["source"] or "built-in modes"
        print(f"[ciplan] config: {source}")
        print(f"[ciplan] tool: {config['tool']}")
    return config


def ciplan(args: ArgsConfig) -> IOResultE[int]:
    config = load_config(args.config).map(lambda c: _apply_args(args, c))
    match args.action:
        case "list":
            return config.bind(lambda c: list_(args, c))
        case "show":
            return config.bind(lambda c: show(args, c))
        case action:
            return IOResultE.from_failure(
                NotImplementedError(f"{action} is not implemented yet")
            )


def main(argv: list[str] | None = None) -> int:
    args = args_parse(sys.argv[1:] if argv is None else argv)
    result = ciplan(args)
    if not is_successful(result):
        print(
            f"[ciplan] Error: {unsafe_perform_io(result.failure())}", file=sys.stderr
        )
        return 1
    return unsafe_perform_io(result.unwrap())


if __name__ == "__main__":
    sys.exit(main())
