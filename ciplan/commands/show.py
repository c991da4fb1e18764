import json

from returns.io import IOResultE

from ciplan.commands.list_cmd import describe, serialize
from ciplan.domain.config import PlanConfig


def show_command(args, config: PlanConfig) -> IOResultE[int]:
    def _print(mode) -> int:
        if args.json:
            print(json.dumps(serialize(mode, config["tool"]), indent=2))
        else:
            print(describe(args.mode, mode, config["tool"]))
            if mode.platform_independent:
                print("  platform independent")
        return 0

    return IOResultE.from_result(config["modes"].lookup(args.mode)).map(_print)
