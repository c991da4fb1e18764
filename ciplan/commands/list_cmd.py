import json
from typing import Any

from returns.io import IOResultE, impure_safe

from ciplan.domain.config import PlanConfig
from ciplan.domain.entities import Mode
from ciplan.types import Scope


def describe(mode_id: str, mode: Mode, tool: str) -> str:
    return f"{mode_id}: {' '.join(mode.invocation(tool))} (cache: {mode.cache_key})"


def serialize(mode: Mode, tool: str) -> dict[str, Any]:
    return {**mode.to_dict(), "invocation": list(mode.invocation(tool))}


def scoped_ids(config: PlanConfig, scope: Scope) -> tuple[str, ...]:
    match scope:
        case "independent":
            return config["modes"].platform_independent()
        case "dependent":
            return config["modes"].platform_dependent()
        case _:
            return tuple(config["modes"])


@impure_safe
def list_modes(config: PlanConfig, scope: Scope = "all", as_json: bool = False) -> int:
    modes = config["modes"].select(scoped_ids(config, scope))
    if as_json:
        print(
            json.dumps(
                [serialize(mode, config["tool"]) for mode in modes.values()],
                indent=2,
            )
        )
    else:
        for mode_id, mode in modes.items():
            print(describe(mode_id, mode, config["tool"]))
    return 0


def list_command(args, config: PlanConfig) -> IOResultE[int]:
    return list_modes(config, args.scope, args.json)
