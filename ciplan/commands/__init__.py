from returns.io import IOResultE

from ciplan.commands.list_cmd import list_command
from ciplan.commands.show import show_command
from ciplan.domain.config import PlanConfig


def list_(args, config: PlanConfig) -> IOResultE[int]:
    return list_command(args, config)


def show(args, config: PlanConfig) -> IOResultE[int]:
    return show_command(args, config)
