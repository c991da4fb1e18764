from dataclasses import dataclass
import shlex
from typing import Any

from ciplan.domain.errors import InvalidModeError
from ciplan.types import Cmd

DEFAULT_TOOL = "cargo"


@dataclass(frozen=True)
class Mode:
    """How one CI job invokes the build tool."""

    name: str
    command: str
    args: str
    cache_key: str
    platform_independent: bool = False

    def argv(self) -> Cmd:
        """The arguments split with POSIX shell rules."""
        try:
            return tuple(shlex.split(self.args))
        except ValueError as e:
            raise InvalidModeError(f"mode '{self.name}': bad args {self.args!r}") from e

    def invocation(self, tool: str = DEFAULT_TOOL) -> Cmd:
        return (tool, self.command, *self.argv())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "command": self.command,
            "args": self.args,
            "cacheKey": self.cache_key,
            "platformIndependent": self.platform_independent,
        }


def _non_empty(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_mode(mode_id: str, mode: Mode) -> Mode:
    if not _non_empty(mode.name) or mode.name != mode_id:
        raise InvalidModeError(
            f"mode '{mode_id}': name must equal its key, got {mode.name!r}"
        )
    if not _non_empty(mode.command):
        raise InvalidModeError(f"mode '{mode_id}': empty command")
    if not isinstance(mode.args, str):
        raise InvalidModeError(f"mode '{mode_id}': args must be a string")
    if not _non_empty(mode.cache_key):
        raise InvalidModeError(f"mode '{mode_id}': empty cache key")
    if not isinstance(mode.platform_independent, bool):
        raise InvalidModeError(
            f"mode '{mode_id}': platform_independent must be a bool"
        )
    mode.argv()
    return mode
