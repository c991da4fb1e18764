from ciplan.domain.entities import DEFAULT_TOOL, Mode
from ciplan.domain.errors import ConfigError, InvalidModeError, UnknownModeError
from ciplan.domain.modes import CODE
from ciplan.domain.registry import ModeRegistry

__all__ = [
    "CODE",
    "DEFAULT_TOOL",
    "ConfigError",
    "InvalidModeError",
    "Mode",
    "ModeRegistry",
    "UnknownModeError",
]
