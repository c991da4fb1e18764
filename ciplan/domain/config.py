from pathlib import Path
from typing import Any, TypedDict

import toml
from returns.io import IOResultE, impure_safe
from returns.maybe import maybe

from ciplan.domain.entities import DEFAULT_TOOL, Mode
from ciplan.domain.errors import ConfigError, InvalidModeError
from ciplan.domain.modes import CODE
from ciplan.domain.registry import ModeRegistry

CONFIG_FILE = "ciplan.toml"

MODE_KEYS = frozenset(("command", "args", "cache_key", "platform_independent"))


class PlanConfig(TypedDict):
    tool: str
    source: Path | None
    modes: ModeRegistry


@maybe
def get(d: dict, key: Any) -> Any:
    return d.get(key)


@impure_safe
def load_config_file(config_path: Path | None) -> dict[str, Any]:
    if config_path is None:
        default = Path(CONFIG_FILE)
        if not default.exists():
            return {}
        config_path = default
    elif not config_path.exists():
        raise ConfigError(f"config file '{config_path}' not found")

    try:
        dic = toml.loads(config_path.read_text())
    except toml.TomlDecodeError as e:
        raise ConfigError(f"{config_path}: {e}") from e
    dic["config_path"] = config_path
    return dic


def create_mode(mode_id: str, table: dict[str, Any]) -> Mode:
    unknown = set(table) - MODE_KEYS
    if unknown:
        raise InvalidModeError(
            f"mode '{mode_id}': unknown keys {{{', '.join(sorted(unknown))}}}"
        )
    if "command" not in table:
        raise InvalidModeError(f"mode '{mode_id}': missing 'command'")
    return Mode(
        name=mode_id,
        command=table["command"],
        args=table.get("args", ""),
        cache_key=table.get("cache_key", mode_id),
        platform_independent=table.get("platform_independent", False),
    )


def _table(config: dict[str, Any], key: str) -> dict[str, Any]:
    value = config.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table")
    return value


def _mode_ids(value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError("[ciplan] modes must be a list of mode ids")
    return value


def create_registry(config: dict[str, Any]) -> ModeRegistry:
    modes = dict(CODE)
    for mode_id, table in _table(config, "modes").items():
        if not isinstance(table, dict):
            raise ConfigError(f"[modes.{mode_id}] must be a table")
        # overriding a built-in keeps its position
        modes[mode_id] = create_mode(mode_id, table)

    registry = ModeRegistry(modes)
    return (
        get(_table(config, "ciplan"), "modes")
        .map(_mode_ids)
        .map(registry.select)
        .value_or(registry)
    )


def parse_config(config: dict[str, Any]) -> PlanConfig:
    tool = _table(config, "ciplan").get("tool", DEFAULT_TOOL)
    if not isinstance(tool, str) or not tool:
        raise ConfigError("[ciplan] tool must be a non-empty string")
    return PlanConfig(
        tool=tool,
        source=config.get("config_path"),
        modes=create_registry(config),
    )


def load_config(config_path: Path | None = None) -> IOResultE[PlanConfig]:
    return load_config_file(config_path).bind(impure_safe(parse_config))
