from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from returns.result import Failure, ResultE, Success

from ciplan.domain.entities import Mode, validate_mode
from ciplan.domain.errors import InvalidModeError, UnknownModeError


class ModeRegistry(Mapping[str, Mode]):
    """Read-only, insertion ordered mapping from mode id to `Mode`.

    Every entry is validated when the registry is built. Lookups of an
    unknown id raise `UnknownModeError`, `get` never falls back to a default.
    """

    def __init__(self, modes: Mapping[str, Mode] | Iterable[tuple[str, Mode]]):
        items = modes.items() if isinstance(modes, Mapping) else modes
        validated: dict[str, Mode] = {}
        for mode_id, mode in items:
            if mode_id in validated:
                raise InvalidModeError(f"mode '{mode_id}' is listed more than once")
            validated[mode_id] = validate_mode(mode_id, mode)
        self._modes: Mapping[str, Mode] = MappingProxyType(validated)

    def __getitem__(self, mode_id: str) -> Mode:
        try:
            return self._modes[mode_id]
        except KeyError:
            raise UnknownModeError(mode_id, tuple(self._modes)) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._modes)

    def __len__(self) -> int:
        return len(self._modes)

    def __repr__(self) -> str:
        return f"ModeRegistry({', '.join(self._modes)})"

    def get(self, mode_id: str) -> Mode:  # type: ignore[override]
        return self[mode_id]

    def lookup(self, mode_id: str) -> ResultE[Mode]:
        try:
            return Success(self[mode_id])
        except UnknownModeError as e:
            return Failure(e)

    def select(self, mode_ids: Iterable[str]) -> "ModeRegistry":
        return ModeRegistry((mode_id, self[mode_id]) for mode_id in mode_ids)

    def platform_independent(self) -> tuple[str, ...]:
        return tuple(k for k, mode in self._modes.items() if mode.platform_independent)

    def platform_dependent(self) -> tuple[str, ...]:
        return tuple(
            k for k, mode in self._modes.items() if not mode.platform_independent
        )

    def cache_groups(self) -> dict[str, tuple[str, ...]]:
        groups: dict[str, list[str]] = defaultdict(list)
        for mode_id, mode in self._modes.items():
            groups[mode.cache_key].append(mode_id)
        return {key: tuple(ids) for key, ids in groups.items()}
