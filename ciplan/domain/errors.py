class UnknownModeError(KeyError):
    """Raised when a mode identifier is not in the registry."""

    def __init__(self, mode_id: str, known: tuple[str, ...] = ()):
        super().__init__(mode_id)
        self.mode_id = mode_id
        self.known = known

    def __str__(self) -> str:
        if self.known:
            return f"unknown mode '{self.mode_id}' -> {{{', '.join(self.known)}}}"
        return f"unknown mode '{self.mode_id}'"


class InvalidModeError(ValueError):
    pass


class ConfigError(Exception):
    pass
