from typing import Literal

Action = Literal["list", "show"]
Scope = Literal["all", "independent", "dependent"]


Cmd = tuple[str, ...]
