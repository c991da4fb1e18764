from ciplan.domain.entities import Mode
from ciplan.domain.registry import ModeRegistry

CODE = ModeRegistry(
    {
        "clippy": Mode(
            name="clippy",
            command="clippy",
            args="--locked --workspace --all-targets -- -D warnings",
            cache_key="clippy",
        ),
        "test": Mode(
            name="test",
            command="test",
            args="--locked --workspace",
            cache_key="test",
        ),
        "build": Mode(
            name="build",
            command="build",
            args="--locked --workspace",
            cache_key="build",
        ),
        "fmt": Mode(
            name="fmt",
            command="fmt",
            args="-- --check",
            cache_key="code",
            platform_independent=True,
        ),
        "docs": Mode(
            name="docs",
            command="doc",
            args="--locked --workspace --document-private-items",
            cache_key="doc",
            platform_independent=True,
        ),
    }
)
