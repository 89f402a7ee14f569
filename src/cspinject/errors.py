"""cspinject exception hierarchy.

Shared across policy loading, markup insertion, the injector, and the CLI
so every module raises and catches the same types. Every error is fatal:
the CLI maps any ``CSPInjectError`` to exit code 1.
"""

from pathlib import Path


class CSPInjectError(Exception):
    """Base for all cspinject errors.

    Carries the path of the file involved so the operator can see which
    artifact needs fixing.
    """

    def __init__(self, path: str | Path, detail: str = "") -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path}: {self.detail}"
        return str(self.path)


class ConfigReadError(CSPInjectError):
    """Policy table file is missing or unreadable."""


class ConfigParseError(CSPInjectError):
    """Policy table is not valid JSON, or not a flat object of strings."""


class PolicyResolutionError(CSPInjectError):
    """Neither the active environment nor the fallback key yields a policy."""

    def __init__(self, path: str | Path, environment: str, fallback_key: str) -> None:
        self.environment = environment
        self.fallback_key = fallback_key
        super().__init__(
            path,
            f"no policy for environment {environment!r} "
            f"and no {fallback_key!r} fallback",
        )


class ArtifactReadError(CSPInjectError):
    """Built HTML file is missing or unreadable.

    Usually means the injector ran before the build produced output.
    """


class ArtifactWriteError(CSPInjectError):
    """Writing the mutated HTML back to disk failed."""


class HeadTagNotFoundError(CSPInjectError):
    """Built HTML has no literal opening head tag to anchor the meta tag on."""
