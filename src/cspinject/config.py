"""Injector configuration.

InjectorConfig is a frozen dataclass. It is immutable after creation, resolved
once at the process entry point and passed down explicitly.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_ENV_VAR = "NODE_ENV"
DEFAULT_ENVIRONMENT = "prod"


@dataclass(frozen=True, slots=True)
class InjectorConfig:
    """Injector configuration. Immutable after creation.

    All fields have sensible defaults relative to the current directory.
    Override what you need::

        config = InjectorConfig(artifact_path=Path("build/index.html"))
    """

    # Files
    policy_path: Path = Path("csp.json")
    artifact_path: Path = Path("dist/index.html")
    encoding: str = "utf-8"

    # Policy lookup
    fallback_key: str = "default"

    # Markup
    marker: str = "Content-Security-Policy"  # Presence means "already injected"
    head_tag: str = "<head>"
    indent: str = "  "
    escape_quotes: bool = False  # Verbatim by default; a `"` in the policy breaks the tag

    @classmethod
    def for_root(cls, root: str | Path, **overrides: object) -> "InjectorConfig":
        """Build a config whose default file locations live under *root*.

        Relative ``policy_path``/``artifact_path`` overrides are resolved
        against *root* too; absolute ones are kept as given.
        """
        root = Path(root)
        config = cls(**overrides)  # type: ignore[arg-type]
        return replace(
            config,
            policy_path=root / config.policy_path,
            artifact_path=root / config.artifact_path,
        )


def select_environment(
    environ: Mapping[str, str] | None = None,
    var: str = DEFAULT_ENV_VAR,
    default: str = DEFAULT_ENVIRONMENT,
) -> str:
    """Return the active environment name.

    Reads *var* from *environ* (``os.environ`` when omitted). An unset or
    empty variable selects *default*.
    """
    if environ is None:
        environ = os.environ
    return environ.get(var) or default
