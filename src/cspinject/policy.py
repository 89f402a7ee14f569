"""Policy table — environment name to CSP directive string.

Loaded once per run from a flat JSON object::

    {
        "default": "default-src 'self';",
        "dev": "default-src 'self' 'unsafe-eval' ws://localhost:5173;"
    }
"""

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from cspinject.errors import ConfigParseError, ConfigReadError, PolicyResolutionError

logger = logging.getLogger("cspinject")


@dataclass(frozen=True, slots=True)
class PolicyTable(Mapping[str, str]):
    """Immutable mapping of environment name to policy string."""

    policies: Mapping[str, str] = field(default_factory=dict)
    source: Path = Path("<memory>")

    def __post_init__(self) -> None:
        object.__setattr__(self, "policies", MappingProxyType(dict(self.policies)))

    def __getitem__(self, key: str) -> str:
        return self.policies[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.policies)

    def __len__(self) -> int:
        return len(self.policies)

    def resolve(self, environment: str, fallback_key: str = "default") -> str:
        """Return the policy for *environment*, else the *fallback_key* policy.

        Empty strings count as missing, so an environment mapped to ``""``
        also falls back.

        Raises:
            PolicyResolutionError: If neither key yields a non-empty policy.

        """
        policy = self.policies.get(environment)
        if policy:
            return policy
        policy = self.policies.get(fallback_key)
        if policy:
            logger.debug(
                "No policy for environment %r, using %r fallback", environment, fallback_key
            )
            return policy
        raise PolicyResolutionError(self.source, environment, fallback_key)


def load_policy_table(path: str | Path, *, encoding: str = "utf-8") -> PolicyTable:
    """Read and validate the policy table at *path*.

    Raises:
        ConfigReadError: If the file is missing or unreadable.
        ConfigParseError: If the contents are not JSON, or not a flat
            object whose values are all strings.

    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise ConfigReadError(path, exc.strerror or str(exc)) from exc

    try:
        data = json.loads(raw.decode(encoding))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigParseError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        msg = f"expected a JSON object, got {type(data).__name__}"
        raise ConfigParseError(path, msg)
    for key, value in data.items():
        if not isinstance(value, str):
            msg = f"policy for {key!r} must be a string, got {type(value).__name__}"
            raise ConfigParseError(path, msg)

    logger.debug("Loaded %d policies from %s", len(data), path)
    return PolicyTable(data, source=path)
