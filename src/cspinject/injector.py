"""CSP injection into a built HTML artifact.

The whole run is one linear sequence: load the policy table, resolve the
active policy, read the artifact, and either stop (marker already present)
or insert the meta tag and write the artifact back in place. Each step
fails with its own ``CSPInjectError`` subclass and nothing is retried.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from cspinject.config import InjectorConfig
from cspinject.errors import ArtifactReadError, ArtifactWriteError, HeadTagNotFoundError
from cspinject.markup import insert_after_head, render_meta_tag
from cspinject.policy import load_policy_table

logger = logging.getLogger("cspinject")

type InjectionStatus = Literal["injected", "already-present"]


@dataclass(frozen=True, slots=True)
class InjectionResult:
    """Outcome of one ``inject()`` run."""

    status: InjectionStatus
    environment: str
    path: Path
    policy: str | None = None

    @property
    def changed(self) -> bool:
        return self.status == "injected"


def _read_artifact(path: Path, encoding: str) -> str:
    try:
        with open(path, encoding=encoding, newline="") as f:
            return f.read()
    except OSError as exc:
        raise ArtifactReadError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ArtifactReadError(path, f"not {encoding} text: {exc.reason}") from exc


def _write_artifact(path: Path, text: str, encoding: str) -> None:
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except OSError as exc:
        raise ArtifactWriteError(path, exc.strerror or str(exc)) from exc


def inject(environment: str, config: InjectorConfig | None = None) -> InjectionResult:
    """Inject the CSP meta tag for *environment* into the built artifact.

    The policy table is loaded and resolved before the artifact is read,
    so a misconfigured table is reported even on an already-injected page.

    Args:
        environment: Active environment name, used as the policy table key.
        config: File locations and markup options. Defaults to
            ``InjectorConfig()`` (``csp.json`` and ``dist/index.html``
            relative to the working directory).

    Returns:
        ``InjectionResult`` with status ``"injected"`` or ``"already-present"``.

    Raises:
        ConfigReadError: Policy table missing or unreadable.
        ConfigParseError: Policy table is not a flat JSON object of strings.
        PolicyResolutionError: No policy for *environment* and no fallback.
        ArtifactReadError: Artifact missing or unreadable.
        HeadTagNotFoundError: Artifact has no opening head tag.
        ArtifactWriteError: Artifact could not be written back.

    """
    config = config or InjectorConfig()
    logger.debug(
        "Injecting CSP: environment=%r policies=%s artifact=%s",
        environment,
        config.policy_path,
        config.artifact_path,
    )

    table = load_policy_table(config.policy_path, encoding=config.encoding)
    policy = table.resolve(environment, config.fallback_key)

    html = _read_artifact(config.artifact_path, config.encoding)
    if config.marker in html:
        logger.info("CSP already present in %s, leaving it untouched", config.artifact_path)
        return InjectionResult("already-present", environment, config.artifact_path)

    meta = render_meta_tag(policy, escape_quotes=config.escape_quotes)
    try:
        html = insert_after_head(html, meta, head_tag=config.head_tag, indent=config.indent)
    except ValueError as exc:
        raise HeadTagNotFoundError(config.artifact_path, str(exc)) from exc

    _write_artifact(config.artifact_path, html, config.encoding)
    logger.info("Injected CSP for %r into %s", environment, config.artifact_path)
    return InjectionResult("injected", environment, config.artifact_path, policy)
