"""cspinject — write a Content-Security-Policy meta tag into built HTML.

Runs as a post-build step: picks a policy from ``csp.json`` by environment
and inserts it right after ``<head>`` in ``dist/index.html``.

Basic usage::

    from cspinject import InjectorConfig, inject, select_environment

    result = inject(select_environment(), InjectorConfig.for_root("."))
    print(result.status)
"""

__version__ = "0.1.0"
__all__ = [
    "ArtifactReadError",
    "ArtifactWriteError",
    "CSPInjectError",
    "ConfigParseError",
    "ConfigReadError",
    "HeadTagNotFoundError",
    "InjectionResult",
    "InjectorConfig",
    "PolicyResolutionError",
    "PolicyTable",
    "inject",
    "load_policy_table",
    "select_environment",
]

_ERRORS = (
    "ArtifactReadError",
    "ArtifactWriteError",
    "CSPInjectError",
    "ConfigParseError",
    "ConfigReadError",
    "HeadTagNotFoundError",
    "PolicyResolutionError",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import cspinject`` (and ``cspinject --version``) from loading kida.
    """
    if name in ("inject", "InjectionResult"):
        from cspinject import injector as _injector

        return getattr(_injector, name)

    if name in ("InjectorConfig", "select_environment"):
        from cspinject import config as _config

        return getattr(_config, name)

    if name in ("PolicyTable", "load_policy_table"):
        from cspinject import policy as _policy

        return getattr(_policy, name)

    if name in _ERRORS:
        from cspinject import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
