"""cspinject CLI — post-build CSP meta-tag injection.

Entry point registered as ``cspinject`` in ``pyproject.toml``::

    [project.scripts]
    cspinject = "cspinject.cli:main"

Typically wired into a build script, e.g. ``"build": "vite build && cspinject"``.
"""

import argparse
import logging

from cspinject import __version__
from cspinject.config import DEFAULT_ENV_VAR


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``cspinject`` command."""
    parser = argparse.ArgumentParser(
        prog="cspinject",
        description="Inject a Content-Security-Policy meta tag into built HTML.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # -- file locations ---------------------------------------------------
    parser.add_argument(
        "--root",
        default=".",
        help="Build root that csp.json and dist/index.html live under (default: cwd)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Policy table JSON (default: <root>/csp.json)",
    )
    parser.add_argument(
        "--html",
        default=None,
        help="Built HTML file to patch (default: <root>/dist/index.html)",
    )

    # -- policy selection -------------------------------------------------
    parser.add_argument(
        "--env",
        default=None,
        help="Environment name; overrides the environment variable",
    )
    parser.add_argument(
        "--env-var",
        default=DEFAULT_ENV_VAR,
        help=f"Environment variable holding the environment name (default: {DEFAULT_ENV_VAR})",
    )
    parser.add_argument(
        "--fallback",
        default="default",
        help="Policy table key used when the environment has no entry",
    )

    # -- markup -----------------------------------------------------------
    parser.add_argument(
        "--escape-quotes",
        action="store_true",
        help="HTML-escape the policy value inside the content attribute",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each step to stderr",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from cspinject.cli._inject import run_inject

    run_inject(args)
