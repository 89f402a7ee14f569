"""``cspinject`` run body: build the config and inject.

Prints one status line to stdout on success. Any ``CSPInjectError`` is
printed to stderr and exits with code 1.
"""

import argparse
import os
import sys
from pathlib import Path

from cspinject.config import InjectorConfig, select_environment
from cspinject.errors import CSPInjectError
from cspinject.injector import InjectionResult, inject


def build_config(args: argparse.Namespace) -> InjectorConfig:
    """Translate parsed arguments into an ``InjectorConfig``."""
    overrides: dict[str, object] = {
        "fallback_key": args.fallback,
        "escape_quotes": args.escape_quotes,
    }
    if args.config is not None:
        overrides["policy_path"] = Path(args.config)
    if args.html is not None:
        overrides["artifact_path"] = Path(args.html)
    return InjectorConfig.for_root(args.root, **overrides)


def format_result(result: InjectionResult) -> str:
    if result.changed:
        return f'Injected CSP for "{result.environment}" into {result.path}'
    return f"CSP already present in {result.path}"


def run_inject(args: argparse.Namespace) -> None:
    """Run one injection from parsed CLI arguments."""
    environment = args.env or select_environment(os.environ, var=args.env_var)
    config = build_config(args)

    try:
        result = inject(environment, config)
    except CSPInjectError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(format_result(result))
