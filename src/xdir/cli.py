"""
xdir.cli

Command-line interface for xdir: print XDG base directory locations.

Responsibilities:
- Parse CLI arguments and dispatch subcommands.
- Print one location (get), every location (list) or the override
  variables in effect (env).
- Turn unresolvable locations into a non-zero exit status.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

import yaml

from .log import configure_logging
from .xdg import KINDS, app_dir, check_app_name, home, kind_names, resolve, resolve_all

# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def app_name(value: str) -> str:
    """argparse type for --app: a relative, non-blank subdirectory name."""
    try:
        return check_app_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def lookup(kind: str, app: str | None) -> Path | None:
    if app:
        return app_dir(kind, app)
    return resolve(kind)


def collect(app: str | None) -> dict[str, Path | None]:
    if not app:
        return resolve_all()
    return {kind: app_dir(kind, app) for kind in kind_names()}


def render(paths: dict[str, Path | None], fmt: str) -> str:
    """
    Render a kind -> path mapping.

    plain: one "kind<TAB>path" line per kind, "-" for unresolved
    json/yaml: unresolved kinds map to null
    """
    if fmt == "plain":
        return "\n".join(f"{k}\t{p if p is not None else '-'}" for k, p in paths.items())

    payload = {k: (str(p) if p is not None else None) for k, p in paths.items()}
    if fmt == "json":
        return json.dumps(payload, indent=2)
    return yaml.safe_dump(payload, sort_keys=False).rstrip("\n")

# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def cmd_get(args: argparse.Namespace) -> int:
    path = lookup(args.kind, args.app)
    if path is None:
        raise SystemExit(f"xdir: could not determine the {args.kind} directory")
    print(path)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    paths = collect(args.app)
    print(render(paths, args.format))

    missing = [k for k, p in paths.items() if p is None]
    if missing:
        print(f"unresolved: {', '.join(missing)}", file=sys.stderr)
    return 0


def cmd_env(args: argparse.Namespace) -> int:
    """Show which override variable each kind reads and whether it is set."""
    if os.environ.get("HOME"):
        print(f"home\tHOME\t{os.environ['HOME']}")
    else:
        found = home()
        status = f"(unset; resolved {found})" if found is not None else "(unset)"
        print(f"home\tHOME\t{status}")

    for kind, (var, _) in KINDS.items():
        value = os.environ.get(var)
        status = value if value else "(unset)"
        print(f"{kind}\t{var}\t{status}")
    return 0

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct top-level argument parser and subcommands.
    """
    p = argparse.ArgumentParser(prog="xdir")
    p.add_argument("-v", "--verbose", action="store_true", help="Log how each location was resolved")
    sub = p.add_subparsers(dest="cmd", required=True)

    pg = sub.add_parser("get", help="Print one directory location")
    pg.add_argument("kind", choices=kind_names(), help="Directory kind")
    pg.add_argument("--app", default=None, type=app_name, help="Append an application subdirectory")
    pg.set_defaults(func=cmd_get)

    pl = sub.add_parser("list", help="Print every directory location")
    pl.add_argument("--format", choices=["plain", "json", "yaml"], default="plain", help="Output format")
    pl.add_argument("--app", default=None, type=app_name, help="Append an application subdirectory")
    pl.set_defaults(func=cmd_list)

    pe = sub.add_parser("env", help="Show the override variables in effect")
    pe.set_defaults(func=cmd_env)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
