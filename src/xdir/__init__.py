"""Platform-agnostic XDG base directory locations."""

import logging

from .xdg import (
    KINDS,
    app_dir,
    bin,
    cache,
    check_app_name,
    config,
    data,
    home,
    kind_names,
    resolve,
    resolve_all,
    runtime,
    state,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KINDS",
    "app_dir",
    "bin",
    "cache",
    "check_app_name",
    "config",
    "data",
    "home",
    "kind_names",
    "resolve",
    "resolve_all",
    "runtime",
    "state",
]
